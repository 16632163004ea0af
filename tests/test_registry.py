import json

import pytest

from versionfox.registry import (
    RegistryIndexItem,
    RegistryPluginManifest,
    parse_plugin_manifest,
    parse_registry_index,
)


def test_parse_registry_index_from_text():
    entries = [
        {"name": "nodejs", "desc": "Node runtime", "homepage": "https://example.com/node"},
        {"name": "python", "desc": "Python runtime", "homepage": "https://example.com/python"},
    ]
    items = parse_registry_index(json.dumps(entries))
    assert items == [
        RegistryIndexItem("nodejs", "Node runtime", "https://example.com/node"),
        RegistryIndexItem("python", "Python runtime", "https://example.com/python"),
    ]


def test_parse_registry_index_missing_and_extra_fields():
    items = parse_registry_index(b'[{"name": "java", "stars": 3}]')
    assert items == [RegistryIndexItem(name="java", desc="", homepage="")]


def test_parse_registry_index_null_is_empty():
    assert parse_registry_index("null") == []


def test_parse_registry_index_rejects_object():
    with pytest.raises(ValueError):
        parse_registry_index('{"name": "java"}')


def test_parse_registry_index_rejects_invalid_json():
    with pytest.raises(ValueError):
        parse_registry_index("[{")


def test_parse_registry_index_rejects_wrong_field_type():
    with pytest.raises(ValueError):
        parse_registry_index([{"name": 5}])


def test_parse_plugin_manifest():
    data = {
        "name": "nodejs",
        "version": "0.1.0",
        "license": "Apache 2.0",
        "author": "someone",
        "downloadUrl": "https://example.com/nodejs-0.1.0.zip",
        "minRuntimeVersion": "0.3.0",
    }
    manifest = parse_plugin_manifest(json.dumps(data))
    assert manifest == RegistryPluginManifest(
        name="nodejs",
        version="0.1.0",
        license="Apache 2.0",
        author="someone",
        download_url="https://example.com/nodejs-0.1.0.zip",
        min_runtime_version="0.3.0",
    )


def test_parse_plugin_manifest_from_dict_with_missing_fields():
    manifest = parse_plugin_manifest({"name": "java", "version": "1.0.0"})
    assert manifest.name == "java"
    assert manifest.version == "1.0.0"
    assert manifest.download_url == ""
    assert manifest.min_runtime_version == ""


def test_parse_plugin_manifest_rejects_array():
    with pytest.raises(ValueError):
        parse_plugin_manifest("[]")