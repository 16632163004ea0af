"""Plugin registry index and manifest records."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class RegistryIndexItem:
    """One entry of the registry index."""

    name: str = ""
    desc: str = ""
    homepage: str = ""


@dataclass
class RegistryPluginManifest:
    """Manifest describing a remote plugin."""

    name: str = ""
    version: str = ""
    license: str = ""
    author: str = ""
    download_url: str = ""
    min_runtime_version: str = ""


def _load(data: Any) -> Any:
    if isinstance(data, (str, bytes, bytearray)):
        return json.loads(data)
    return data


def _string_fields(obj: Any, mapping: dict[str, str]) -> dict[str, str]:
    if not isinstance(obj, dict):
        raise ValueError(f"expected a JSON object, got {type(obj).__name__}")
    values: dict[str, str] = {}
    for json_key, attr in mapping.items():
        value = obj.get(json_key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"field {json_key!r} must be a string")
        values[attr] = value
    return values


_INDEX_FIELDS = {"name": "name", "desc": "desc", "homepage": "homepage"}
_MANIFEST_FIELDS = {
    "name": "name",
    "version": "version",
    "license": "license",
    "author": "author",
    "downloadUrl": "download_url",
    "minRuntimeVersion": "min_runtime_version",
}


def parse_registry_index(data: Any) -> list[RegistryIndexItem]:
    """Parse the registry index from JSON text or an already decoded list."""
    decoded = _load(data)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError("registry index must be a JSON array")
    return [RegistryIndexItem(**_string_fields(item, _INDEX_FIELDS)) for item in decoded]


def parse_plugin_manifest(data: Any) -> RegistryPluginManifest:
    """Parse a plugin manifest from JSON text or an already decoded object."""
    decoded = _load(data)
    if decoded is None:
        return RegistryPluginManifest()
    return RegistryPluginManifest(**_string_fields(decoded, _MANIFEST_FIELDS))