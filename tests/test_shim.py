import os

import pytest

from versionfox.shim import Shim


@pytest.fixture
def binary(tmp_path):
    bin_dir = tmp_path / "sdk" / "bin"
    bin_dir.mkdir(parents=True)
    path = bin_dir / "node"
    path.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def shims_dir(tmp_path):
    path = tmp_path / "shims"
    path.mkdir()
    return path


def test_generate_creates_link_to_binary(binary, shims_dir):
    shim = Shim(str(binary), str(shims_dir))
    shim.generate()
    link = shims_dir / "node"
    assert os.path.islink(link)
    assert os.readlink(link) == str(binary)


def test_generate_replaces_previous_link(binary, shims_dir, tmp_path):
    other = tmp_path / "other" / "node"
    other.parent.mkdir()
    other.write_text("old")
    Shim(str(other), str(shims_dir)).generate()
    Shim(str(binary), str(shims_dir)).generate()
    assert os.readlink(shims_dir / "node") == str(binary)


def test_generate_replaces_regular_file(binary, shims_dir):
    (shims_dir / "node").write_text("stale")
    Shim(str(binary), str(shims_dir)).generate()
    assert os.readlink(shims_dir / "node") == str(binary)


def test_clear_removes_link(binary, shims_dir):
    shim = Shim(str(binary), str(shims_dir))
    shim.generate()
    shim.clear()
    assert not os.path.lexists(shims_dir / "node")
    assert binary.exists()


def test_clear_without_shim_leaves_directory_empty(binary, shims_dir):
    Shim(str(binary), str(shims_dir)).clear()
    assert list(shims_dir.iterdir()) == []


def test_target_is_inside_output_path(binary, shims_dir):
    shim = Shim(str(binary), str(shims_dir))
    assert shim.target == os.path.join(str(shims_dir), "node")