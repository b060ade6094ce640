"""Tests for RealFilesystem against a temporary directory."""

from pathlib import Path

import pytest

from addon_loader.core.errors import StorageError
from addon_loader.core.filesystem import DryRunFilesystem, RealFilesystem
from addon_loader.core.registry import AddonRegistry


def test_write_text_atomic_creates_parent_and_leaves_no_temp_files(tmp_path: Path) -> None:
    fs = RealFilesystem()
    target = tmp_path / "nested" / "addons.txt"

    fs.write_text_atomic(target, "/a\n")
    fs.write_text_atomic(target, "/a\n/b\n")

    assert target.read_text(encoding="utf-8") == "/a\n/b\n"
    assert [p.name for p in target.parent.iterdir()] == ["addons.txt"]


def test_write_text_requires_parent(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        RealFilesystem().write_text(tmp_path / "missing" / "autoconfig.js", "x")


def test_ensure_dir_reports_creation(tmp_path: Path) -> None:
    fs = RealFilesystem()
    target = tmp_path / "defaults" / "pref"

    assert fs.ensure_dir(target) is True
    assert fs.ensure_dir(target) is False
    assert target.is_dir()


def test_existence_checks(tmp_path: Path) -> None:
    fs = RealFilesystem()
    addon = tmp_path / "addon"
    addon.mkdir()
    xpi = tmp_path / "addon.xpi"
    xpi.write_bytes(b"PK")

    assert fs.path_exists(addon)
    assert not fs.is_file(addon)
    assert fs.is_file(xpi)
    assert not fs.path_exists(tmp_path / "nope")


def test_dry_run_wrapper_leaves_disk_untouched(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    fs = DryRunFilesystem(RealFilesystem())
    target = tmp_path / "addons.txt"

    fs.write_text_atomic(target, "/a\n")
    created = fs.ensure_dir(tmp_path / "new")

    assert not target.exists()
    assert created is True
    assert not (tmp_path / "new").exists()
    assert f"Would write {target}" in capsys.readouterr().err


def test_registry_survives_reload(tmp_path: Path) -> None:
    fs = RealFilesystem()
    registry_path = tmp_path / "home" / "addons.txt"
    addon = tmp_path / "my-addon"
    addon.mkdir()

    registry = AddonRegistry.load(registry_path, fs)
    registry.add("my-addon", tmp_path)

    reloaded = AddonRegistry.load(registry_path, fs)
    assert reloaded.entries == (str(addon),)


def test_registry_survives_reload_with_form_feed_in_path(tmp_path: Path) -> None:
    fs = RealFilesystem()
    registry_path = tmp_path / "addons.txt"
    addon = tmp_path / "my\x0caddon"
    addon.mkdir()

    registry = AddonRegistry.load(registry_path, fs)
    registry.add(str(addon), tmp_path)

    assert AddonRegistry.load(registry_path, fs).entries == (str(addon),)


def test_registry_with_invalid_utf8_is_a_storage_error(tmp_path: Path) -> None:
    registry_path = tmp_path / "addons.txt"
    registry_path.write_bytes(b"\xff\xfe/bad\n")

    with pytest.raises(StorageError):
        AddonRegistry.load(registry_path, RealFilesystem())
