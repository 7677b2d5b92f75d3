"""Tests for the batch driver and source loading."""

import logging

import pytest

from svgmint.config import Settings
from svgmint.converter import convert
from svgmint.engine.hashing import HashAllocator
from svgmint.engine.loader import load_source_file
from svgmint.errors import InputDirectoryMissingError, UnknownBlueprintError


def test_convert_keeps_valid_files_only(settings, tmp_path):
    records = convert(settings)
    assert [r.name for r in records] == ["fill", "radius", "styled", "icon", "icon"]

    out = tmp_path / "out"
    for name in ("fill", "radius", "styled", "icon"):
        assert (out / f"{name}.ts").exists()
    for name in ("bad", "nogeo", "fake", "notes"):
        assert not (out / f"{name}.ts").exists()

    index = (out / "index.ts").read_text(encoding="utf-8").splitlines()
    assert len(index) == 5
    assert index[0] == "export { Fill, FillContext } from './fill';"


def test_hashes_are_unique_per_run(settings):
    records = convert(settings)
    hashes = [r.svg_hash for r in records]
    assert len(set(hashes)) == len(records)


def test_same_named_files_are_namespaced_independently(tmp_path):
    root = tmp_path / "svg"
    for folder in ("a", "b"):
        (root / folder).mkdir(parents=True)
        (root / folder / "icon.svg").write_text(
            '<svg width="24" height="24"><rect id="a" fill="{{red|fillColor}}"/></svg>', encoding="utf-8"
        )
    first, second = convert(Settings(input=str(root), output=str(tmp_path / "out")))
    assert first.name == second.name == "icon"
    assert first.svg_hash != second.svg_hash
    assert f'id="{first.svg_hash}-a-{{{{uuid}}}}"' in first.svg
    assert f'id="{second.svg_hash}-a-{{{{uuid}}}}"' in second.svg


def test_skips_are_diagnosed(settings, caplog):
    caplog.set_level(logging.INFO)
    convert(settings)
    assert "Invalid CSS content in" in caplog.text
    assert "bad.svg" in caplog.text
    assert "Unable to determine dimensions of" in caplog.text
    assert "Not a valid SVG document" in caplog.text
    assert "Processed 5 svg's into:" in caplog.text


def test_missing_input_directory(tmp_path):
    settings = Settings(input=str(tmp_path / "missing"), output=str(tmp_path / "out"))
    with pytest.raises(InputDirectoryMissingError, match="Invalid input dir"):
        convert(settings)
    assert not (tmp_path / "out").exists()


def test_unknown_blueprint_writes_nothing(settings, tmp_path):
    with pytest.raises(UnknownBlueprintError):
        convert(settings.model_copy(update={"blueprint": "svelte"}))
    assert not (tmp_path / "out").exists()


def test_manifest(settings, tmp_path):
    convert(settings.model_copy(update={"manifest": True}))
    assert (tmp_path / "out" / "svgmint.svgmint.json").exists()


def test_angular_run(settings, tmp_path):
    convert(settings.model_copy(update={"blueprint": "angular", "module": "icons"}))
    root = tmp_path / "out" / "icons"
    assert (root / "icons.module.ts").exists()
    assert (root / "assets" / "icon.ts").exists()
    assert (root / "components" / "fill.component.ts").exists()
    assert not (root / "components" / "icon.component.ts").exists()


def test_seeded_runs_are_reproducible(settings, tmp_path):
    first = convert(settings, allocator=HashAllocator(seed=3))
    second = convert(
        settings.model_copy(update={"output": str(tmp_path / "again")}),
        allocator=HashAllocator(seed=3),
    )
    assert [r.svg_hash for r in first] == [r.svg_hash for r in second]
    assert (tmp_path / "out" / "styled.ts").read_text(encoding="utf-8") == (
        tmp_path / "again" / "styled.ts"
    ).read_text(encoding="utf-8")


def test_shared_allocator_spans_runs(settings, tmp_path):
    shared = HashAllocator(seed=3)
    first = convert(settings, allocator=shared)
    assert all(r.svg_hash in shared for r in first)

    second = convert(settings.model_copy(update={"output": str(tmp_path / "again")}), allocator=shared)
    hashes = [r.svg_hash for r in first + second]
    assert len(set(hashes)) == len(hashes)


def test_load_source_file(tmp_path):
    path = tmp_path / "my icon (1).svg"
    path.write_bytes(b'<svg width="1" height="1">\r\n  <rect/>\n</svg>\r')
    source = load_source_file(str(path), HashAllocator())
    assert source.name == "my-icon-1"
    assert source.svg == '<svg width="1" height="1">  <rect/></svg>'
    assert source.css == ""
    assert len(source.hash) == 6
