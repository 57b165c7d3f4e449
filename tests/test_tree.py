"""Tests for classification, identifiers and the directory snapshot."""

import pytest

from finch.tree import STRING_EXTENSIONS, Asset, Directory, OutputKind, classify, identifier, scan


@pytest.mark.parametrize("ext", sorted(STRING_EXTENSIONS))
def test_allow_listed_extensions_are_strings(ext):
    assert classify(f"assets/file.{ext}") is OutputKind.STRING


@pytest.mark.parametrize("name", [
    "image.png", "blob.bin", "README", ".hidden", "shader.TXT", "archive.txt.gz", "trailing.",
])
def test_other_files_are_bytes(name):
    assert classify(name) is OutputKind.BYTES


def test_classify_ignores_directory_part():
    assert classify("dir.bin/notes.md") is OutputKind.STRING
    assert classify("dir.txt/blob") is OutputKind.BYTES


def test_identifier_replaces_dashes_and_drops_extension():
    assert identifier("my-asset.txt") == "my_asset"
    assert identifier("a-b-c") == "a_b_c"


def test_identifier_without_dash_is_unchanged():
    assert identifier("shader.frag") == "shader"
    assert identifier("textures") == "textures"


def test_identifier_keeps_inner_dots():
    assert identifier("font.v2.bin") == "font.v2"


class TestScan:

    def test_mirrors_directory_structure(self, asset_dir):
        tree = scan(asset_dir)

        assert tree.name == "assets"
        by_name = {child.name: child for child in tree.children}
        assert set(by_name) == {"a.txt", "sub"}

        a = by_name["a.txt"]
        assert isinstance(a, Asset)
        assert a.kind is OutputKind.STRING
        assert a.size == 2
        assert a.path == asset_dir / "a.txt"

        sub = by_name["sub"]
        assert isinstance(sub, Directory)
        assert [c.name for c in sub.children] == ["b.bin"]
        assert sub.children[0].kind is OutputKind.BYTES

    def test_empty_directory(self, tmp_path):
        tree = scan(tmp_path)
        assert tree.children == []
        assert tree.total_size == 0

    def test_iter_assets_and_total_size(self, asset_dir):
        (asset_dir / "sub" / "deeper").mkdir()
        (asset_dir / "sub" / "deeper" / "c.json").write_text("{}")

        tree = scan(asset_dir)

        names = sorted(asset.name for asset in tree.iter_assets())
        assert names == ["a.txt", "b.bin", "c.json"]
        assert tree.total_size == 2 + 2 + 2

    def test_directory_ident(self, tmp_path):
        (tmp_path / "ui-kit").mkdir()
        tree = scan(tmp_path)
        assert tree.children[0].ident == "ui_kit"
