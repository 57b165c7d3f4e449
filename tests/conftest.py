import pytest


@pytest.fixture
def asset_dir(tmp_path):
    """a.txt ("hi") and sub/b.bin (01 02) under tmp_path/assets."""
    root = tmp_path / "assets"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hi")
    (root / "sub").mkdir()
    (root / "sub" / "b.bin").write_bytes(b"\x01\x02")
    return root
