import pytest

from filecrypt.core.session import Artifact
from filecrypt.utils.file_io import FileIO
from filecrypt.errors import IoFailureError


def test_read_input(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01")
    assert FileIO.read_input(str(path)) == (b"\x00\x01", "data.bin")


def test_read_missing(tmp_path):
    with pytest.raises(IoFailureError):
        FileIO.read_input(str(tmp_path / "missing"))


def test_write_binary(tmp_path):
    path = tmp_path / "out"
    saved = FileIO.write_artifact(str(path), Artifact(b"\xff", "x.bin", False))
    assert saved == str(path)
    assert path.read_bytes() == b"\xff"


def test_write_text_adds_suffix(tmp_path):
    saved = FileIO.write_artifact(str(tmp_path / "notes"),
                                  Artifact(b"hi", "x.txt", True))
    assert saved.endswith("notes.txt")
    assert (tmp_path / "notes.txt").read_bytes() == b"hi"


def test_write_failure(tmp_path):
    with pytest.raises(IoFailureError):
        FileIO.write_artifact(str(tmp_path / "no" / "such" / "dir.bin"),
                              Artifact(b"x", "x.bin", False))
