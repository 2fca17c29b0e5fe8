import pytest

from traderfmt.errors import InvalidPathError, SourceReadError
from traderfmt.files import load_source


def test_load_source_reads_whole_file(tmp_path) -> None:
    path = tmp_path / "TraderConfig.txt"
    path.write_text("<Trader> Bob\n    <Category> Food\n", encoding="utf-8")

    assert load_source(path) == "<Trader> Bob\n    <Category> Food\n"


def test_load_source_strips_byte_order_mark(tmp_path) -> None:
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbf// hi\n")

    assert load_source(str(path)) == "// hi\n"


def test_missing_path_is_invalid(tmp_path) -> None:
    with pytest.raises(InvalidPathError) as excinfo:
        load_source(tmp_path / "missing.txt")

    assert excinfo.value.diagnostic.code == "IO_INVALID_PATH"
    assert "missing.txt" in str(excinfo.value)


def test_directory_is_invalid(tmp_path) -> None:
    with pytest.raises(InvalidPathError):
        load_source(tmp_path)


def test_undecodable_file_is_a_read_error(tmp_path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(SourceReadError) as excinfo:
        load_source(path)

    assert excinfo.value.diagnostic.code == "IO_READ_FAILED"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
