import pytest

from chunkpress.file_io import read_file, write_file


def test_read_write_binary_file(tmp_path):
    target = tmp_path / "test.bin"
    data = bytes([1, 2, 3, 4, 5])

    write_file(target, data)

    assert read_file(target) == data


def test_read_nonexistent_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "no_such_file_999999.bin")


def test_write_and_read_empty_file(tmp_path):
    target = tmp_path / "empty_test.bin"

    write_file(target, b"")

    assert read_file(target) == b""


def test_write_invalid_path_raises(tmp_path):
    target = tmp_path / "missing_directory" / "invalid_write_test.bin"
    with pytest.raises(OSError):
        write_file(target, bytes([10, 20, 30]))


def test_overwrite_file(tmp_path):
    target = tmp_path / "overwrite_test.bin"
    first = bytes([1, 2, 3, 4, 5])
    second = bytes([99, 88, 77])

    write_file(target, first)
    write_file(target, second)

    result = read_file(target)
    assert len(result) == len(second)
    assert result == second


def test_accepts_string_path(tmp_path):
    target = str(tmp_path / "string_path.bin")
    write_file(target, bytearray(b"\x00\xff\x10"))
    assert read_file(target) == b"\x00\xff\x10"