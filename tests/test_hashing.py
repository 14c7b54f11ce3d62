import pytest

from sidediff.hashing import IdenticalFilesError, compare_hashes, file_digest


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_empty_file_digest(tmp_path):
    path = _write(tmp_path, "empty", b"")
    assert file_digest(path).hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_digest_spans_many_chunks(tmp_path):
    big = _write(tmp_path, "big", b"x" * 5000)
    same = _write(tmp_path, "same", b"x" * 5000)
    other = _write(tmp_path, "other", b"x" * 4999 + b"y")
    assert file_digest(big) == file_digest(same)
    assert file_digest(big) != file_digest(other)
    assert len(file_digest(big)) == 32


def test_identical_files_raise(tmp_path):
    a = _write(tmp_path, "a", b"hello\n")
    b = _write(tmp_path, "b", b"hello\n")
    with pytest.raises(IdenticalFilesError, match="no diff"):
        compare_hashes([a, b])


def test_different_files_return_digests(tmp_path):
    a = _write(tmp_path, "a", b"hello\n")
    b = _write(tmp_path, "b", b"world\n")
    digests = compare_hashes([a, b])
    assert digests == [file_digest(a), file_digest(b)]


def test_missing_file_raises(tmp_path):
    a = _write(tmp_path, "a", b"hello\n")
    with pytest.raises(FileNotFoundError):
        compare_hashes([a, tmp_path / "missing"])