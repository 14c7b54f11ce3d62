"""Content hashing used to detect that two files have nothing to diff."""

from __future__ import annotations

import hashlib
import os
from collections.abc import Iterable

_CHUNK = 1024


class IdenticalFilesError(ValueError):
    """Raised when every file compared has the same contents."""

    def __init__(self, message: str = "There is no diff between the files") -> None:
        super().__init__(message)


def file_digest(path: str | os.PathLike[str]) -> bytes:
    """Return the SHA-256 digest of the file at ``path``."""
    digest = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK), b""):
            digest.update(chunk)
    return digest.digest()


def compare_hashes(paths: Iterable[str | os.PathLike[str]]) -> list[bytes]:
    """Hash every file and return the digests.

    Raises :class:`IdenticalFilesError` if no two neighbouring files differ.
    """
    digests = [file_digest(path) for path in paths]
    if all(a == b for a, b in zip(digests, digests[1:])):
        raise IdenticalFilesError()
    return digests