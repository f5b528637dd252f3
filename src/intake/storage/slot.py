# SPDX-License-Identifier: MIT

import os
import re
from pathlib import Path
from typing import Optional, Protocol

from intake.errors import StorageUnavailableError

_SAFE_KEY = re.compile(r"[A-Za-z0-9_.-]+")


class DurableSlot(Protocol):
    """
    Key-scoped byte storage.

    A read returns exactly what the last write for that key stored, or None
    when the key has never been written.
    """

    def read(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def write(self, key: str, data: bytes) -> None:
        raise NotImplementedError


class MemorySlot:
    """Dict-backed slot for tests and memory-only operation."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def read(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def write(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)


class FileSlot:
    """
    Stores each key as `<key>.yaml` inside a directory.

    Writes go to a temporary sibling that then replaces the target, so a
    reader sees either the previous content or the new content in full.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.fullmatch(key):
            raise StorageUnavailableError(f"Invalid slot key: {key!r}")
        return self.directory / f"{key}.yaml"

    def read(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageUnavailableError(
                f"Failed to read slot '{key}' from {path} ({exc!s})"
            ) from exc

    def write(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(data)
            os.replace(temp_path, path)
        except OSError as exc:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
            raise StorageUnavailableError(
                f"Failed to write slot '{key}' to {path} ({exc!s})"
            ) from exc
