"""Named file roots for reading and writing binary files."""

from __future__ import annotations

import errno
import os
from array import array
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, os.PathLike]


class FileManagerNotFoundError(LookupError):
    """Raised when no file manager is registered under a name."""


def _is_empty(path: Optional[PathLike]) -> bool:
    return path is None or os.fspath(path) == ""


class FileManager:
    """Reads and writes files relative to a root directory."""

    def __init__(self, name: str, relative_path: Optional[PathLike] = None) -> None:
        self._name = name
        self.root = Path.cwd() if _is_empty(relative_path) else Path.cwd() / relative_path

    def __repr__(self) -> str:
        return f"FileManager(name={self._name!r}, root={str(self.root)!r})"

    @property
    def name(self) -> str:
        return self._name

    def read_file(
        self, file_path: PathLike, typecode: Optional[str] = None
    ) -> Union[bytes, array]:
        """Read a file under the root.

        Without ``typecode`` the raw bytes are returned; with one, an
        ``array`` of that element type in native byte order.
        """
        full_path = self.root / file_path
        if not full_path.exists():
            raise FileNotFoundError(errno.ENOENT, "file not found", str(full_path))

        if typecode is None:
            return full_path.read_bytes()

        buffer = array(typecode)
        byte_size = full_path.stat().st_size
        if byte_size % buffer.itemsize:
            raise ValueError(
                f"file size ({byte_size} bytes) is not aligned to '{typecode}' "
                f"of size {buffer.itemsize}: {os.fspath(file_path)!r}"
            )
        buffer.frombytes(full_path.read_bytes())
        return buffer

    def write_file(self, data: Union[str, bytes, bytearray, memoryview, array], file_path: PathLike) -> Path:
        """Write ``data`` to a file under the root, creating directories; return its path."""
        full_path = self.root / file_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        payload = data.encode("utf-8") if isinstance(data, str) else memoryview(data).tobytes()
        full_path.write_bytes(payload)
        return full_path


class FileManagerRegistry:
    """File managers looked up by name."""

    def __init__(self) -> None:
        self._managers: dict[str, FileManager] = {}

    def make(self, name: str, relative_path: Optional[PathLike] = None) -> FileManager:
        """Return the manager called ``name``, creating it or moving its root."""
        manager = self._managers.get(name)
        if manager is None:
            manager = FileManager(name, relative_path)
            self._managers[name] = manager
        elif not _is_empty(relative_path):
            manager.root = Path.cwd() / relative_path
        return manager

    def get(self, name: str) -> FileManager:
        try:
            return self._managers[name]
        except KeyError:
            raise FileManagerNotFoundError(
                f"file manager {name!r} not found; create it with make()"
            ) from None

    def exists(self, name: str) -> bool:
        return name in self._managers


registry = FileManagerRegistry()


def make(name: str, relative_path: Optional[PathLike] = None) -> FileManager:
    """Return the shared manager called ``name``, creating it if needed."""
    return registry.make(name, relative_path)


def get(name: str) -> FileManager:
    """Return the shared manager called ``name``."""
    return registry.get(name)


def exists(name: str) -> bool:
    """Tell whether a shared manager called ``name`` exists."""
    return registry.exists(name)