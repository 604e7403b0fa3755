"""File-system port used by the scaffolder.

Every read and write performed while generating a project goes through a
``FileSystem`` implementation so that the merge engine and the generation
steps can run against real disk (``LocalFileSystem``) or an in-memory fake
(``MemoryFileSystem``) without any change in behaviour.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemError(Exception):
    """Raised when a file-system operation cannot be completed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class FileSystem(Protocol):
    """Minimal file-system surface required by the generation steps."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def write_bytes(self, path: Path, content: bytes) -> None: ...

    def mkdir(self, path: Path, *, parents: bool = False, exist_ok: bool = False) -> None: ...

    def remove(self, path: Path) -> None: ...


# ---------------------------------------------------------------------------
# Real disk
# ---------------------------------------------------------------------------


class LocalFileSystem:
    """``FileSystem`` backed by :mod:`pathlib`.

    ``OSError`` and undecodable file contents are re-raised as
    ``FileSystemError`` so callers only deal with one error type.
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read_text(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileSystemError(f"Cannot read {path}: {exc}", Path(path)) from exc

    def write_text(self, path: Path, content: str) -> None:
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileSystemError(f"Cannot write {path}: {exc}", Path(path)) from exc

    def write_bytes(self, path: Path, content: bytes) -> None:
        try:
            Path(path).write_bytes(content)
        except OSError as exc:
            raise FileSystemError(f"Cannot write {path}: {exc}", Path(path)) from exc

    def mkdir(self, path: Path, *, parents: bool = False, exist_ok: bool = False) -> None:
        try:
            Path(path).mkdir(parents=parents, exist_ok=exist_ok)
        except OSError as exc:
            raise FileSystemError(f"Cannot create directory {path}: {exc}", Path(path)) from exc

    def remove(self, path: Path) -> None:
        try:
            Path(path).unlink()
        except OSError as exc:
            raise FileSystemError(f"Cannot remove {path}: {exc}", Path(path)) from exc


# ---------------------------------------------------------------------------
# In-memory fake
# ---------------------------------------------------------------------------


class MemoryFileSystem:
    """In-memory ``FileSystem`` that mirrors ``LocalFileSystem`` semantics.

    Writes require the parent directory to exist and ``mkdir`` without
    ``exist_ok`` fails on an existing path, exactly as on disk.  File contents
    are stored as bytes keyed by absolute path.
    """

    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.dirs: set[Path] = set()

    # -- Queries -----------------------------------------------------------

    def exists(self, path: Path) -> bool:
        path = Path(path)
        return path in self.files or self.is_dir(path)

    def is_dir(self, path: Path) -> bool:
        path = Path(path)
        return path in self.dirs or path == path.parent

    def read_text(self, path: Path) -> str:
        path = Path(path)
        if path not in self.files:
            raise FileSystemError(f"Cannot read {path}: no such file", path)
        try:
            return self.files[path].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FileSystemError(f"Cannot read {path}: {exc}", path) from exc

    # -- Mutations ---------------------------------------------------------

    def write_text(self, path: Path, content: str) -> None:
        self.write_bytes(path, content.encode("utf-8"))

    def write_bytes(self, path: Path, content: bytes) -> None:
        path = Path(path)
        if not self.is_dir(path.parent):
            raise FileSystemError(f"Cannot write {path}: parent directory missing", path)
        if self.is_dir(path):
            raise FileSystemError(f"Cannot write {path}: is a directory", path)
        self.files[path] = bytes(content)

    def mkdir(self, path: Path, *, parents: bool = False, exist_ok: bool = False) -> None:
        path = Path(path)
        if path in self.files:
            raise FileSystemError(f"Cannot create directory {path}: file exists", path)
        if self.is_dir(path):
            if exist_ok:
                return
            raise FileSystemError(f"Cannot create directory {path}: already exists", path)
        if not self.is_dir(path.parent):
            if not parents:
                raise FileSystemError(
                    f"Cannot create directory {path}: parent directory missing", path
                )
            self.mkdir(path.parent, parents=True, exist_ok=True)
        self.dirs.add(path)

    def remove(self, path: Path) -> None:
        path = Path(path)
        if path not in self.files:
            raise FileSystemError(f"Cannot remove {path}: no such file", path)
        del self.files[path]

    # -- Test helpers ------------------------------------------------------

    def listdir(self, path: Path) -> list[str]:
        """Return the sorted names of files and directories directly under *path*."""
        path = Path(path)
        names = {p.name for p in self.files if p.parent == path}
        names.update(d.name for d in self.dirs if d.parent == path and d != path)
        return sorted(names)
