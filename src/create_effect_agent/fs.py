"""Filesystem capability used by the directory writer.

The writer never touches pathlib or os directly; it goes through a
FileSystem so tests can observe or fail individual operations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Minimal set of filesystem operations the writer needs."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def mkdir_recursive(self, path: Path) -> None: ...

    def write_text_file(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_dir(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in path.iterdir())

    def mkdir_recursive(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text_file(self, path: Path, content: str) -> None:
        # newline="" keeps template line endings exactly as authored.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
