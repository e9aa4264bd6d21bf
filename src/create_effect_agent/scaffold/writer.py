"""Directory writer for rendered projects.

Writes a RenderedFileSet into a target directory that is either absent
or empty. Files are written one by one in path order; the first
failure stops the run and is reported with its path. Files written
before the failure are left in place (there is no rollback), so a
retry needs the directory cleared first.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from create_effect_agent.errors import FileError, ValidationError
from create_effect_agent.fs import FileSystem, LocalFileSystem
from create_effect_agent.logging import get_logger

logger = get_logger("writer")


def check_target(target_dir: Path, fs: FileSystem | None = None) -> bool:
    """Verify target_dir is absent or an empty directory.

    Args:
        target_dir: Absolute path of the project directory.
        fs: Filesystem adapter. Defaults to the local disk.

    Returns:
        True if the directory already exists (and is empty), False if absent.

    Raises:
        ValidationError: If target_dir is a file or a non-empty directory.
        FileError: If the directory cannot be listed.
    """
    fs = fs or LocalFileSystem()
    if not fs.exists(target_dir):
        return False
    if not fs.is_dir(target_dir):
        raise ValidationError(
            f"'{target_dir}' exists and is not a directory. Please choose another path."
        )
    try:
        entries = fs.list_dir(target_dir)
    except OSError as exc:
        raise FileError(f"Failed to read directory {target_dir}: {exc}", str(target_dir)) from exc
    if entries:
        raise ValidationError(
            f"Directory '{target_dir}' is not empty. "
            f"Please choose an empty directory or a different path."
        )
    return True


def _target_for(root: Path, relative: str) -> Path:
    pure = PurePosixPath(relative)
    if pure.is_absolute() or ".." in pure.parts or not pure.parts:
        raise ValidationError(f"Refusing to write {relative!r} outside {root}")
    return root.joinpath(*pure.parts)


def write_files(
    target_dir: Path,
    files: Mapping[str, str],
    fs: FileSystem | None = None,
) -> list[str]:
    """Write every rendered file under target_dir.

    Args:
        target_dir: Absolute path of the project directory. Created
            (with parents) if it does not exist.
        files: Relative POSIX path -> content.
        fs: Filesystem adapter. Defaults to the local disk.

    Returns:
        The relative paths written, in lexical order.

    Raises:
        ValidationError: If target_dir is a file or a non-empty directory.
        FileError: On the first directory-creation or write failure,
            carrying the failing path.
    """
    fs = fs or LocalFileSystem()
    existed = check_target(target_dir, fs)

    if not existed:
        try:
            fs.mkdir_recursive(target_dir)
        except OSError as exc:
            raise FileError(
                f"Failed to create directory {target_dir}: {exc}", str(target_dir)
            ) from exc

    written: list[str] = []
    for relative in sorted(files):
        target = _target_for(target_dir, relative)
        try:
            fs.mkdir_recursive(target.parent)
            fs.write_text_file(target, files[relative])
        except OSError as exc:
            logger.debug("Write failed after %d of %d files", len(written), len(files))
            raise FileError(f"Failed to write file {target}: {exc}", str(target)) from exc
        written.append(relative)

    logger.debug("Wrote %d files to %s", len(written), target_dir)
    return written
