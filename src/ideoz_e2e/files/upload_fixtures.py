"""Generated upload fixtures.

Files are written into ``settings.test_files_dir`` unless a directory is
given, and padded with spaces to the requested size so size-limit
scenarios can be exercised without binary fixtures in the repository.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ideoz_e2e.config import get_settings
from ideoz_e2e.config.logging import get_logger
from ideoz_e2e.core.exceptions import TestFileError

log = get_logger(__name__)


def create_test_file(
    name: str,
    content: str = "Test file content",
    size_kb: int = 1,
    directory: str | Path | None = None,
) -> Path:
    """
    Write an upload fixture.

    Args:
        name: File name, special characters allowed
        content: Leading text of the file
        size_kb: Target size; content is right-padded with spaces to
            ``size_kb * 1024`` characters and never truncated
        directory: Target directory, created if missing

    Returns:
        Path of the written file

    Raises:
        TestFileError: If the directory or file cannot be written
    """
    target_dir = Path(directory) if directory is not None else get_settings().test_files_dir
    file_path = target_dir / name

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content.ljust(size_kb * 1024), encoding="utf-8")
    except OSError as e:
        raise TestFileError(f"Could not write {file_path}: {e}") from e

    log.debug("test_file_created", path=str(file_path), size_kb=size_kb)
    return file_path


def validate_file_size(file_path: str | Path, max_size_kb: int = 100) -> bool:
    """
    Check a file against the upload limit.

    Raises:
        TestFileError: If the file does not exist
    """
    try:
        size = Path(file_path).stat().st_size
    except OSError as e:
        raise TestFileError(f"Could not stat {file_path}: {e}") from e
    return size / 1024 <= max_size_kb


def cleanup_test_files(directory: str | Path | None = None) -> bool:
    """Remove the fixture directory. Returns whether anything was removed."""
    target_dir = Path(directory) if directory is not None else get_settings().test_files_dir
    if not target_dir.exists():
        return False

    shutil.rmtree(target_dir, ignore_errors=True)
    log.debug("test_files_removed", path=str(target_dir))
    return True
