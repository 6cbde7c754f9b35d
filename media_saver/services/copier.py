"""Flat copier for supported media files.

Walks a source tree and copies every file whose extension is in the
allow-list directly into one destination directory. The hierarchy is not
preserved: two files with the same name in different folders collide and the
one copied last wins.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from typing import Iterator, Optional

from media_saver.core import is_supported, normalized_extension
from .errors import CopyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopyTask:
    """A single source file and where it will be written."""
    source: str
    destination: str


@dataclass
class CopySummary:
    """Counters collected while copying a tree."""
    scanned: int = 0   # regular files seen
    matched: int = 0   # files with a supported extension
    copied: int = 0
    failed: int = 0
    skipped: int = 0   # unsupported extension


def walk_files(root, follow_symlinks: bool = False) -> Iterator[str]:
    """Yield every regular file below ``root``, recursively.

    Directory symlinks are only descended when ``follow_symlinks`` is True;
    in that case a directory already reached through another path is skipped
    so that link cycles terminate. Unreadable directories are logged and
    skipped.
    """
    visited = set()

    def _on_error(exc: OSError) -> None:
        logger.warning("Cannot read directory %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=follow_symlinks):
        if follow_symlinks:
            real = os.path.realpath(dirpath)
            if real in visited:
                logger.warning("Skipping already visited directory (symlink loop?): %s", dirpath)
                dirnames[:] = []
                continue
            visited.add(real)

        dirnames.sort()
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if os.path.isfile(path):
                yield path


def _task_for(path: str, destination_dir) -> CopyTask:
    return CopyTask(path, os.path.join(os.fspath(destination_dir), os.path.basename(path)))


def plan_copies(source_dir, destination_dir, follow_symlinks: bool = False,
                summary: Optional[CopySummary] = None) -> Iterator[CopyTask]:
    """Yield a ``CopyTask`` for each supported file, in traversal order.

    When ``summary`` is given its ``scanned``, ``matched`` and ``skipped``
    counters are updated as the walk goes.
    """
    for path in walk_files(source_dir, follow_symlinks=follow_symlinks):
        if summary is not None:
            summary.scanned += 1
        if not is_supported(normalized_extension(path)):
            logger.debug("Skipping unsupported file: %s", path)
            if summary is not None:
                summary.skipped += 1
            continue
        if summary is not None:
            summary.matched += 1
        yield _task_for(path, destination_dir)


def _copy_bytes(source, destination) -> None:
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise CopyError(source, destination, e) from e


def copy_file(source, destination) -> bool:
    """Copy ``source`` over ``destination`` byte for byte.

    An existing destination is overwritten; missing parent directories are
    not created. Filesystem errors are reported and turned into a False
    return value instead of being raised.
    """
    try:
        _copy_bytes(source, destination)
    except CopyError as e:
        logger.error("Failed to copy %s: %s", source, e.cause)
        print(f"Error saving file: {e}", file=sys.stderr)
        return False

    logger.info("Copied %s -> %s", source, destination)
    print(f"File saved successfully: {destination}")
    return True


def copy_all_supported(source_dir, destination_dir, follow_symlinks: bool = False) -> CopySummary:
    """Copy every supported file under ``source_dir`` into ``destination_dir``.

    Failures are counted and the walk goes on with the next file.
    """
    summary = CopySummary()
    for task in plan_copies(source_dir, destination_dir, follow_symlinks=follow_symlinks, summary=summary):
        if copy_file(task.source, task.destination):
            summary.copied += 1
        else:
            summary.failed += 1

    logger.info(
        "Copy finished: %d scanned, %d copied, %d failed, %d skipped",
        summary.scanned, summary.copied, summary.failed, summary.skipped,
    )
    return summary
