"""Media metadata probing.

Reads length, audio format and picture size through the media libraries
(pydub for audio, moviepy for video, Pillow for images). Library access is
isolated here so the CLI and tests can mock it.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from moviepy import VideoFileClip
from PIL import Image
from pydub import AudioSegment

from media_saver.core import add_durations, category_of, normalized_extension
from .copier import walk_files
from .errors import ProbeError, UnsupportedMediaError

logger = logging.getLogger(__name__)


@dataclass
class MediaInfo:
    """Metadata read from one media file."""
    path: str
    category: str                      # audio | video | image
    duration_seconds: Optional[int] = None
    sample_rate: Optional[int] = None
    channels: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    error: str = ""


def _probe_audio(path: str) -> MediaInfo:
    segment = AudioSegment.from_file(path)
    return MediaInfo(
        path=path,
        category='audio',
        duration_seconds=int(len(segment) // 1000),
        sample_rate=segment.frame_rate,
        channels=segment.channels,
    )


def _probe_video(path: str) -> MediaInfo:
    clip = VideoFileClip(path)
    try:
        width, height = clip.size
        return MediaInfo(
            path=path,
            category='video',
            duration_seconds=int(clip.duration),
            width=width,
            height=height,
        )
    finally:
        clip.close()


def _probe_image(path: str) -> MediaInfo:
    with Image.open(path) as img:
        width, height = img.size
    return MediaInfo(path=path, category='image', width=width, height=height)


_PROBES = {
    'audio': _probe_audio,
    'video': _probe_video,
    'image': _probe_image,
}


def probe_file(path) -> MediaInfo:
    """Read metadata for a single supported file.

    Durations are truncated to whole seconds. Raises ``UnsupportedMediaError``
    for extensions outside the allow-list and ``ProbeError`` when the media
    library cannot read the file.
    """
    path = os.fspath(path)
    category = category_of(normalized_extension(path))
    if category is None:
        raise UnsupportedMediaError(f"Unsupported media file: {path}")

    logger.debug("Probing %s file: %s", category, path)
    try:
        return _PROBES[category](path)
    except Exception as e:
        logger.error("Failed to probe %s: %s", path, e)
        raise ProbeError(str(e)) from e


def inspect_directory(directory, follow_symlinks: bool = False) -> List[MediaInfo]:
    """Probe every supported file below ``directory``.

    A file that cannot be read is kept in the result with ``error`` set; the
    walk continues.
    """
    infos: List[MediaInfo] = []
    for path in walk_files(directory, follow_symlinks=follow_symlinks):
        category = category_of(normalized_extension(path))
        if category is None:
            continue
        try:
            infos.append(probe_file(path))
        except ProbeError as e:
            infos.append(MediaInfo(path=path, category=category, error=str(e)))
    logger.info("Inspected %d media files in %s", len(infos), directory)
    return infos


def total_duration(infos: Iterable[MediaInfo]) -> int:
    """Sum of the known durations, in seconds."""
    total = 0
    for info in infos:
        if info.duration_seconds is not None:
            total = add_durations(total, info.duration_seconds)
    return total
