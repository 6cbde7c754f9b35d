"""Pure extension helpers: the fixed media allow-list and its lookups."""
from __future__ import annotations

import os
from typing import Optional


AUDIO_EXTENSIONS = frozenset({
    '.mp3', '.wav', '.ogg', '.flac', '.aac', '.wma', '.m4a',
})

VIDEO_EXTENSIONS = frozenset({
    '.mp4', '.avi', '.mkv', '.mov', '.wmv', '.flv', '.webm',
})

IMAGE_EXTENSIONS = frozenset({
    '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.tiff', '.webp',
})

SUPPORTED_EXTENSIONS = AUDIO_EXTENSIONS | VIDEO_EXTENSIONS | IMAGE_EXTENSIONS

_CATEGORIES = (
    ('audio', AUDIO_EXTENSIONS),
    ('video', VIDEO_EXTENSIONS),
    ('image', IMAGE_EXTENSIONS),
)


def is_supported(extension: str) -> bool:
    """Return True if ``extension`` is in the allow-list.

    The match is exact: pass the lowercase extension with its leading dot
    (``".mp3"``). ``".MP3"`` is not supported; lowercase it first, or use
    :func:`normalized_extension`.
    """
    return extension in SUPPORTED_EXTENSIONS


def category_of(extension: str) -> Optional[str]:
    """Return ``'audio'``, ``'video'``, ``'image'`` or None (exact match)."""
    for name, extensions in _CATEGORIES:
        if extension in extensions:
            return name
    return None


def normalized_extension(path) -> str:
    """Lowercased suffix of ``path`` including the dot, ``""`` if none.

    ``"clip.MP4"`` -> ``".mp4"``; ``".bashrc"`` -> ``""`` (dotfiles have no
    suffix).
    """
    return os.path.splitext(os.fspath(path))[1].lower()
