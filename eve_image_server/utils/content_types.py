"""Content types served by the image server.

Character portraits come back as JPEG; every other category is PNG.
"""
from __future__ import annotations

from eve_image_server.utils.values import as_value

_JPEG_CATEGORIES = frozenset({"characters"})


def content_type_for(category: str) -> str:
    if as_value(category).lower() in _JPEG_CATEGORIES:
        return "image/jpeg"
    return "image/png"
