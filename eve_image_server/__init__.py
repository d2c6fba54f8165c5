"""URL helper for the EVE Online image server (https://images.evetech.net)."""
from __future__ import annotations

from .constants import BASE_URL, DEFAULT_SIZE, PLACEHOLDER_ID, VALID_SIZES
from .models import Category, ImageRef, Tenant, Variation
from .services.image_server import ImageServer, build_url, image_server, is_valid_size, resolve_size

__all__ = [
    "BASE_URL",
    "DEFAULT_SIZE",
    "PLACEHOLDER_ID",
    "VALID_SIZES",
    "Category",
    "ImageRef",
    "ImageServer",
    "Tenant",
    "Variation",
    "build_url",
    "image_server",
    "is_valid_size",
    "resolve_size",
]
