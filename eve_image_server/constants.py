"""Fixed values of the EVE Online image server.

See https://docs.esi.evetech.net/docs/image_server.html
"""
from __future__ import annotations

BASE_URL = "https://images.evetech.net"

VALID_SIZES: tuple[int, ...] = (32, 64, 128, 256, 512, 1024)
DEFAULT_SIZE = 128

# Upstream serves a generic "no image" picture for id 1.
PLACEHOLDER_ID = 1
