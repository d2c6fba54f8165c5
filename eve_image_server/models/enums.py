from __future__ import annotations

from enum import Enum


class Tenant(str, Enum):
    """Server realm whose image host is addressed."""

    TRANQUILITY = "tranquility"
    SINGULARITY = "singularity"


class Category(str, Enum):
    ALLIANCES = "alliances"
    CORPORATIONS = "corporations"
    CHARACTERS = "characters"
    TYPES = "types"


class Variation(str, Enum):
    PORTRAIT = "portrait"  # characters
    LOGO = "logo"  # alliances, corporations
    ICON = "icon"
    RENDER = "render"
    BLUEPRINT = "bp"
    BLUEPRINT_COPY = "bpc"
    RELIC = "relic"
