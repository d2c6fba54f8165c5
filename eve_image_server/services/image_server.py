"""URL builder for the EVE Online image server.

Every image is addressed with the same pattern:

    https://images.evetech.net/{category}/{id}/{variation}?size={size}&tenant={tenant}

Categories and their variations:

    alliances      logo
    corporations   logo (NPC factions too, via the faction ID)
    characters     portrait
    types          icon, render, bp, bpc, relic

Nothing here talks to the network; callers get a URL string and fetch it
however they like.
"""
from __future__ import annotations

import logging
from urllib.parse import urlencode

from eve_image_server.constants import BASE_URL, DEFAULT_SIZE, VALID_SIZES
from eve_image_server.models import ImageRef, Tenant
from eve_image_server.utils.content_types import content_type_for
from eve_image_server.utils.values import as_value

logger = logging.getLogger(__name__)


def is_valid_size(size: object) -> bool:
    # bool is an int subclass but never a valid size
    return isinstance(size, int) and not isinstance(size, bool) and size in VALID_SIZES


def resolve_size(size: object) -> int:
    if is_valid_size(size):
        return size  # type: ignore[return-value]
    logger.debug("Unsupported image size %r, using %d", size, DEFAULT_SIZE)
    return DEFAULT_SIZE


def build_url(
    category: str,
    entity_id: int,
    variation: str,
    size: int,
    tenant: Tenant | str,
    *,
    base_url: str = BASE_URL,
) -> str:
    """Return the image URL for one (category, id, variation) triple.

    An unsupported ``size`` is replaced by 128 rather than rejected. Category,
    variation and tenant are interpolated as given. ``entity_id`` is rendered
    with ``%d``, so a float ID is truncated toward zero. Trailing slashes on
    ``base_url`` are dropped.
    """

    params = urlencode(
        {
            "size": resolve_size(size),
            "tenant": as_value(tenant),
        }
    )
    return "%s/%s/%d/%s?%s" % (
        base_url.rstrip("/"),
        as_value(category),
        entity_id,
        as_value(variation),
        params,
    )


class ImageServer:
    """Per-entity accessors for image server URLs."""

    base_url = BASE_URL

    # ------------------------------------------------------------------
    # Characters
    # ------------------------------------------------------------------

    def get_character_portrait(
        self,
        character_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        """Portrait URL for a character. Portraits are served as JPEG."""

        return self.build_url("characters", character_id, "portrait", size, tenant)

    # ------------------------------------------------------------------
    # Alliances
    # ------------------------------------------------------------------

    def get_alliance_logo(
        self,
        alliance_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        return self.build_url("alliances", alliance_id, "logo", size, tenant)

    # ------------------------------------------------------------------
    # Corporations & NPC factions
    # ------------------------------------------------------------------

    def get_corporation_logo(
        self,
        corporation_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        return self.build_url("corporations", corporation_id, "logo", size, tenant)

    def get_faction_logo(
        self,
        faction_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        """NPC faction logos live under the corporations category, keyed by faction ID."""

        return self.build_url("corporations", faction_id, "logo", size, tenant)

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def get_type_icon(
        self,
        type_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        return self.build_url("types", type_id, "icon", size, tenant)

    def get_type_render(
        self,
        type_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        """Available for ships and some structures."""

        return self.build_url("types", type_id, "render", size, tenant)

    def get_type_blueprint(
        self,
        type_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        return self.build_url("types", type_id, "bp", size, tenant)

    def get_type_blueprint_copy(
        self,
        type_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        return self.build_url("types", type_id, "bpc", size, tenant)

    def get_type_relic(
        self,
        type_id: int,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        """Used for Sleeper relic and salvage types."""

        return self.build_url("types", type_id, "relic", size, tenant)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def build_url(
        self,
        category: str,
        entity_id: int,
        variation: str,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> str:
        return build_url(category, entity_id, variation, size, tenant, base_url=self.base_url)

    def describe(
        self,
        category: str,
        entity_id: int,
        variation: str,
        size: int = DEFAULT_SIZE,
        tenant: Tenant | str = Tenant.TRANQUILITY,
    ) -> ImageRef:
        """Return an :class:`ImageRef` with the resolved size, URL and content type."""

        return ImageRef(
            category=as_value(category),
            entity_id=entity_id,
            variation=as_value(variation),
            size=resolve_size(size),
            tenant=as_value(tenant),
            url=self.build_url(category, entity_id, variation, size, tenant),
            content_type=content_type_for(category),
        )


# Singleton instance
image_server = ImageServer()
