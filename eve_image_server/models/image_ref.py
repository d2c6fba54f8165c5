from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ImageRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    entity_id: int
    variation: str
    size: int = Field(..., ge=1)  # resolved, always one of VALID_SIZES
    tenant: str
    url: str
    content_type: str  # "image/jpeg" for portraits, "image/png" otherwise
