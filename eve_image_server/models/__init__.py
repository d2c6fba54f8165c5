from .enums import Category, Tenant, Variation
from .image_ref import ImageRef

__all__ = [
    "Category",
    "ImageRef",
    "Tenant",
    "Variation",
]
