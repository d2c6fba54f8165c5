from __future__ import annotations

from enum import Enum


def as_value(value: object) -> str:
    # str-mixin enums render as "Tenant.TRANQUILITY" under str(); use the value
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
