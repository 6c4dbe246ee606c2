"""Domain enumerations.

String-valued enums use the str mixin so they serialize cleanly to JSON and
remain comparable to plain strings.
"""

from __future__ import annotations

from enum import Enum


class ProductCategory(str, Enum):
    COFFEE = "coffee"
    TEA = "tea"
    SNACK = "snack"
    DESSERT = "dessert"

    @classmethod
    def _missing_(cls, value: object) -> ProductCategory | None:
        # Accept "Coffee", "COFFEE", " tea " etc.
        if isinstance(value, str):
            normalised = value.strip().lower()
            for member in cls:
                if member.value == normalised:
                    return member
        return None
