from __future__ import annotations

from enum import Enum


class RecordKind(str, Enum):
    """Record kinds that carry a reference number, valued by their prefix."""

    BREEDING = "BR"
    HEALTH = "HR"
    EXPENSE = "EXP"
    SALE = "SR"
    INVENTORY = "INV"

    @property
    def prefix(self) -> str:
        return self.value
