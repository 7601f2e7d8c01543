from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"
    VIEWER = "VIEWER"

    def can_create(self) -> bool:
        return self is not Role.VIEWER

    def can_update(self) -> bool:
        return self is not Role.VIEWER

    def can_delete(self) -> bool:
        return self is not Role.VIEWER
