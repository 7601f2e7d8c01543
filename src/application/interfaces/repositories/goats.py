from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from src.domain.models.goat import Goat


class GoatRepository(Protocol):
    async def add(self, goat: Goat) -> Goat: ...

    async def get(self, goat_id: UUID) -> Goat | None: ...

    async def get_many(self, goat_ids: Iterable[UUID]) -> dict[UUID, Goat]: ...

    async def list(
        self,
        *,
        status: str | None = None,
        breed: str | None = None,
        gender: str | None = None,
    ) -> list[Goat]: ...

    async def list_offspring(self, goat_id: UUID) -> list[Goat]: ...

    async def update(
        self,
        goat_id: UUID,
        data: dict,
        expected_version: int | None = None,
    ) -> Goat | None: ...

    async def set_status(
        self, goat_id: UUID, status: str, *, expected_status: str | None = None
    ) -> bool: ...

    async def delete(self, goat_id: UUID) -> bool: ...

    async def count(self, *, status: str | None = None, gender: str | None = None) -> int: ...

    async def count_by_status(self) -> dict[str, int]: ...

    async def breed_distribution(self, *, status: str) -> list[tuple[str, int]]: ...
