from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.goat import Goat


async def execute(
    uow: UnitOfWork,
    *,
    status: str | None = None,
    breed: str | None = None,
    gender: str | None = None,
) -> list[Goat]:
    return await uow.goats.list(status=status, breed=breed, gender=gender)
