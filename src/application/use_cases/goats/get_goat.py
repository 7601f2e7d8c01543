from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.goat import Goat
from src.domain.models.health_record import HealthRecord
from src.domain.models.weight_record import WeightRecord


@dataclass(slots=True)
class GoatDetail:
    goat: Goat
    sire: Goat | None = None
    dam: Goat | None = None
    offspring: list[Goat] = field(default_factory=list)
    health_records: list[HealthRecord] = field(default_factory=list)
    weight_records: list[WeightRecord] = field(default_factory=list)
    breeding_records: list[BreedingRecord] = field(default_factory=list)


async def execute(uow: UnitOfWork, goat_id: UUID) -> GoatDetail:
    goat = await uow.goats.get(goat_id)
    if not goat:
        raise NotFound("Goat not found")
    parents = await uow.goats.get_many([goat.sire_id, goat.dam_id])
    return GoatDetail(
        goat=goat,
        sire=parents.get(goat.sire_id) if goat.sire_id else None,
        dam=parents.get(goat.dam_id) if goat.dam_id else None,
        offspring=await uow.goats.list_offspring(goat_id),
        health_records=await uow.health_records.list(goat_id=goat_id),
        weight_records=await uow.weight_records.list_by_goat(goat_id),
        breeding_records=await uow.breeding_records.list(goat_id=goat_id),
    )
