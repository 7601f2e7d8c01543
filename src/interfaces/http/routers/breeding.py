from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.breeding import (
    create_breeding_record,
    get_breeding_record,
    list_breeding_records,
)
from src.config.settings import Settings
from src.domain.models.breeding_record import BreedingRecord
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from src.interfaces.http.schemas.breeding import (
    BreedingGoatRef,
    BreedingRecordCreate,
    BreedingRecordResponse,
)

router = APIRouter(prefix="/breeding", tags=["breeding"])


async def with_goats(uow, records: list[BreedingRecord]) -> list[BreedingRecordResponse]:
    goat_ids = [r.male_goat_id for r in records] + [r.female_goat_id for r in records]
    goats = await uow.goats.get_many(goat_ids)
    responses = []
    for record in records:
        male = goats.get(record.male_goat_id)
        female = goats.get(record.female_goat_id)
        item = BreedingRecordResponse.model_validate(record)
        item.male_goat = BreedingGoatRef.model_validate(male) if male else None
        item.female_goat = BreedingGoatRef.model_validate(female) if female else None
        responses.append(item)
    return responses


@router.get("", response_model=list[BreedingRecordResponse])
async def list_breeding_endpoint(
    goat_id: UUID | None = Query(None, alias="goatId"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[BreedingRecordResponse]:
    records = await list_breeding_records.execute(uow, goat_id=goat_id)
    return await with_goats(uow, records)


@router.post("", response_model=BreedingRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_breeding_endpoint(
    payload: BreedingRecordCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> BreedingRecordResponse:
    record = await create_breeding_record.execute(
        uow,
        context.role,
        context.user_id,
        create_breeding_record.CreateBreedingRecordInput(**payload.model_dump()),
        gestation_days=settings.gestation_days,
    )
    (response,) = await with_goats(uow, [record])
    return response


@router.get("/{record_id}", response_model=BreedingRecordResponse)
async def get_breeding_endpoint(
    record_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingRecordResponse:
    record = await get_breeding_record.execute(uow, record_id)
    (response,) = await with_goats(uow, [record])
    return response
