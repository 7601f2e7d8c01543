from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.health import (
    create_health_record,
    get_health_record,
    list_health_records,
)
from src.domain.models.health_record import HealthRecord, HealthRecordType
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.health_records import (
    HealthGoatRef,
    HealthRecordCreate,
    HealthRecordResponse,
)

router = APIRouter(prefix="/health", tags=["health"])


async def with_goats(uow, records: list[HealthRecord]) -> list[HealthRecordResponse]:
    goats = await uow.goats.get_many(r.goat_id for r in records)
    responses = []
    for record in records:
        goat = goats.get(record.goat_id)
        item = HealthRecordResponse.model_validate(record)
        item.goat = HealthGoatRef.model_validate(goat) if goat else None
        responses.append(item)
    return responses


@router.get("", response_model=list[HealthRecordResponse])
async def list_health_records_endpoint(
    goat_id: UUID | None = Query(None, alias="goatId"),
    record_type: HealthRecordType | None = Query(None, alias="recordType"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[HealthRecordResponse]:
    records = await list_health_records.execute(
        uow,
        goat_id=goat_id,
        record_type=record_type.value if record_type else None,
    )
    return await with_goats(uow, records)


@router.post("", response_model=HealthRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_health_record_endpoint(
    payload: HealthRecordCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await create_health_record.execute(
        uow,
        context.role,
        context.user_id,
        create_health_record.CreateHealthRecordInput(**payload.model_dump()),
    )
    (response,) = await with_goats(uow, [record])
    return response


@router.get("/{record_id}", response_model=HealthRecordResponse)
async def get_health_record_endpoint(
    record_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await get_health_record.execute(uow, record_id)
    (response,) = await with_goats(uow, [record])
    return response
