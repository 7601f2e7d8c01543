from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.goats import (
    create_goat,
    delete_goat,
    get_goat,
    list_goats,
    list_weights,
    record_weight,
    update_goat,
)
from src.domain.value_objects.goat_status import Gender, GoatStatus
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.breeding import BreedingRecordResponse
from src.interfaces.http.schemas.goats import (
    GoatCreate,
    GoatDetailResponse,
    GoatResponse,
    GoatSummary,
    GoatUpdate,
    WeightRecordCreate,
    WeightRecordResponse,
)
from src.interfaces.http.schemas.health_records import HealthRecordResponse

router = APIRouter(prefix="/goats", tags=["goats"])


@router.get("", response_model=list[GoatResponse])
async def list_goats_endpoint(
    status_filter: GoatStatus | None = Query(None, alias="status"),
    breed: str | None = Query(None),
    gender: Gender | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[GoatResponse]:
    goats = await list_goats.execute(
        uow,
        status=status_filter.value if status_filter else None,
        breed=breed,
        gender=gender.value if gender else None,
    )
    return [GoatResponse.model_validate(goat) for goat in goats]


@router.post("", response_model=GoatResponse, status_code=status.HTTP_201_CREATED)
async def create_goat_endpoint(
    payload: GoatCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> GoatResponse:
    goat = await create_goat.execute(
        uow,
        context.role,
        context.user_id,
        create_goat.CreateGoatInput(**payload.model_dump()),
    )
    return GoatResponse.model_validate(goat)


@router.get("/{goat_id}", response_model=GoatDetailResponse)
async def get_goat_endpoint(
    goat_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> GoatDetailResponse:
    detail = await get_goat.execute(uow, goat_id)
    data = GoatResponse.model_validate(detail.goat).model_dump()
    return GoatDetailResponse(
        **data,
        sire=GoatSummary.model_validate(detail.sire) if detail.sire else None,
        dam=GoatSummary.model_validate(detail.dam) if detail.dam else None,
        offspring=[GoatSummary.model_validate(g) for g in detail.offspring],
        health_records=[HealthRecordResponse.model_validate(r) for r in detail.health_records],
        weight_records=[WeightRecordResponse.model_validate(r) for r in detail.weight_records],
        breeding_records=[
            BreedingRecordResponse.model_validate(r) for r in detail.breeding_records
        ],
    )


@router.put("/{goat_id}", response_model=GoatResponse)
async def update_goat_endpoint(
    goat_id: UUID,
    payload: GoatUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> GoatResponse:
    goat = await update_goat.execute(
        uow,
        context.role,
        context.user_id,
        goat_id,
        update_goat.UpdateGoatInput(**payload.model_dump()),
    )
    return GoatResponse.model_validate(goat)


@router.delete("/{goat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goat_endpoint(
    goat_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_goat.execute(uow, context.role, goat_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{goat_id}/weights", response_model=list[WeightRecordResponse])
async def list_weights_endpoint(
    goat_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[WeightRecordResponse]:
    records = await list_weights.execute(uow, goat_id)
    return [WeightRecordResponse.model_validate(r) for r in records]


@router.post(
    "/{goat_id}/weights",
    response_model=WeightRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_weight_endpoint(
    goat_id: UUID,
    payload: WeightRecordCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> WeightRecordResponse:
    record = await record_weight.execute(
        uow,
        context.role,
        context.user_id,
        goat_id,
        record_weight.RecordWeightInput(**payload.model_dump()),
    )
    return WeightRecordResponse.model_validate(record)
