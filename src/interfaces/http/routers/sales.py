from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.sales import create_sale, get_sale, list_sales
from src.domain.models.sales_record import SalesRecord
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.goats import GoatSummary
from src.interfaces.http.schemas.sales import SaleCreate, SaleResponse

router = APIRouter(prefix="/sales", tags=["sales"])


async def with_goats(uow, records: list[SalesRecord]) -> list[SaleResponse]:
    goats = await uow.goats.get_many(r.goat_id for r in records)
    responses = []
    for record in records:
        goat = goats.get(record.goat_id)
        item = SaleResponse.model_validate(record)
        item.goat = GoatSummary.model_validate(goat) if goat else None
        responses.append(item)
    return responses


@router.get("", response_model=list[SaleResponse])
async def list_sales_endpoint(
    goat_id: UUID | None = Query(None, alias="goatId"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[SaleResponse]:
    records = await list_sales.execute(uow, goat_id=goat_id)
    return await with_goats(uow, records)


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def create_sale_endpoint(
    payload: SaleCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> SaleResponse:
    record = await create_sale.execute(
        uow,
        context.role,
        context.user_id,
        create_sale.CreateSaleInput(**payload.model_dump()),
    )
    (response,) = await with_goats(uow, [record])
    return response


@router.get("/{sale_id}", response_model=SaleResponse)
async def get_sale_endpoint(
    sale_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> SaleResponse:
    record = await get_sale.execute(uow, sale_id)
    (response,) = await with_goats(uow, [record])
    return response
