"""Record a goat sale.

Allocating the reference, marking the goat Sold and inserting the sale happen
in one unit of work and are committed together; a failure in any step leaves
the goat untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.reference_registrar import allocate_reference
from src.domain.models.sales_record import SalesRecord
from src.domain.value_objects.goat_status import GoatStatus
from src.domain.value_objects.record_kind import RecordKind
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateSaleInput:
    goat_id: UUID
    sale_date: date
    sale_price: Decimal
    buyer_name: str | None = None
    buyer_contact: str | None = None
    sale_type: str | None = None
    weight_at_sale: Decimal | None = None
    payment_status: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateSaleInput,
) -> SalesRecord:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to record sales")
    if payload.sale_price < 0:
        raise ValidationError("Sale price cannot be negative")
    goat = await uow.goats.get(payload.goat_id)
    if not goat:
        raise NotFound("Goat not found")
    if not goat.is_active:
        raise ConflictError(f"Goat {goat.tag_no} is {goat.status} and cannot be sold")

    reference_no = await allocate_reference(uow, RecordKind.SALE)
    # the goat may have been sold by a concurrent request since it was read
    sold = await uow.goats.set_status(
        goat.id, GoatStatus.SOLD.value, expected_status=GoatStatus.ACTIVE.value
    )
    if not sold:
        raise ConflictError(f"Goat {goat.tag_no} is no longer Active and cannot be sold")
    record = SalesRecord.create(
        reference_no=reference_no,
        goat_id=goat.id,
        sale_date=payload.sale_date,
        sale_price=payload.sale_price,
        buyer_name=payload.buyer_name,
        buyer_contact=payload.buyer_contact,
        sale_type=payload.sale_type,
        weight_at_sale=payload.weight_at_sale,
        payment_status=payload.payment_status,
        notes=payload.notes,
        created_by=actor_user_id,
    )
    created = await uow.sales_records.add(record)
    await uow.commit()
    logger.info("Goat %s sold under %s", goat.tag_no, created.reference_no)
    return created
