from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from src.application.use_cases.auth import seed_admin
from src.config.settings import Settings
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import get_app_settings, get_password_hasher, get_uow
from src.interfaces.http.schemas.auth import SeedResponse

router = APIRouter(prefix="/seed", tags=["seed"])
logger = logging.getLogger(__name__)


@router.post("", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
async def seed_admin_account(
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_app_settings),
) -> SeedResponse:
    result = await seed_admin.execute(
        uow=uow,
        payload=seed_admin.SeedAdminInput(
            email=settings.seed_admin_email,
            password=settings.seed_admin_password.get_secret_value(),
            name=settings.seed_admin_name,
        ),
        password_hasher=password_hasher,
    )
    logger.info("Seeded admin account %s", result.email)
    return SeedResponse(
        message="Admin user created",
        user_id=result.user_id,
        email=result.email,
        role=result.role,
    )
