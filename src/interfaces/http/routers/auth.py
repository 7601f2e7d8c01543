from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from src.application.use_cases.auth import get_me, login_user
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import LoginRequest, LoginResponse, MeResponse

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


@router.get("/me", response_model=MeResponse)
async def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    result = await get_me.execute(
        user_id=context.user_id,
        email=context.email,
        name=context.name,
        role=context.role,
        claims=context.claims,
    )
    return MeResponse(
        user_id=result.user_id,
        email=result.email,
        name=result.name,
        role=result.role,
        permissions=result.permissions,
        claims=result.claims,
    )


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=result.access_token,
        max_age=result.expires_in,
        httponly=True,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )
    logger.info("User %s signed in", result.email)
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        expires_in=result.expires_in,
        user_id=result.user_id,
        email=result.email,
        name=result.name,
        role=result.role,
    )


@router.post("/auth/logout")
async def logout(
    response: Response,
    settings: Settings = Depends(get_app_settings),
) -> dict[str, str]:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )
    return {"message": "Signed out"}
