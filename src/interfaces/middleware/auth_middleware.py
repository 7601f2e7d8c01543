from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext, fetch_user
from src.interfaces.middleware.error_handler import error_payload

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health-check",
    "/api/v1/auth/login",
    "/api/v1/auth/logout",
    "/api/v1/seed",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    def _extract_token(self, request: Request) -> str:
        authorization = request.headers.get("Authorization")
        if authorization:
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                raise AuthError("Invalid Authorization header")
            return token
        token = request.cookies.get(self.settings.session_cookie_name)
        if not token:
            raise AuthError("Authentication required")
        return token

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            token = self._extract_token(request)
            jwt_service = getattr(request.app.state, "jwt_service", None)
            if jwt_service is None:
                raise RuntimeError("JWT service not configured")
            claims = jwt_service.decode(token)

            user_id = jwt_service.subject_of(claims)
            session_factory = getattr(request.app.state, "session_factory", None)
            if session_factory is None:
                raise RuntimeError("Session factory not configured")
            async with session_factory() as session:
                user = await fetch_user(session, user_id)
            if not user or not user.is_active:
                raise AuthError("Inactive or missing user")
            request.state.auth_context = AuthContext(
                user_id=user_id,
                email=user.email,
                role=user.role,
                name=user.name,
                claims=claims,
            )
        except AuthError as exc:
            return JSONResponse(status_code=exc.status_code, content=error_payload(exc))
        return await call_next(request)
