from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from src.application.errors import AuthError
from src.domain.models.user import User

TOKEN_TYPE = "access"


class JWTService:
    """Signs and verifies the access tokens carried in the session cookie or bearer header."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = timedelta(minutes=access_token_expires_minutes)
        self.issuer = issuer
        self.audience = audience

    @property
    def expires_in_seconds(self) -> int:
        return int(self.lifetime.total_seconds())

    def create_access_token(
        self,
        *,
        subject: UUID,
        extra_claims: Mapping[str, Any] | None = None,
    ) -> str:
        issued_at = datetime.now(timezone.utc)
        claims: dict[str, Any] = dict(extra_claims or {})
        claims.update(
            sub=str(subject),
            typ=TOKEN_TYPE,
            iat=int(issued_at.timestamp()),
            exp=int((issued_at + self.lifetime).timestamp()),
        )
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def issue_for(self, user: User) -> str:
        return self.create_access_token(
            subject=user.id, extra_claims={"email": user.email, "role": user.role.value}
        )

    def decode(self, token: str) -> dict[str, Any]:
        options = {"verify_aud": self.audience is not None}
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options=options,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if claims.get("typ") != TOKEN_TYPE:
            raise AuthError("Invalid access token")
        return claims

    @staticmethod
    def subject_of(claims: Mapping[str, Any]) -> UUID:
        subject = claims.get("sub")
        if not subject:
            raise AuthError("Token missing subject")
        try:
            return UUID(str(subject))
        except ValueError as exc:
            raise AuthError("Token subject is not a valid UUID") from exc
