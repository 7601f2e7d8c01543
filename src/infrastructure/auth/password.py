from __future__ import annotations

from passlib.context import CryptContext

from src.application.errors import ValidationError

MIN_PASSWORD_LENGTH = 6
DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """bcrypt hashing for farm accounts.

    Hashes made with other settings still verify, and ``needs_rehash`` tells the
    login flow to store a fresh one.
    """

    def __init__(
        self,
        *,
        rounds: int = DEFAULT_BCRYPT_ROUNDS,
        min_length: int = MIN_PASSWORD_LENGTH,
    ) -> None:
        self.min_length = min_length
        # hashes below the configured cost are reported by needs_rehash
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__default_rounds=rounds,
            bcrypt__min_rounds=rounds,
        )

    def ensure_acceptable(self, password: str) -> None:
        if len(password.strip()) < self.min_length:
            raise ValidationError(
                f"Password must be at least {self.min_length} characters",
                details={"field": "password"},
            )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # unrecognised or corrupt stored hash
            return False

    def needs_rehash(self, hashed_password: str) -> bool:
        return self._context.needs_update(hashed_password)
