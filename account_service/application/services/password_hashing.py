"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from account_service.domain.users.repositories import PasswordHasher
from account_service.shared.errors.base import InternalError

# scrypt with a fixed work factor: N=2**15, r=8, p=1.
DEFAULT_METHOD = "scrypt:32768:8:1"
SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = SALT_LENGTH) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password, method=self._method, salt_length=self._salt_length))
        except (ValueError, TypeError) as exc:
            raise InternalError("error hashing password", code="password_hash_failed") from exc

    def verify(self, password: str, hashed: str) -> bool:
        # A stored hash is "<method>$<salt>$<digest>"; anything else is corrupt data.
        if not isinstance(hashed, str) or hashed.count("$") != 2:
            raise InternalError("stored password hash is malformed", code="password_hash_invalid")
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            raise InternalError("stored password hash is malformed", code="password_hash_invalid") from exc
