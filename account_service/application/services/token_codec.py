# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded bearer tokens (HS256 JWT)."""

from __future__ import annotations

import time
from collections.abc import Callable

import jwt

from account_service.domain.users.entities import Claims
from account_service.domain.users.exceptions import TokenError, TokenErrorKind
from account_service.domain.users.repositories import TokenCodec
from account_service.shared.errors.base import InternalError

ALGORITHM = "HS256"
_REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class JwtTokenCodec(TokenCodec):
    """
    Issue and verify tokens carrying ``{sub, iat, exp}``.

    Expiry is checked against the injected ``clock`` rather than by PyJWT so
    that ``exp`` is compared with the same notion of "now" used at issue time.
    The signature is always checked before any claim is looked at.
    """

    def __init__(
        self,
        secret: str,
        ttl_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._secret = secret
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def issue(self, user_id: int) -> str:
        now = int(self._clock())
        payload = {"sub": str(user_id), "iat": now, "exp": now + self.ttl_seconds}
        try:
            return jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise InternalError("error signing token", code="token_signing_failed") from exc

    def verify(self, token: str) -> Claims:
        if not token or not isinstance(token, str):
            raise TokenError(TokenErrorKind.MALFORMED)

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "require": _REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            raise TokenError(TokenErrorKind.SIGNATURE_MISMATCH) from exc
        except jwt.PyJWTError as exc:
            raise TokenError(TokenErrorKind.MALFORMED) from exc

        claims = _claims_from_payload(payload)
        if claims.expires_at <= self._clock():
            raise TokenError(TokenErrorKind.EXPIRED)
        return claims


def _claims_from_payload(payload: dict) -> Claims:
    subject, issued_at, expires_at = payload["sub"], payload["iat"], payload["exp"]
    if not isinstance(subject, str) or not subject.isdigit():
        raise TokenError(TokenErrorKind.MALFORMED)
    if isinstance(issued_at, bool) or not isinstance(issued_at, int):
        raise TokenError(TokenErrorKind.MALFORMED)
    if isinstance(expires_at, bool) or not isinstance(expires_at, int):
        raise TokenError(TokenErrorKind.MALFORMED)
    return Claims(subject=int(subject), issued_at=issued_at, expires_at=expires_at)


__all__ = ["ALGORITHM", "JwtTokenCodec"]
