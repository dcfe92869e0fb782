# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""
Bearer-token gate for protected routes.

:class:`AuthMiddleware` is a plain request-pipeline stage: it consumes a
:class:`RequestContext`, walks ``START -> PASS | REJECT`` and, on ``PASS``,
stores the resolved user id on the context. :func:`auth_required` binds that
stage to Flask views.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from functools import wraps
from typing import Any, cast

from flask import Request, g, request

from account_service.domain.users.exceptions import TokenError, UnauthorizedError
from account_service.domain.users.repositories import SessionStore, TokenCodec
from account_service.shared.logging import logger

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "


class AuthState(StrEnum):
    START = "start"
    PASS = "pass"
    REJECT = "reject"


class RejectReason(StrEnum):
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_TOKEN = "invalid_token"
    NO_SESSION = "no_session"
    SUBJECT_MISMATCH = "subject_mismatch"


@dataclass(slots=True)
class RequestContext:
    method: str
    path: str
    headers: Mapping[str, str]
    user_id: int | None = None
    token: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class AuthDecision:
    state: AuthState
    user_id: int | None = None
    reason: RejectReason | None = None

    @property
    def passed(self) -> bool:
        return self.state is AuthState.PASS


def extract_bearer(headers: Mapping[str, str]) -> str | None:
    value = headers.get(AUTHORIZATION_HEADER) or headers.get(AUTHORIZATION_HEADER.lower()) or ""
    if not value.startswith(BEARER_PREFIX):
        return None
    token = value[len(BEARER_PREFIX):].strip()
    return token or None


class AuthMiddleware:
    def __init__(self, *, tokens: TokenCodec, sessions: SessionStore) -> None:
        self._tokens = tokens
        self._sessions = sessions

    def _reject(self, ctx: RequestContext, reason: RejectReason) -> AuthDecision:
        logger.warning(f"Auth rejected ({reason.value}) on {ctx.method} {ctx.path}")
        return AuthDecision(state=AuthState.REJECT, reason=reason)

    def process(self, ctx: RequestContext) -> AuthDecision:
        token = extract_bearer(ctx.headers)
        if token is None:
            return self._reject(ctx, RejectReason.MISSING_CREDENTIAL)

        try:
            claims = self._tokens.verify(token)
        except TokenError:
            return self._reject(ctx, RejectReason.INVALID_TOKEN)

        user_id = self._sessions.get(token)
        if user_id is None:
            return self._reject(ctx, RejectReason.NO_SESSION)
        if user_id != claims.subject:
            return self._reject(ctx, RejectReason.SUBJECT_MISMATCH)

        ctx.user_id = user_id
        ctx.token = token
        logger.debug(f"Auth OK: user={user_id} {ctx.method} {ctx.path}")
        return AuthDecision(state=AuthState.PASS, user_id=user_id)


class AuthedRequest(Request):
    user_id: int
    auth_token: str


def authed_request() -> AuthedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthedRequest, request)


def auth_required(middleware: AuthMiddleware) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*a: Any, **kw: Any) -> Any:
            ctx = RequestContext(
                method=request.method,
                path=request.path,
                headers=request.headers,
            )
            decision = middleware.process(ctx)
            if not decision.passed:
                raise UnauthorizedError()

            request.user_id = ctx.user_id
            request.auth_token = ctx.token
            g.user_id = ctx.user_id
            return f(*a, **kw)

        return inner

    return decorator


__all__ = [
    "AuthDecision",
    "AuthMiddleware",
    "AuthState",
    "AuthedRequest",
    "RejectReason",
    "RequestContext",
    "auth_required",
    "authed_request",
    "extract_bearer",
]
