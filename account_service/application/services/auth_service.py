# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Sign-in and session lookup."""

from __future__ import annotations

from account_service.domain.users.entities import IssuedCredentials, UserSummary
from account_service.domain.users.exceptions import (
    InvalidCredentialsError,
    TokenError,
    UnauthorizedError,
)
from account_service.domain.users.repositories import (
    PasswordHasher,
    SessionStore,
    TokenCodec,
    UserRepository,
)
from account_service.shared.logging import logger

# Verified against when the identifier is unknown, so both failure paths do the same work.
_UNKNOWN_USER_PASSWORD = "account-service-unknown-user"


class AuthService:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._decoy_hash: str | None = None

    def request_credentials(self, username_or_email: str, password: str) -> IssuedCredentials:
        user = self._users.find_by_identifier(username_or_email)
        if user is None:
            self._password_hasher.verify(password, self._decoy())
            logger.info("auth.request_credentials: rejected")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("auth.request_credentials: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        self._sessions.put(token, user.id, self._tokens.ttl_seconds)
        logger.info(f"auth.request_credentials: issued token for user={user.id}")
        return IssuedCredentials(token=token, user=user.summary())

    def resolve_user_id(self, token: str) -> int:
        """Return the user id bound to a live token or raise :class:`UnauthorizedError`."""
        try:
            claims = self._tokens.verify(token)
        except TokenError as exc:
            logger.warning(f"auth.session: token rejected ({exc.kind.value})")
            raise UnauthorizedError() from exc

        user_id = self._sessions.get(token)
        if user_id is None:
            logger.warning(f"auth.session: no live session for user={claims.subject}")
            raise UnauthorizedError()

        if user_id != claims.subject:
            logger.warning(
                f"auth.session: subject mismatch token={claims.subject} session={user_id}"
            )
            raise UnauthorizedError()

        return user_id

    def get_session(self, token: str) -> UserSummary:
        user_id = self.resolve_user_id(token)
        user = self._users.find_by_id(user_id)
        if user is None:
            logger.warning(f"auth.session: user={user_id} no longer exists")
            raise UnauthorizedError()
        return user.summary()

    def _decoy(self) -> str:
        if self._decoy_hash is None:
            self._decoy_hash = self._password_hasher.hash(_UNKNOWN_USER_PASSWORD)
        return self._decoy_hash


__all__ = ["AuthService"]
