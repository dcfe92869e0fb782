"""Use-case for revoking a session."""

from __future__ import annotations

from account_service.domain.users.repositories import SessionStore
from account_service.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str) -> None:
        if token:
            self._sessions.delete(token)
            logger.info("auth.logout: session revoked")
