# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from account_service.infrastructure.db import Database
from account_service.infrastructure.health import check_database, check_session_store
from account_service.interfaces.http.dto.envelope import envelope
from account_service.shared.errors.base import AppError
from account_service.shared.logging import logger


class MiscController:
    def __init__(self, *, database: Database, session_store) -> None:
        self._database = database
        self._session_store = session_store

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> tuple[Response, HTTPStatus]:
        status: dict[str, str] = {}
        healthy = True
        try:
            check_database(self._database)
            status["database"] = "ok"
        except Exception as exc:
            logger.error(f"health: database check failed ({type(exc).__name__})")
            status["database"] = "error"
            healthy = False
        try:
            check_session_store(self._session_store)
            status["session_store"] = "ok"
        except (AppError, OSError) as exc:
            logger.error(f"health: session store check failed ({type(exc).__name__})")
            status["session_store"] = "error"
            healthy = False

        if healthy:
            return envelope("healthy", status)
        return envelope("unhealthy", status, status=HTTPStatus.SERVICE_UNAVAILABLE)
