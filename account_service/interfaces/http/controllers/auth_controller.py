# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request

from account_service.application.services.auth_service import AuthService
from account_service.application.use_cases.users.logout_user import LogoutUserUseCase
from account_service.auth import AuthMiddleware, auth_required, authed_request, extract_bearer
from account_service.domain.users.exceptions import UnauthorizedError
from account_service.interfaces.http.dto.auth import SignInRequestDTO
from account_service.interfaces.http.dto.envelope import envelope
from account_service.interfaces.http.payload import parse_payload
from account_service.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        auth_service: AuthService,
        logout_use_case: LogoutUserUseCase,
        auth_middleware: AuthMiddleware,
    ) -> None:
        self._auth_service = auth_service
        self._logout_use_case = logout_use_case
        self._auth_middleware = auth_middleware

    def request_credentials(self) -> tuple[Response, HTTPStatus]:
        dto = parse_payload(SignInRequestDTO)
        issued = self._auth_service.request_credentials(dto.username_or_email, dto.password)
        logger.info(f"auth.request_credentials: ok user_id={issued.user.id}")
        return envelope(
            "credentials issued successfully",
            {"token": issued.token, "user": issued.user.to_dict()},
        )

    def get_session(self) -> tuple[Response, HTTPStatus]:
        token = extract_bearer(request.headers)
        if token is None:
            raise UnauthorizedError()
        user = self._auth_service.get_session(token)
        return envelope("session retrieved successfully", {"user": user.to_dict()})

    def logout(self) -> tuple[Response, HTTPStatus]:
        req = authed_request()
        self._logout_use_case.execute(req.auth_token)
        logger.info(f"auth.logout: ok user_id={req.user_id}")
        return envelope("session revoked successfully")

    def as_blueprint(self) -> Blueprint:
        gate = auth_required(self._auth_middleware)
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule(
            "/request/credentials", view_func=self.request_credentials, methods=["POST"]
        )
        bp.add_url_rule("/get/session", view_func=self.get_session, methods=["GET"])
        bp.add_url_rule("/session", view_func=gate(self.logout), methods=["DELETE"])
        return bp
