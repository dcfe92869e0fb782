# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from account_service.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from account_service.auth import AuthMiddleware, auth_required
from account_service.interfaces.http.dto.auth import SignUpRequestDTO
from account_service.interfaces.http.dto.envelope import envelope
from account_service.interfaces.http.payload import parse_payload


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        auth_middleware: AuthMiddleware,
        registration_requires_auth: bool = True,
    ) -> None:
        self._register_use_case = register_use_case
        self._auth_middleware = auth_middleware
        self._registration_requires_auth = registration_requires_auth

    def create_account(self) -> tuple[Response, HTTPStatus]:
        dto = parse_payload(SignUpRequestDTO)
        user = self._register_use_case.execute(
            RegisterUserInput(
                username=dto.username,
                email=dto.email,
                password=dto.password,
                currency=dto.currency,
                gender=dto.gender,
            )
        )
        return envelope(
            "user registered successfully",
            user.summary().to_dict(),
            status=HTTPStatus.CREATED,
        )

    def as_blueprint(self) -> Blueprint:
        view = self.create_account
        if self._registration_requires_auth:
            view = auth_required(self._auth_middleware)(view)

        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/account", view_func=view, methods=["POST"])
        return bp
