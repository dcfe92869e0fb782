# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

from account_service.shared.logging import logger

from .base import AppError


def _envelope(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"message": message, "data": {}, "exited_code": 1}), status


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_envelope())
    return response, error.status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.code} on {request.method} {request.path}: {exc.message}")
        else:
            logger.info(f"Handled application error {exc.code} on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(NotFound)
    def _handle_not_found(_exc: NotFound):
        return _envelope(f"invalid endpoint: {request.path}", HTTPStatus.NOT_FOUND)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return _envelope(exc.description or exc.name, exc.code or default_status)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"user={user_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return _envelope("internal error", default_status)


__all__ = ["handle_app_error", "register_error_handler"]
