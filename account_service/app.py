# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys

from flask import Flask
from flask_cors import CORS
from pydantic import ValidationError as ConfigValidationError
from sqlalchemy.exc import SQLAlchemyError

from account_service.container import AppContext, build_context
from account_service.interfaces.http.controllers.auth_controller import AuthController
from account_service.interfaces.http.controllers.misc_controller import MiscController
from account_service.interfaces.http.controllers.users_controller import UsersController
from account_service.shared.config import AppConfig, load_config
from account_service.shared.errors.base import AppError
from account_service.shared.logging import logger, setup_logging
from account_service.shared.middleware.error_handler import configure_error_handling
from account_service.shared.middleware.request_logger import configure_request_logging


def create_app(context: AppContext) -> Flask:
    config = context.config

    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.extensions["account_service"] = context

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.allowed_origins}},
        "methods": ["GET", "POST", "DELETE"],
        "supports_credentials": False,
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(
        AuthController(
            auth_service=context.auth_service,
            logout_use_case=context.logout_user_use_case,
            auth_middleware=context.auth_middleware,
        ).as_blueprint()
    )
    app.register_blueprint(
        UsersController(
            register_use_case=context.register_user_use_case,
            auth_middleware=context.auth_middleware,
            registration_requires_auth=config.registration_requires_auth,
        ).as_blueprint()
    )
    app.register_blueprint(
        MiscController(database=context.database, session_store=context.sessions).as_blueprint()
    )

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        return resp

    logger.info("Flask app initialized")
    return app


def _load_config_or_exit() -> AppConfig:
    try:
        return load_config()
    except ConfigValidationError as exc:
        for error in exc.errors(include_url=False):
            field = ".".join(str(part) for part in error.get("loc", ())) or "config"
            logger.critical(f"config: {field}: {error['msg']}")
        raise SystemExit(1) from exc


def main() -> None:
    setup_logging()
    config = _load_config_or_exit()
    setup_logging(config.log_level, str(config.log_file) if config.log_file else None)

    context = build_context(config)
    try:
        context.database.ping()
        context.database.init_schema()
        context.sessions.ping()  # type: ignore[attr-defined]
    except AppError as exc:
        logger.critical(f"startup: {exc.message}")
        sys.exit(1)
    except SQLAlchemyError as exc:
        logger.critical(f"startup: credential store unreachable ({type(exc).__name__})")
        sys.exit(1)

    app = create_app(context)
    logger.info(f"Serving on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
