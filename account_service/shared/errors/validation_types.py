from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    USERNAME_LENGTH = "account_service.username_length"
    USERNAME_INVALID = "account_service.username_invalid"
    EMAIL_LENGTH = "account_service.email_length"
    EMAIL_INVALID = "account_service.email_invalid"
    PASSWORD_LENGTH = "account_service.password_length"
    PASSWORD_INVALID = "account_service.password_invalid"
    PASSWORD_MISMATCH = "account_service.password_mismatch"
    USERNAME_EQUALS_PASSWORD = "account_service.username_equals_password"
