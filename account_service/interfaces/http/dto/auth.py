from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from account_service.domain.users.entities import Currency, Gender
from account_service.shared.errors.validation_types import ValidationErrorType

USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]{2,15}$")
EMAIL_RE = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")
PASSWORD_RE = re.compile(r"^[a-zA-Z0-9_]{8,20}$")


class SignInRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=False)

    username_or_email: str = Field(min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=256)


class SignUpRequestDTO(BaseModel):
    name: str = ""
    username: str
    email: str
    password: str
    password_confirmation: str
    currency: Currency = Currency.USD
    gender: Gender = Gender.OTHER

    @field_validator("currency", mode="before")
    @classmethod
    def _lenient_currency(cls, value: object) -> Currency:
        return Currency.parse(value)

    @field_validator("gender", mode="before")
    @classmethod
    def _lenient_gender(cls, value: object) -> Gender:
        return Gender.parse(value)

    @model_validator(mode="after")
    def _validate_account_fields(self) -> "SignUpRequestDTO":
        # Checked in a fixed order; the first failure is reported.
        if not 2 <= len(self.username) <= 15:
            raise PydanticCustomError(
                ValidationErrorType.USERNAME_LENGTH,
                "invalid username, must be at least 2 characters and at most 15",
            )
        if not 5 <= len(self.email) <= 100:
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_LENGTH,
                "invalid email, must be at least 5 characters and at most 100",
            )
        if not 8 <= len(self.password) <= 100:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_LENGTH,
                "invalid password, must be at least 8 characters",
            )
        if not USERNAME_RE.fullmatch(self.username):
            raise PydanticCustomError(ValidationErrorType.USERNAME_INVALID, "invalid username")
        if not EMAIL_RE.fullmatch(self.email):
            raise PydanticCustomError(ValidationErrorType.EMAIL_INVALID, "invalid email")
        if not PASSWORD_RE.fullmatch(self.password):
            raise PydanticCustomError(ValidationErrorType.PASSWORD_INVALID, "invalid password")
        if self.password != self.password_confirmation:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_MISMATCH,
                "password and password confirmation must match",
            )
        if self.username.lower() == self.password.lower():
            raise PydanticCustomError(
                ValidationErrorType.USERNAME_EQUALS_PASSWORD,
                "username and password must be different",
            )
        return self
