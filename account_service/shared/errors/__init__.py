from .base import AppError, DomainError, InternalError, ValidationError
from .http import register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InternalError",
    "ValidationError",
    "register_error_handler",
]
