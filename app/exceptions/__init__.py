from app.exceptions.custom_exception import (
    AuthError,
    CustomException,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from app.exceptions.custom_exception_handler import custom_exception_handler
from app.exceptions.validation_exception_handler import validation_exception_handler

__all__ = [
    "CustomException",
    "AuthError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "custom_exception_handler",
    "validation_exception_handler",
]
