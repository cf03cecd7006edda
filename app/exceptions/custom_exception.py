from typing import Any, Dict, List, Optional

from app.constants.error import ERROR


class CustomException(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class AuthError(CustomException):
    """No current user could be resolved for an owner-scoped operation."""

    def __init__(self, message: str = ERROR.UNAUTHORIZED):
        super().__init__(status_code=401, message=message)


class ValidationError(CustomException):
    """Input failed the form schema; ``errors`` holds ``{field, message}`` items."""

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None, message: str = ERROR.FORM_NOT_VALID):
        super().__init__(status_code=400, message=message)
        self.errors = errors or []


class NotFoundError(CustomException):
    def __init__(self, message: str = ERROR.FORM_NOT_FOUND):
        super().__init__(status_code=404, message=message)


class PersistenceError(CustomException):
    def __init__(self, message: str = ERROR.INTERNAL_ERROR):
        super().__init__(status_code=500, message=message)
