from typing import Optional

from fastapi import Request

from app.config.env_config import settings
from app.utils.auth_utils import extract_user_id, verify_jwt
from app.utils.logger_utils import log_warning


def auth_middleware(request: Request) -> Optional[str]:
    """
    Identity provider for the HTTP surface.

    Resolves the bearer token to an opaque user id and stores it on
    ``request.state.user_id``. Returns None when the caller is anonymous;
    owner-scoped services turn that into an AuthError.
    """
    request.state.user_id = None

    token = request.headers.get("Authorization")
    if not token:
        return None

    if token.startswith("Bearer "):
        token = token[7:]

    payload = verify_jwt(
        token=token,
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )

    user_id = extract_user_id(payload)
    if user_id is None:
        log_warning(context="auth_middleware", message="Rejected invalid bearer token")
        return None

    request.state.user_id = user_id
    return user_id
