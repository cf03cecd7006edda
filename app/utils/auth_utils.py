from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt


def generate_jwt(data: dict, expire_minutes: int, secret_key: str, algorithm: str):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expire_minutes)

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(to_encode, secret_key, algorithm=algorithm)
    return encoded_jwt


def verify_jwt(token: str, secret_key: str, algorithm: str):
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
        return payload
    except JWTError:
        return None


def extract_user_id(payload: Optional[dict]) -> Optional[str]:
    """Owner id from a verified token: ``sub`` first, then the legacy ``id`` claim."""
    if not payload:
        return None
    user_id = payload.get("sub") or payload.get("id")
    return str(user_id) if user_id else None
