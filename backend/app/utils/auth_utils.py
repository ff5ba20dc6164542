# app/utils/auth_utils.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from thrive.core.config import settings

logger = logging.getLogger(__name__)

# Registered claims stamped at issue time and stripped again on decode
_ISSUED_CLAIMS = ("exp", "iat")


class InvalidToken(Exception):
    """Token is missing, malformed, expired or signed with another key."""


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = {k: v for k, v in data.items() if k not in _ISSUED_CLAIMS}
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(days=settings.TOKEN_EXPIRE_DAYS))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=settings.ALGORITHM)


def decode_token(token: Optional[str]) -> dict:
    if not token:
        raise InvalidToken("Token missing")
    try:
        decoded = jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        logger.info("Token expired")
        raise InvalidToken("Token has expired") from e
    except jwt.InvalidTokenError as e:
        logger.info("Invalid token: %s", e)
        raise InvalidToken("Invalid token") from e
    return {k: v for k, v in decoded.items() if k not in _ISSUED_CLAIMS}
