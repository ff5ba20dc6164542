# app/middleware/auth.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from app.utils.auth_utils import InvalidToken, decode_token
from thrive.core.error_messages import ErrorResponses

TOKEN_COOKIE = "token"

cookie_scheme = APIKeyCookie(name=TOKEN_COOKIE, auto_error=False)


async def get_current_user(request: Request, token: Optional[str] = Depends(cookie_scheme)) -> dict:
    if not token:
        raise ErrorResponses.UNAUTHORIZED
    try:
        claims = decode_token(token)
    except InvalidToken:
        raise ErrorResponses.UNAUTHORIZED

    request.state.user = claims
    return claims


def verify_owner(current_user: dict, email: Optional[str]) -> None:
    """Callers may only read records filed under their own email."""
    if not email or current_user.get("email") != email:
        raise ErrorResponses.FORBIDDEN
