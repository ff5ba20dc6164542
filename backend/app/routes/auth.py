# app/routes/auth.py
import logging
from datetime import timedelta

from fastapi import APIRouter, Body, Response

from app.middleware.auth import TOKEN_COOKIE
from app.utils.auth_utils import create_access_token
from thrive.core.config import settings

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Auth"])


def _cookie_options() -> dict:
    # Cross-site frontend in production needs SameSite=None, which requires Secure
    if settings.is_production:
        return {"httponly": True, "secure": True, "samesite": "none"}
    return {"httponly": True, "secure": False, "samesite": "strict"}


# ------------------------
# Issue token
# ------------------------
@auth_router.post("/jwt")
async def issue_token(response: Response, user: dict = Body(...)):
    token = create_access_token(user)
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=int(timedelta(days=settings.TOKEN_EXPIRE_DAYS).total_seconds()),
        **_cookie_options(),
    )
    logger.info("Issued token for %s", user.get("email"))
    return {"success": True}


# ------------------------
# Logout
# ------------------------
@auth_router.post("/logout")
async def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE, **_cookie_options())
    return {"success": True}
