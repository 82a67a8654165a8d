# -*- coding: utf-8 -*-
"""Auth — session cookie issuing + FastAPI helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import Depends, HTTPException, Request, Response

from ..config import settings
from .storage import resolve_user, session_in_use

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "sessionId"


def new_session_token() -> str:
    return str(uuid4())


def get_session_token_from_request(request: Request) -> Optional[str]:
    cookie = request.cookies.get(SESSION_COOKIE_NAME)
    return cookie.strip() if cookie and cookie.strip() else None


def session_token_for_registration(request: Request) -> tuple[str, bool]:
    """Pick the session token a newly registered user is bound to.

    Returns the token and whether the cookie has to be (re)issued. The
    browser's cookie is reused unless another user already owns it.
    """
    token = get_session_token_from_request(request)
    if token and not session_in_use(token):
        return token, False
    return new_session_token(), True


def set_session_cookie(resp: Response, token: str) -> None:
    resp.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=settings.session_max_age,
        path="/",
    )


def clear_session_cookie(resp: Response) -> None:
    resp.delete_cookie(SESSION_COOKIE_NAME, path="/")


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    user = getattr(request.state, "user", None)
    if user:
        return user

    token = get_session_token_from_request(request)
    if not token:
        logger.warning("Rejected %s %s: no session cookie", request.method, request.url.path)
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_row = resolve_user(token)
    if not user_row:
        logger.warning("Rejected %s %s: unknown session", request.method, request.url.path)
        raise HTTPException(status_code=404, detail="User not found")

    # Cache on request for downstream handlers.
    request.state.user = user_row
    return user_row


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
