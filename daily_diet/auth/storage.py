# -*- coding: utf-8 -*-
"""Auth — session lookup against the users table."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..app_db import db_conn
from ..config import settings


def resolve_user(session_token: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE session_id = ?", (session_token,)).fetchone()
        return dict(row) if row else None


def session_in_use(session_token: str) -> bool:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT 1 FROM users WHERE session_id = ?", (session_token,)).fetchone()
        return row is not None
