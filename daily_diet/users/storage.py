# -*- coding: utf-8 -*-
"""Users — DB storage helpers."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import coerce_count, db_conn
from ..config import settings


class EmailAlreadyRegistered(ValueError):
    pass


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _is_email_conflict(exc: sqlite3.IntegrityError) -> bool:
    return "users.email" in str(exc)


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_for_session(user_id: str, session_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute(
            "SELECT * FROM users WHERE id = ? AND session_id = ?",
            (user_id, session_id),
        ).fetchone()
        return dict(row) if row else None


def list_users_for_session(session_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM users WHERE session_id = ? ORDER BY created_at ASC",
            (session_id,),
        ).fetchall()
        return [dict(r) for r in rows]


def create_user(
    *,
    name: str,
    email: str,
    address: str,
    weight: float,
    height: float,
    session_id: str,
) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = _utc_now()
    email_norm = email.lower().strip()
    try:
        with db_conn(settings.db_path) as conn:
            conn.execute(
                """
                INSERT INTO users (id, name, email, address, weight, height, session_id, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (user_id, name, email_norm, address, float(weight), float(height), session_id, now),
            )
    except sqlite3.IntegrityError as exc:
        if _is_email_conflict(exc):
            raise EmailAlreadyRegistered(email_norm) from exc
        raise
    return {
        "id": user_id,
        "name": name,
        "email": email_norm,
        "address": address,
        "weight": float(weight),
        "height": float(height),
        "session_id": session_id,
        "created_at": now,
    }


def update_user(
    *,
    user_id: str,
    session_id: str,
    name: str,
    email: str,
    address: str,
    weight: float,
    height: float,
) -> bool:
    email_norm = email.lower().strip()
    try:
        with db_conn(settings.db_path) as conn:
            cur = conn.execute(
                """
                UPDATE users
                SET name = ?, email = ?, address = ?, weight = ?, height = ?
                WHERE id = ? AND session_id = ?
                """,
                (name, email_norm, address, float(weight), float(height), user_id, session_id),
            )
            return cur.rowcount > 0
    except sqlite3.IntegrityError as exc:
        if _is_email_conflict(exc):
            raise EmailAlreadyRegistered(email_norm) from exc
        raise


def delete_user(*, user_id: str, session_id: str) -> bool:
    # meals go with the user through ON DELETE CASCADE
    with db_conn(settings.db_path) as conn:
        cur = conn.execute(
            "DELETE FROM users WHERE id = ? AND session_id = ?",
            (user_id, session_id),
        )
        return cur.rowcount > 0


def count_users() -> int:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT COUNT(id) AS total FROM users").fetchone()
        return coerce_count(row["total"])
