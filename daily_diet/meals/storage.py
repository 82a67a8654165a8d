# -*- coding: utf-8 -*-
"""Meals — DB storage helpers.

Every query is scoped by ``user_id``; a meal owned by someone else behaves
exactly like a missing one.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import coerce_count, db_conn
from ..config import settings


def _utc_now() -> str:
    # microseconds keep meals created in the same second in order
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def _meal_row(row: sqlite3.Row) -> Dict[str, Any]:
    meal = dict(row)
    meal["is_on_the_diet"] = bool(meal["is_on_the_diet"])
    return meal


def create_meal(*, user_id: str, name: str, description: str, is_on_the_diet: bool) -> Dict[str, Any]:
    meal_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.db_path) as conn:
        conn.execute(
            """
            INSERT INTO meals (id, user_id, name, description, is_on_the_diet, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (meal_id, user_id, name, description, int(bool(is_on_the_diet)), now),
        )
    return {
        "id": meal_id,
        "user_id": user_id,
        "name": name,
        "description": description,
        "is_on_the_diet": bool(is_on_the_diet),
        "created_at": now,
    }


def list_meals_for_user(user_id: str) -> List[Dict[str, Any]]:
    """Meals of ``user_id`` oldest first, ties broken by insertion order."""
    with db_conn(settings.db_path) as conn:
        rows = conn.execute(
            """
            SELECT id, user_id, name, description, is_on_the_diet, created_at
            FROM meals
            WHERE user_id = ?
            ORDER BY created_at ASC, rowid ASC
            """,
            (user_id,),
        ).fetchall()
        return [_meal_row(r) for r in rows]


def get_meal(*, user_id: str, meal_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute(
            """
            SELECT id, user_id, name, description, is_on_the_diet, created_at
            FROM meals
            WHERE id = ? AND user_id = ?
            """,
            (meal_id, user_id),
        ).fetchone()
        return _meal_row(row) if row else None


def update_meal(
    *,
    user_id: str,
    meal_id: str,
    name: str,
    description: str,
    is_on_the_diet: bool,
) -> bool:
    with db_conn(settings.db_path) as conn:
        cur = conn.execute(
            """
            UPDATE meals
            SET name = ?, description = ?, is_on_the_diet = ?
            WHERE id = ? AND user_id = ?
            """,
            (name, description, int(bool(is_on_the_diet)), meal_id, user_id),
        )
        return cur.rowcount > 0


def delete_meal(*, user_id: str, meal_id: str) -> bool:
    with db_conn(settings.db_path) as conn:
        cur = conn.execute("DELETE FROM meals WHERE id = ? AND user_id = ?", (meal_id, user_id))
        return cur.rowcount > 0


def count_meals(user_id: str, is_on_the_diet: Optional[bool] = None) -> int:
    query = "SELECT COUNT(id) AS total FROM meals WHERE user_id = ?"
    params: tuple[Any, ...] = (user_id,)
    if is_on_the_diet is not None:
        query += " AND is_on_the_diet = ?"
        params = (user_id, int(bool(is_on_the_diet)))
    with db_conn(settings.db_path) as conn:
        row = conn.execute(query, params).fetchone()
        return coerce_count(row["total"])
