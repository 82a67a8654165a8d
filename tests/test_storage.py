# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path


class TestCoerceCount(unittest.TestCase):
    def test_integers_and_numeric_text(self) -> None:
        from daily_diet.app_db import coerce_count  # noqa: WPS433

        self.assertEqual(coerce_count(0), 0)
        self.assertEqual(coerce_count(12), 12)
        self.assertEqual(coerce_count("7"), 7)
        self.assertEqual(coerce_count(" 3 "), 3)

    def test_rejects_non_integers(self) -> None:
        from daily_diet.app_db import CountParseError, coerce_count  # noqa: WPS433

        for bad in ("seven", "", "1.5", None, 2.0, True):
            with self.assertRaises(CountParseError):
                coerce_count(bad)
        self.assertTrue(issubclass(CountParseError, ValueError))


class TestStores(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="daily-diet-storage-"))
        os.environ["DAILY_DIET_DATA_ROOT"] = str(cls._tmp)
        os.environ["DAILY_DIET_DB_PATH"] = str(cls._tmp / "daily_diet.db")

        # Ensure settings reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name == "daily_diet" or name.startswith("daily_diet."):
                sys.modules.pop(name, None)

        from daily_diet import app_db  # noqa: WPS433
        from daily_diet.auth import storage as auth_storage  # noqa: WPS433
        from daily_diet.config import settings  # noqa: WPS433
        from daily_diet.meals import storage as meals  # noqa: WPS433
        from daily_diet.users import storage as users  # noqa: WPS433

        app_db.init_app_db(settings.db_path)
        cls.auth = auth_storage
        cls.meals = meals
        cls.users = users

    @classmethod
    def tearDownClass(cls) -> None:
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _new_user(self, email: str, session_id: str) -> dict:
        return self.users.create_user(
            name="Ana",
            email=email,
            address="Rua A, 1",
            weight=70.5,
            height=170,
            session_id=session_id,
        )

    def test_resolve_user_by_session(self) -> None:
        user = self._new_user("resolve@example.com", "session-resolve")
        found = self.auth.resolve_user("session-resolve")
        self.assertIsNotNone(found)
        assert found is not None
        self.assertEqual(found["id"], user["id"])
        self.assertIsNone(self.auth.resolve_user("missing-session"))
        self.assertTrue(self.auth.session_in_use("session-resolve"))

    def test_email_is_unique(self) -> None:
        self._new_user("Unique@Example.com", "session-unique-1")
        with self.assertRaises(self.users.EmailAlreadyRegistered):
            self._new_user("unique@example.com", "session-unique-2")
        self.assertIsNotNone(self.users.get_user_by_email(" UNIQUE@example.com "))

    def test_meals_listed_in_creation_order(self) -> None:
        user = self._new_user("order@example.com", "session-order")
        names = ["breakfast", "snack", "lunch", "dinner"]
        for i, name in enumerate(names):
            self.meals.create_meal(user_id=user["id"], name=name, description="", is_on_the_diet=i % 2 == 0)

        listed = self.meals.list_meals_for_user(user["id"])
        self.assertEqual([m["name"] for m in listed], names)
        self.assertEqual([m["is_on_the_diet"] for m in listed], [True, False, True, False])

    def test_count_meals_by_flag(self) -> None:
        user = self._new_user("count@example.com", "session-count")
        for flag in (True, True, False):
            self.meals.create_meal(user_id=user["id"], name="meal", description="d", is_on_the_diet=flag)

        self.assertEqual(self.meals.count_meals(user["id"]), 3)
        self.assertEqual(self.meals.count_meals(user["id"], is_on_the_diet=True), 2)
        self.assertEqual(self.meals.count_meals(user["id"], is_on_the_diet=False), 1)
        self.assertIsInstance(self.meals.count_meals(user["id"]), int)

    def test_meals_are_scoped_to_owner(self) -> None:
        owner = self._new_user("owner@example.com", "session-owner")
        other = self._new_user("other@example.com", "session-other")
        meal = self.meals.create_meal(user_id=owner["id"], name="lunch", description="rice", is_on_the_diet=True)

        self.assertIsNone(self.meals.get_meal(user_id=other["id"], meal_id=meal["id"]))
        self.assertFalse(
            self.meals.update_meal(
                user_id=other["id"], meal_id=meal["id"], name="x", description="y", is_on_the_diet=False
            )
        )
        self.assertFalse(self.meals.delete_meal(user_id=other["id"], meal_id=meal["id"]))

        stored = self.meals.get_meal(user_id=owner["id"], meal_id=meal["id"])
        self.assertIsNotNone(stored)
        assert stored is not None
        self.assertEqual(stored["name"], "lunch")
        self.assertIs(stored["is_on_the_diet"], True)

    def test_deleting_user_removes_meals(self) -> None:
        user = self._new_user("cascade@example.com", "session-cascade")
        self.meals.create_meal(user_id=user["id"], name="m", description="", is_on_the_diet=True)

        self.assertTrue(self.users.delete_user(user_id=user["id"], session_id="session-cascade"))
        self.assertEqual(self.meals.count_meals(user["id"]), 0)
        self.assertIsNone(self.auth.resolve_user("session-cascade"))

    def test_count_users(self) -> None:
        before = self.users.count_users()
        self._new_user("counted@example.com", "session-counted")
        self.assertEqual(self.users.count_users(), before + 1)


if __name__ == "__main__":
    unittest.main()
