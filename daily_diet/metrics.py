# -*- coding: utf-8 -*-
"""
Meal metrics and summaries.

Pure computations over meal rows and counts that the stores have already
fetched. Nothing here touches the database or the request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Sequence


class NoMealsError(LookupError):
    """The user has no meals, so there is nothing to compute metrics over."""


@dataclass(frozen=True)
class MealMetrics:
    total_meals: int
    total_within_diet: int
    total_off_diet: int
    best_sequence_within_diet: int

    def as_payload(self) -> Dict[str, int]:
        return {
            "totalNumberOfMeals": self.total_meals,
            "totalNumberOfMealsInTheDiet": self.total_within_diet,
            "totalNumberOfMealsOffTheDiet": self.total_off_diet,
            "bestSequenceOfMealsWithinTheDiet": self.best_sequence_within_diet,
        }


@dataclass(frozen=True)
class MealSummary:
    total_recorded: int
    total_within_diet: int
    total_off_diet: int

    def as_payload(self) -> Dict[str, int]:
        return {
            "totalMealsRecorded": self.total_recorded,
            "totalMealsWithinTheDiet": self.total_within_diet,
            "totalMealsOffTheDiet": self.total_off_diet,
        }


@dataclass(frozen=True)
class UserSummary:
    total_registered: int

    def as_payload(self) -> Dict[str, int]:
        return {"totalRegisteredUsers": self.total_registered}


def best_sequence_within_diet(flags: Iterable[bool]) -> int:
    """Length of the longest contiguous run of ``True`` flags."""
    current_streak = 0
    max_streak = 0
    for on_diet in flags:
        if on_diet:
            current_streak += 1
        else:
            max_streak = max(max_streak, current_streak)
            current_streak = 0
    # a run reaching the end of the sequence never hit the reset above
    return max(max_streak, current_streak)


def compute_meal_metrics(meals: Sequence[Mapping[str, Any]]) -> MealMetrics:
    """
    Compute counts and the best within-diet streak for a user's meals.

    Args:
        meals: meal rows in the order they should be read, each carrying an
            ``is_on_the_diet`` flag.

    Returns:
        MealMetrics for the sequence.

    Raises:
        NoMealsError: ``meals`` is empty.
    """
    if not meals:
        raise NoMealsError("No meals recorded to compute metrics from")

    flags = [bool(meal["is_on_the_diet"]) for meal in meals]
    within = sum(1 for flag in flags if flag)
    return MealMetrics(
        total_meals=len(flags),
        total_within_diet=within,
        total_off_diet=len(flags) - within,
        best_sequence_within_diet=best_sequence_within_diet(flags),
    )


def summarize_meal_counts(*, total: int, within_diet: int, off_diet: int) -> MealSummary:
    return MealSummary(
        total_recorded=total,
        total_within_diet=within_diet,
        total_off_diet=off_diet,
    )


def summarize_user_count(total: int) -> UserSummary:
    return UserSummary(total_registered=total)
