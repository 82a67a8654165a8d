# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MealWriteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., max_length=2000)
    is_on_the_diet: bool = Field(..., alias="isOnTheDiet", strict=True)


class MealCreateResponse(BaseModel):
    message: str
    id: str


class MealPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str
    name: str
    description: str
    is_on_the_diet: bool = Field(..., alias="isOnTheDiet")
    created_at: str


class MealResponse(BaseModel):
    meal: MealPublic


class MealsResponse(BaseModel):
    meals: List[MealPublic]


class MealSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_recorded: int = Field(..., ge=0, alias="totalMealsRecorded")
    total_within_diet: int = Field(..., ge=0, alias="totalMealsWithinTheDiet")
    total_off_diet: int = Field(..., ge=0, alias="totalMealsOffTheDiet")


class MealSummaryResponse(BaseModel):
    summary: MealSummary
