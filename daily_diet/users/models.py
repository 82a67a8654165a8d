# -*- coding: utf-8 -*-
"""Users — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=254, pattern=_EMAIL_PATTERN)
    address: str = Field(..., max_length=500)
    weight: float = Field(..., gt=0, description="Body weight in kg")
    height: float = Field(..., gt=0, description="Height in cm")

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserUpdateRequest(UserCreateRequest):
    pass


class UserPublic(BaseModel):
    id: str
    name: str
    email: str
    address: str
    weight: float
    height: float
    created_at: str


class UserResponse(BaseModel):
    user: UserPublic


class UsersResponse(BaseModel):
    users: List[UserPublic]


class MessageResponse(BaseModel):
    message: str


class UserMetricsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_meals: int = Field(..., ge=0, alias="totalNumberOfMeals")
    total_within_diet: int = Field(..., ge=0, alias="totalNumberOfMealsInTheDiet")
    total_off_diet: int = Field(..., ge=0, alias="totalNumberOfMealsOffTheDiet")
    best_sequence_within_diet: int = Field(..., ge=0, alias="bestSequenceOfMealsWithinTheDiet")


class UserSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_registered: int = Field(..., ge=0, alias="totalRegisteredUsers")


class UserSummaryResponse(BaseModel):
    summary: UserSummary
