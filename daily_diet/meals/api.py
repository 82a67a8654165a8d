# -*- coding: utf-8 -*-
"""Meals — API endpoints."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..metrics import summarize_meal_counts
from ..users.models import MessageResponse
from .models import (
    MealCreateResponse,
    MealPublic,
    MealResponse,
    MealsResponse,
    MealSummaryResponse,
    MealWriteRequest,
)
from .storage import count_meals, create_meal, delete_meal, get_meal, list_meals_for_user, update_meal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.post("", status_code=201, response_model=MealCreateResponse, summary="Record a meal")
def create(request: MealWriteRequest, user: dict = Depends(get_current_user)):
    meal = create_meal(
        user_id=user["id"],
        name=request.name,
        description=request.description,
        is_on_the_diet=request.is_on_the_diet,
    )
    logger.info("Meal %s created for user %s", meal["id"], user["id"])
    return MealCreateResponse(message="Meal created", id=meal["id"])


@router.get("", response_model=MealsResponse, summary="List the current user's meals")
def list_meals(user: dict = Depends(get_current_user)):
    meals = list_meals_for_user(user["id"])
    return MealsResponse(meals=[MealPublic.model_validate(m) for m in meals])


@router.get("/summary", response_model=MealSummaryResponse, summary="Meal counts by diet compliance")
def summary(user: dict = Depends(get_current_user)):
    user_id = user["id"]
    result = summarize_meal_counts(
        total=count_meals(user_id),
        within_diet=count_meals(user_id, is_on_the_diet=True),
        off_diet=count_meals(user_id, is_on_the_diet=False),
    )
    logger.debug("Meal summary for user %s: %s", user_id, result)
    return MealSummaryResponse.model_validate({"summary": result.as_payload()})


@router.get("/{meal_id}", response_model=MealResponse, summary="Get one meal")
def get_one(meal_id: UUID, user: dict = Depends(get_current_user)):
    meal = get_meal(user_id=user["id"], meal_id=str(meal_id))
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    return MealResponse(meal=MealPublic.model_validate(meal))


@router.put("/{meal_id}", status_code=202, response_model=MessageResponse, summary="Edit a meal")
def edit(meal_id: UUID, request: MealWriteRequest, user: dict = Depends(get_current_user)):
    updated = update_meal(
        user_id=user["id"],
        meal_id=str(meal_id),
        name=request.name,
        description=request.description,
        is_on_the_diet=request.is_on_the_diet,
    )
    if not updated:
        raise HTTPException(status_code=404, detail="Meal not found")
    logger.info("Meal %s updated for user %s", meal_id, user["id"])
    return MessageResponse(message="Meal updated")


@router.delete("/{meal_id}", status_code=202, response_model=MessageResponse, summary="Delete a meal")
def remove(meal_id: UUID, user: dict = Depends(get_current_user)):
    if not delete_meal(user_id=user["id"], meal_id=str(meal_id)):
        raise HTTPException(status_code=404, detail="Meal not found")
    logger.info("Meal %s deleted for user %s", meal_id, user["id"])
    return MessageResponse(message="Meal deleted")
