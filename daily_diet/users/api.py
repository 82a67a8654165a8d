# -*- coding: utf-8 -*-
"""Users — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..auth.security import (
    clear_session_cookie,
    get_current_user,
    session_token_for_registration,
    set_session_cookie,
)
from ..meals.storage import list_meals_for_user
from ..metrics import NoMealsError, compute_meal_metrics, summarize_user_count
from .models import (
    MessageResponse,
    UserCreateRequest,
    UserMetricsResponse,
    UserPublic,
    UserResponse,
    UsersResponse,
    UserSummaryResponse,
    UserUpdateRequest,
)
from .storage import (
    EmailAlreadyRegistered,
    count_users,
    create_user,
    delete_user,
    get_user_by_email,
    get_user_for_session,
    list_users_for_session,
    update_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic.model_validate(row)


@router.post("", status_code=201, response_model=MessageResponse, summary="Register a new user")
def register(request: UserCreateRequest, http_request: Request, response: Response):
    if get_user_by_email(request.email):
        logger.warning("Registration rejected, email %s already registered", request.email)
        raise HTTPException(status_code=400, detail="Email already registered")

    session_id, issue_cookie = session_token_for_registration(http_request)
    try:
        user = create_user(
            name=request.name,
            email=request.email,
            address=request.address,
            weight=request.weight,
            height=request.height,
            session_id=session_id,
        )
    except EmailAlreadyRegistered as exc:
        raise HTTPException(status_code=400, detail="Email already registered") from exc

    if issue_cookie:
        set_session_cookie(response, session_id)
    logger.info("User %s registered", user["id"])
    return MessageResponse(message="User registered")


@router.get("", response_model=UsersResponse, summary="List users bound to this session")
def list_users(user: dict = Depends(get_current_user)):
    rows = list_users_for_session(user["session_id"])
    return UsersResponse(users=[_user_public(r) for r in rows])


@router.get("/metrics", response_model=UserMetricsResponse, summary="Diet metrics for the current user")
def metrics(user: dict = Depends(get_current_user)):
    meals = list_meals_for_user(user["id"])
    try:
        result = compute_meal_metrics(meals)
    except NoMealsError as exc:
        raise HTTPException(status_code=404, detail="You have no meals recorded to compute metrics") from exc
    return UserMetricsResponse.model_validate(result.as_payload())


@router.get("/summary", response_model=UserSummaryResponse, summary="Registered user count")
def summary(user: dict = Depends(get_current_user)):  # noqa: ARG001
    result = summarize_user_count(count_users())
    return UserSummaryResponse.model_validate({"summary": result.as_payload()})


@router.get("/{user_id}", response_model=UserResponse, summary="Get a user of this session")
def get_one(user_id: str, user: dict = Depends(get_current_user)):
    row = get_user_for_session(user_id, user["session_id"])
    if not row:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse(user=_user_public(row))


@router.put("/{user_id}", response_model=MessageResponse, summary="Update a user of this session")
def update(user_id: str, request: UserUpdateRequest, user: dict = Depends(get_current_user)):
    try:
        updated = update_user(
            user_id=user_id,
            session_id=user["session_id"],
            name=request.name,
            email=request.email,
            address=request.address,
            weight=request.weight,
            height=request.height,
        )
    except EmailAlreadyRegistered as exc:
        logger.warning("Update of user %s rejected, email %s already registered", user_id, request.email)
        raise HTTPException(status_code=400, detail="Email already registered") from exc
    if not updated:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info("User %s updated", user_id)
    return MessageResponse(message="User updated")


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete a user and their meals")
def remove(user_id: str, response: Response, user: dict = Depends(get_current_user)):
    if not delete_user(user_id=user_id, session_id=user["session_id"]):
        raise HTTPException(status_code=404, detail="User not found")
    clear_session_cookie(response)
    logger.info("User %s deleted", user_id)
    return MessageResponse(message="User deleted")
