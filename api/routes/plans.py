from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_current_user_id
from domain.mappers import MealPlanMapper
from domain.schemas.plan_schemas import (
    MealPlanCreate,
    MealPlanEntryCreate,
    MealPlanEntryResponse,
    MealPlanResponse,
)
from services.meal_plan_service import MealPlanService

router = APIRouter(prefix="/meal-plans", tags=["Meal Planning"])
logger = logging.getLogger("flavourly.api.plans")


@router.get("", response_model=List[MealPlanResponse])
def list_user_plans(
    user_id: UUID = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """
    List the caller's meal plans, latest start date first.
    Entries inside each plan are ordered by meal date.
    """
    plans = MealPlanService(db).list_plans(user_id)
    logger.info("Found %d plans for user %s", len(plans), user_id)
    return [MealPlanMapper.to_response(p) for p in plans]


@router.post("", response_model=MealPlanResponse, status_code=status.HTTP_201_CREATED)
def create_plan(
    body: MealPlanCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create an empty meal plan covering start_date..end_date."""
    plan = MealPlanService(db).create_plan(
        user_id, body.plan_name, body.start_date, body.end_date
    )
    return MealPlanMapper.to_response(plan)


@router.get("/{plan_id}", response_model=MealPlanResponse)
def get_plan(
    plan_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return MealPlanMapper.to_response(MealPlanService(db).get_plan(user_id, plan_id))


@router.delete("/{plan_id}")
def delete_plan(
    plan_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Delete a meal plan with its entries. Shopping lists generated from it
    survive and lose their link to the plan.
    """
    MealPlanService(db).delete_plan(user_id, plan_id)
    return {"status": "ok", "deleted": plan_id}


@router.get("/{plan_id}/entries", response_model=List[MealPlanEntryResponse])
def list_entries(
    plan_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Entries of the plan ordered by meal date."""
    entries = MealPlanService(db).list_entries(user_id, plan_id)
    return [MealPlanMapper.entry_to_response(e) for e in entries]


@router.post(
    "/{plan_id}/entries",
    response_model=MealPlanEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_entry(
    plan_id: int,
    body: MealPlanEntryCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Schedule a recipe into the plan for one meal."""
    entry = MealPlanService(db).add_entry(
        user_id,
        plan_id,
        recipe_id=body.recipe_id,
        meal_date=body.meal_date,
        meal_type=body.meal_type,
        servings_to_prepare=body.servings_to_prepare,
    )
    return MealPlanMapper.entry_to_response(entry)


@router.delete("/{plan_id}/entries/{entry_id}")
def remove_entry(
    plan_id: int,
    entry_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    MealPlanService(db).remove_entry(user_id, plan_id, entry_id)
    return {"status": "ok", "deleted": entry_id}
