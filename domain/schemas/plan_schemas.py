from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from domain.enums import MealType
from domain.schemas.base import CamelModel


class MealPlanCreate(CamelModel):
    plan_name: str = Field(..., min_length=1)
    start_date: date
    end_date: date


class MealPlanEntryCreate(CamelModel):
    recipe_id: int
    meal_date: date
    meal_type: MealType
    servings_to_prepare: int = Field(default=1, ge=1)


class MealPlanEntryResponse(CamelModel):
    entry_id: int
    plan_id: int
    recipe_id: int
    recipe_title: Optional[str] = None
    meal_date: date
    meal_type: MealType
    servings_to_prepare: int


class MealPlanResponse(CamelModel):
    plan_id: int
    user_id: UUID
    plan_name: str
    start_date: date
    end_date: date
    created_at: Optional[datetime] = None
    entries: List[MealPlanEntryResponse] = Field(default_factory=list)
