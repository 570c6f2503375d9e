"""Pydantic schemas for recipe authoring."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from domain.schemas.base import CamelModel


class RecipeIngredientInput(CamelModel):
    """An ingredient line; ingredient and unit are named, not referenced by id."""

    ingredient_name: str = Field(..., min_length=1, description="e.g. 'Flour'")
    unit_name: str = Field(..., min_length=1, description="e.g. 'cup'")
    quantity: Decimal = Field(..., ge=0, max_digits=10, decimal_places=3)
    notes: Optional[str] = None


class RecipeCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    servings: Optional[int] = Field(None, ge=1)
    cooking_time_minutes: Optional[int] = Field(None, ge=0)
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)


class RecipeIngredientResponse(CamelModel):
    recipe_ingredient_id: int
    ingredient_name: str
    unit_name: str
    quantity: Decimal
    notes: Optional[str] = None
    sort_order: int


class RecipeResponse(CamelModel):
    recipe_id: int
    author_id: Optional[UUID] = None
    title: str
    description: Optional[str] = None
    servings: Optional[int] = None
    cooking_time_minutes: Optional[int] = None
    created_at: Optional[datetime] = None
    ingredients: List[RecipeIngredientResponse] = Field(default_factory=list)
