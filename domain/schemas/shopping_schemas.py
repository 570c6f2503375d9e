"""Pydantic schemas for shopping list operations."""

from pydantic import Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from decimal import Decimal

from domain.schemas.base import CamelModel


class GenerateShoppingListRequest(CamelModel):
    """Request to generate a shopping list from a meal plan."""

    meal_plan_id: Optional[int] = Field(None, description="Meal plan to shop for")
    list_name: Optional[str] = Field(
        None, description="Defaults to 'Shopping List - {plan name}'"
    )


class ShoppingListItemInput(CamelModel):
    """One item as written by the user (manual create or full replace)."""

    item_name: str = Field(..., min_length=1)
    # NUMERIC(12, 3) column
    quantity: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=12, decimal_places=3
    )
    unit: Optional[str] = None
    notes: Optional[str] = None
    is_completed: bool = False


class ShoppingListCreate(CamelModel):
    """Request to create a shopping list by hand."""

    list_name: Optional[str] = None
    meal_plan_id: Optional[int] = None
    items: List[ShoppingListItemInput] = Field(default_factory=list)


class ShoppingListReplace(CamelModel):
    """Full replacement of a list's name and items."""

    list_name: Optional[str] = Field(
        None, description="New name; blank keeps the current one"
    )
    items: List[ShoppingListItemInput] = Field(default_factory=list)


class ShoppingListItemToggle(CamelModel):
    """Check an item off, or un-check it."""

    is_completed: bool


class ShoppingListItemResponse(CamelModel):
    """Individual item in a shopping list."""

    item_id: int
    list_id: int
    item_name: str
    quantity: Decimal
    unit: Optional[str] = None
    notes: Optional[str] = None
    is_completed: bool = False
    sort_order: int


class MealPlanSummary(CamelModel):
    plan_id: int
    plan_name: str


class ShoppingListResponse(CamelModel):
    """Complete shopping list with items."""

    list_id: int
    user_id: UUID
    list_name: str
    meal_plan_id: Optional[int] = None
    meal_plan: Optional[MealPlanSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[ShoppingListItemResponse] = Field(default_factory=list)
