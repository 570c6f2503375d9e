"""API routes for shopping list management."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from api.dependencies import get_db, get_current_user_id
from domain.mappers import ShoppingMapper
from domain.schemas.shopping_schemas import (
    GenerateShoppingListRequest,
    ShoppingListCreate,
    ShoppingListReplace,
    ShoppingListItemToggle,
    ShoppingListItemResponse,
    ShoppingListResponse,
)
from services.shopping_service import ShoppingService

router = APIRouter(prefix="/shopping-lists", tags=["Shopping Lists"])
logger = logging.getLogger("flavourly.api.shopping")


@router.post(
    "/generate",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
)
def generate_shopping_list(
    request: GenerateShoppingListRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Generate a shopping list from a meal plan.

    Ingredient lines of every planned recipe are scaled by the entry's
    servings and merged when ingredient name (case-insensitive) and unit
    (exact) match. Each call creates a new list.

    Example request:
    ```json
    {"mealPlanId": 12, "listName": "Weekend shop"}
    ```
    """
    shopping_list = ShoppingService.generate_from_meal_plan(
        db=db,
        user_id=user_id,
        meal_plan_id=request.meal_plan_id,
        list_name=request.list_name,
    )
    return ShoppingMapper.to_response(shopping_list)


@router.get("", response_model=List[ShoppingListResponse])
def get_user_shopping_lists(
    meal_plan_id: Optional[int] = Query(
        default=None, alias="mealPlanId", description="Only lists made from this plan"
    ),
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get the caller's shopping lists, most recently updated first."""
    shopping_lists = ShoppingService.list_for_user(db, user_id, meal_plan_id)
    return [ShoppingMapper.to_response(sl) for sl in shopping_lists]


@router.post("", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED)
def create_shopping_list(
    request: ShoppingListCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create a shopping list by hand, optionally tied to one of the caller's plans."""
    shopping_list = ShoppingService.create_list(
        db,
        user_id,
        list_name=request.list_name,
        meal_plan_id=request.meal_plan_id,
        items=request.items,
    )
    return ShoppingMapper.to_response(shopping_list)


@router.get("/{list_id}", response_model=ShoppingListResponse)
def get_shopping_list(
    list_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get a shopping list by ID. The list must belong to the caller."""
    return ShoppingMapper.to_response(ShoppingService.get_for_user(db, user_id, list_id))


@router.put("/{list_id}", response_model=ShoppingListResponse)
def replace_shopping_list(
    list_id: int,
    request: ShoppingListReplace,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Replace the list's name and its entire item set.

    Items not present in the request are removed; the request items are
    recreated in array order with new ids.
    """
    shopping_list = ShoppingService.replace_list(
        db, user_id, list_id, request.list_name, request.items
    )
    return ShoppingMapper.to_response(shopping_list)


@router.patch("/{list_id}/items/{item_id}", response_model=ShoppingListItemResponse)
def update_shopping_list_item(
    list_id: int,
    item_id: int,
    update: ShoppingListItemToggle,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Check an item off, or back on.

    Example request:
    ```json
    {"isCompleted": true}
    ```
    """
    item = ShoppingService.set_item_completed(
        db, user_id, list_id, item_id, update.is_completed
    )
    return ShoppingMapper.item_to_response(item)


@router.delete("/{list_id}")
def delete_shopping_list(
    list_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a shopping list. The list must belong to the caller."""
    ShoppingService.delete_list(db, user_id, list_id)
    return {"status": "ok", "deleted": list_id}
