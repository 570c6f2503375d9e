"""Shopping list service"""

import logging
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from domain.models import ShoppingList, ShoppingListItem
from domain.schemas.shopping_schemas import ShoppingListItemInput
from repositories import (
    MealPlanRepository,
    ShoppingListRepository,
    ShoppingListItemRepository,
)
from services.shopping_list_generator import (
    PlannedLines,
    aggregate_ingredients,
    to_decimal,
)
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("flavourly.shopping")

DEFAULT_LIST_NAME = "Shopping List - {plan_name}"


def _clean_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    name = name.strip()
    return name or None


def _build_items(items: Sequence[ShoppingListItemInput]) -> List[ShoppingListItem]:
    """Materialize user-supplied items; sort order is the array position."""
    return [
        ShoppingListItem(
            item_name=item.item_name,
            quantity=to_decimal(item.quantity),
            unit=item.unit,
            notes=item.notes,
            is_completed=item.is_completed,
            sort_order=index,
        )
        for index, item in enumerate(items)
    ]


class ShoppingService:
    """Business logic for shopping list generation and editing."""

    @staticmethod
    def generate_from_meal_plan(
        db: Session,
        user_id: UUID,
        meal_plan_id: Optional[int],
        list_name: Optional[str] = None,
    ) -> ShoppingList:
        """
        Create a new shopping list from a meal plan.

        Algorithm:
        1. Load the plan (owned by the user) with entries, recipes and their
           ingredient lines
        2. Scale every line by its entry's servings_to_prepare
        3. Merge lines sharing (lower(ingredient name), unit) by summation
        4. Persist the list and its items in one transaction

        Every call creates a new list, even when an identical one exists.

        Args:
            db: Database session
            user_id: Requesting user
            meal_plan_id: Meal plan to shop for
            list_name: Optional name, defaults to "Shopping List - {plan name}"

        Returns:
            ShoppingList with items and meal plan loaded

        Raises:
            ServiceValidationError: If meal_plan_id is missing
            NotFoundError: If plan not found or doesn't belong to user
        """
        if meal_plan_id is None:
            raise ServiceValidationError(
                "Meal plan ID is required", details={"field": "mealPlanId"}
            )

        logger.info(
            "Generating shopping list for plan %s, user %s", meal_plan_id, user_id
        )

        plan = MealPlanRepository(db).get_with_ingredients(meal_plan_id, user_id)
        if plan is None:
            raise NotFoundError("Meal plan not found")

        if not plan.entries:
            logger.warning("No meal entries found for plan %s", meal_plan_id)

        aggregated = aggregate_ingredients(
            PlannedLines(entry.servings_to_prepare, entry.recipe.ingredients)
            for entry in plan.entries
        )
        logger.info(
            "Aggregated %d unique items from %d entries",
            len(aggregated),
            len(plan.entries),
        )

        shopping_list = ShoppingList(
            user_id=user_id,
            meal_plan_id=plan.plan_id,
            list_name=_clean_name(list_name)
            or DEFAULT_LIST_NAME.format(plan_name=plan.plan_name),
            items=[
                ShoppingListItem(
                    item_name=item.item_name,
                    quantity=item.quantity,
                    unit=item.unit,
                    notes=item.notes,
                    is_completed=False,
                    sort_order=item.sort_order,
                )
                for item in aggregated
            ],
        )

        repo = ShoppingListRepository(db)
        try:
            repo.add(shopping_list)
            repo.commit()
        except Exception:
            repo.rollback()
            logger.exception("Error generating shopping list for plan %s", meal_plan_id)
            raise

        logger.info(
            "Shopping list created: list_id=%s, items=%d",
            shopping_list.list_id,
            len(aggregated),
        )
        return repo.get_by_id_and_user(shopping_list.list_id, user_id)

    @staticmethod
    def create_list(
        db: Session,
        user_id: UUID,
        list_name: Optional[str],
        meal_plan_id: Optional[int] = None,
        items: Sequence[ShoppingListItemInput] = (),
    ) -> ShoppingList:
        """
        Create a shopping list by hand.

        Raises:
            ServiceValidationError: If list_name is missing or blank
            NotFoundError: If meal_plan_id is given but not owned by the user
        """
        name = _clean_name(list_name)
        if name is None:
            raise ServiceValidationError(
                "List name is required", details={"field": "listName"}
            )

        if meal_plan_id is not None:
            plan = MealPlanRepository(db).get_by_id_and_user(meal_plan_id, user_id)
            if plan is None:
                raise NotFoundError("Meal plan not found")

        repo = ShoppingListRepository(db)
        shopping_list = ShoppingList(
            user_id=user_id,
            meal_plan_id=meal_plan_id,
            list_name=name,
            items=_build_items(items),
        )
        try:
            repo.add(shopping_list)
            repo.commit()
        except Exception:
            repo.rollback()
            logger.exception("Error creating shopping list for user %s", user_id)
            raise

        logger.info("Shopping list created by hand: list_id=%s", shopping_list.list_id)
        return repo.get_by_id_and_user(shopping_list.list_id, user_id)

    @staticmethod
    def get_for_user(db: Session, user_id: UUID, list_id: int) -> ShoppingList:
        """Get a shopping list by ID (must belong to user)."""
        shopping_list = ShoppingListRepository(db).get_by_id_and_user(list_id, user_id)
        if shopping_list is None:
            raise NotFoundError("Shopping list not found")
        return shopping_list

    @staticmethod
    def list_for_user(
        db: Session, user_id: UUID, meal_plan_id: Optional[int] = None
    ) -> List[ShoppingList]:
        """Get all shopping lists for a user, optionally only those from one plan."""
        return ShoppingListRepository(db).get_by_user_id(user_id, meal_plan_id)

    @staticmethod
    def set_item_completed(
        db: Session,
        user_id: UUID,
        list_id: int,
        item_id: int,
        is_completed: bool,
    ) -> ShoppingListItem:
        """
        Check an item off (or back on). Only ``is_completed`` is written;
        name, quantity and unit are never touched here.

        Raises:
            NotFoundError: If the list isn't the user's or the item isn't in it
        """
        item_repo = ShoppingListItemRepository(db)
        item = item_repo.get_in_user_list(item_id, list_id, user_id)
        if item is None:
            raise NotFoundError("Shopping list item not found")

        item.is_completed = is_completed
        item_repo.commit()
        db.refresh(item)
        logger.debug(
            "Item %s in list %s marked completed=%s", item_id, list_id, is_completed
        )
        return item

    @staticmethod
    def replace_list(
        db: Session,
        user_id: UUID,
        list_id: int,
        list_name: Optional[str],
        items: Sequence[ShoppingListItemInput],
    ) -> ShoppingList:
        """
        Replace a list's name and its whole item set.

        Existing items are deleted and the supplied array is recreated with
        sort_order equal to its position, so item ids are not preserved.
        A blank list_name keeps the current name.

        Raises:
            NotFoundError: If the list doesn't exist or belong to the user
        """
        repo = ShoppingListRepository(db)
        shopping_list = repo.get_by_id_and_user(list_id, user_id)
        if shopping_list is None:
            raise NotFoundError("Shopping list not found")

        try:
            shopping_list.list_name = _clean_name(list_name) or shopping_list.list_name
            shopping_list.items.clear()
            db.flush()
            shopping_list.items.extend(_build_items(items))
            shopping_list.updated_at = func.now()
            repo.commit()
        except Exception:
            repo.rollback()
            logger.exception("Error replacing items of shopping list %s", list_id)
            raise

        logger.info(
            "Shopping list %s replaced with %d items", list_id, len(items)
        )
        return repo.get_by_id_and_user(list_id, user_id)

    @staticmethod
    def delete_list(db: Session, user_id: UUID, list_id: int) -> None:
        """Delete a shopping list and its items (must belong to user)."""
        repo = ShoppingListRepository(db)
        shopping_list = repo.get_by_id_and_user(list_id, user_id)
        if shopping_list is None:
            raise NotFoundError("Shopping list not found")

        repo.delete(shopping_list)
        repo.commit()
        logger.info("Shopping list deleted: %s", list_id)
