"""
Shopping list domain mappers.
Handles transformation between ORM models and DTOs for shopping-related entities.
"""

from domain.models import ShoppingList, ShoppingListItem
from domain.schemas.shopping_schemas import (
    MealPlanSummary,
    ShoppingListResponse,
    ShoppingListItemResponse,
)


class ShoppingMapper:
    """Mapper for shopping list transformations."""

    @staticmethod
    def item_to_response(item: ShoppingListItem) -> ShoppingListItemResponse:
        return ShoppingListItemResponse(
            item_id=item.item_id,
            list_id=item.list_id,
            item_name=item.item_name,
            quantity=item.quantity,
            unit=item.unit,
            notes=item.notes,
            is_completed=bool(item.is_completed),
            sort_order=item.sort_order,
        )

    @staticmethod
    def to_response(shopping_list: ShoppingList) -> ShoppingListResponse:
        """
        Convert ORM ShoppingList to ShoppingListResponse DTO.

        Args:
            shopping_list: ShoppingList ORM instance with items loaded

        Returns:
            ShoppingListResponse DTO with items in sort order
        """
        items = [
            ShoppingMapper.item_to_response(item)
            for item in sorted(shopping_list.items, key=lambda i: i.sort_order)
        ]

        plan = shopping_list.meal_plan
        return ShoppingListResponse(
            list_id=shopping_list.list_id,
            user_id=shopping_list.user_id,
            list_name=shopping_list.list_name,
            meal_plan_id=shopping_list.meal_plan_id,
            meal_plan=(
                MealPlanSummary(plan_id=plan.plan_id, plan_name=plan.plan_name)
                if plan is not None
                else None
            ),
            created_at=shopping_list.created_at,
            updated_at=shopping_list.updated_at,
            items=items,
        )
