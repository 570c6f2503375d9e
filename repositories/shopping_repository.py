"""
Shopping List Repository - Data access layer for shopping list operations
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload, selectinload

from repositories.base import BaseRepository
from domain.models import ShoppingList, ShoppingListItem


class ShoppingListRepository(BaseRepository[ShoppingList]):
    """Repository for shopping list data access"""

    def __init__(self, db: Session):
        super().__init__(db, ShoppingList)

    def _query(self):
        return self.db.query(ShoppingList).options(
            selectinload(ShoppingList.items), joinedload(ShoppingList.meal_plan)
        )

    def get_by_id_and_user(
        self, list_id: int, user_id: UUID
    ) -> Optional[ShoppingList]:
        """Get shopping list by ID for specific user (authorization check)"""
        return (
            self._query()
            .filter(ShoppingList.list_id == list_id, ShoppingList.user_id == user_id)
            .first()
        )

    def get_by_user_id(
        self, user_id: UUID, meal_plan_id: Optional[int] = None
    ) -> List[ShoppingList]:
        """Get all shopping lists for a user, most recently updated first"""
        query = self._query().filter(ShoppingList.user_id == user_id)
        if meal_plan_id is not None:
            query = query.filter(ShoppingList.meal_plan_id == meal_plan_id)
        return query.order_by(
            ShoppingList.updated_at.desc(), ShoppingList.list_id.desc()
        ).all()


class ShoppingListItemRepository(BaseRepository[ShoppingListItem]):
    """Repository for shopping list item data access"""

    def __init__(self, db: Session):
        super().__init__(db, ShoppingListItem)

    def get_in_user_list(
        self, item_id: int, list_id: int, user_id: UUID
    ) -> Optional[ShoppingListItem]:
        """Get an item only if it belongs to the list and the list to the user"""
        return (
            self.db.query(ShoppingListItem)
            .join(ShoppingList, ShoppingList.list_id == ShoppingListItem.list_id)
            .filter(
                ShoppingListItem.item_id == item_id,
                ShoppingListItem.list_id == list_id,
                ShoppingList.user_id == user_id,
            )
            .first()
        )
