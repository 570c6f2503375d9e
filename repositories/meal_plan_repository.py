"""
Meal Plan Repository - Data access layer for meal plan operations
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload, selectinload

from repositories.base import BaseRepository
from domain.models import MealPlan, MealPlanEntry, Recipe, RecipeIngredient


class MealPlanRepository(BaseRepository[MealPlan]):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)

    def get_by_id_and_user(self, plan_id: int, user_id: UUID) -> Optional[MealPlan]:
        """Get meal plan by ID for specific user (authorization check)"""
        return (
            self.db.query(MealPlan)
            .options(selectinload(MealPlan.entries).joinedload(MealPlanEntry.recipe))
            .filter(MealPlan.plan_id == plan_id, MealPlan.user_id == user_id)
            .first()
        )

    def get_with_ingredients(self, plan_id: int, user_id: UUID) -> Optional[MealPlan]:
        """
        Load a plan owned by the user together with every entry's recipe and
        the recipe's ingredient lines, each line with ingredient and unit.

        Entries come back in stored order and lines in their ``sort_order``.
        """
        return (
            self.db.query(MealPlan)
            .options(
                selectinload(MealPlan.entries)
                .joinedload(MealPlanEntry.recipe)
                .selectinload(Recipe.ingredients)
                .options(
                    joinedload(RecipeIngredient.ingredient),
                    joinedload(RecipeIngredient.unit),
                )
            )
            .filter(MealPlan.plan_id == plan_id, MealPlan.user_id == user_id)
            .first()
        )

    def list_by_user(self, user_id: UUID) -> List[MealPlan]:
        """Get all meal plans for a user, most recent start date first"""
        return (
            self.db.query(MealPlan)
            .options(selectinload(MealPlan.entries).joinedload(MealPlanEntry.recipe))
            .filter(MealPlan.user_id == user_id)
            .order_by(MealPlan.start_date.desc(), MealPlan.plan_id.desc())
            .all()
        )


class MealEntryRepository(BaseRepository[MealPlanEntry]):
    """Repository for meal entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlanEntry)

    def get_by_id_and_plan_owner(
        self, entry_id: int, plan_id: int, user_id: UUID
    ) -> Optional[MealPlanEntry]:
        """Get an entry only if it sits in the given plan and the plan is the user's"""
        return (
            self.db.query(MealPlanEntry)
            .join(MealPlan, MealPlan.plan_id == MealPlanEntry.plan_id)
            .filter(
                MealPlanEntry.entry_id == entry_id,
                MealPlanEntry.plan_id == plan_id,
                MealPlan.user_id == user_id,
            )
            .first()
        )
