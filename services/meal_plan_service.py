"""Meal plan service"""

from __future__ import annotations

import logging
from datetime import date
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from domain.enums import MealType
from domain.models import MealPlan, MealPlanEntry
from repositories import MealEntryRepository, MealPlanRepository, RecipeRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("flavourly.planner")


class MealPlanService:
    """
    Meal plans are owned by one user. Every lookup filters on the owner so a
    plan belonging to someone else reads exactly like a missing one.
    """

    def __init__(self, db: Session):
        self.db: Session = db
        self.plans = MealPlanRepository(db)
        self.entries = MealEntryRepository(db)

    def create_plan(
        self, user_id: UUID, plan_name: str, start_date: date, end_date: date
    ) -> MealPlan:
        if not plan_name or not plan_name.strip():
            raise ServiceValidationError(
                "Plan name is required", details={"field": "planName"}
            )
        if end_date < start_date:
            raise ServiceValidationError(
                "End date must not be before start date",
                details={"field": "endDate"},
            )

        plan = MealPlan(
            user_id=user_id,
            plan_name=plan_name.strip(),
            start_date=start_date,
            end_date=end_date,
        )
        self.plans.add(plan)
        self.plans.commit()
        logger.info("Meal plan %s created for user %s", plan.plan_id, user_id)
        return self.get_plan(user_id, plan.plan_id)

    def list_plans(self, user_id: UUID) -> List[MealPlan]:
        return self.plans.list_by_user(user_id)

    def get_plan(self, user_id: UUID, plan_id: int) -> MealPlan:
        plan = self.plans.get_by_id_and_user(plan_id, user_id)
        if plan is None:
            raise NotFoundError("Meal plan not found")
        return plan

    def list_entries(self, user_id: UUID, plan_id: int) -> List[MealPlanEntry]:
        """Entries of one of the user's plans by meal date, then insertion order."""
        plan = self.get_plan(user_id, plan_id)
        return sorted(plan.entries, key=lambda e: (e.meal_date, e.entry_id))

    def delete_plan(self, user_id: UUID, plan_id: int) -> None:
        """Delete a plan and its entries; shopping lists made from it are kept."""
        plan = self.get_plan(user_id, plan_id)
        self.plans.delete(plan)
        self.plans.commit()
        logger.info("Meal plan %s deleted", plan_id)

    def add_entry(
        self,
        user_id: UUID,
        plan_id: int,
        recipe_id: int,
        meal_date: date,
        meal_type: MealType,
        servings_to_prepare: int = 1,
    ) -> MealPlanEntry:
        plan = self.get_plan(user_id, plan_id)
        if servings_to_prepare is None or servings_to_prepare < 1:
            raise ServiceValidationError(
                "Servings to prepare must be at least 1",
                details={"field": "servingsToPrepare"},
            )
        if not RecipeRepository(self.db).exists(recipe_id):
            raise NotFoundError("Recipe not found")

        entry = MealPlanEntry(
            plan_id=plan.plan_id,
            recipe_id=recipe_id,
            meal_date=meal_date,
            meal_type=meal_type,
            servings_to_prepare=servings_to_prepare,
        )
        self.entries.add(entry)
        self.entries.commit()
        self.db.refresh(entry)
        logger.info(
            "Recipe %s added to plan %s on %s (%s, x%d)",
            recipe_id,
            plan_id,
            meal_date,
            meal_type.value,
            servings_to_prepare,
        )
        return entry

    def remove_entry(self, user_id: UUID, plan_id: int, entry_id: int) -> None:
        entry = self.entries.get_by_id_and_plan_owner(entry_id, plan_id, user_id)
        if entry is None:
            raise NotFoundError("Meal plan entry not found")
        self.entries.delete(entry)
        self.entries.commit()
