"""
Meal plan domain mappers.
"""

from domain.models import MealPlan, MealPlanEntry
from domain.schemas.plan_schemas import MealPlanEntryResponse, MealPlanResponse


class MealPlanMapper:
    """Mapper for meal plan transformations."""

    @staticmethod
    def entry_to_response(entry: MealPlanEntry) -> MealPlanEntryResponse:
        return MealPlanEntryResponse(
            entry_id=entry.entry_id,
            plan_id=entry.plan_id,
            recipe_id=entry.recipe_id,
            recipe_title=entry.recipe.title if entry.recipe is not None else None,
            meal_date=entry.meal_date,
            meal_type=entry.meal_type,
            servings_to_prepare=entry.servings_to_prepare,
        )

    @staticmethod
    def to_response(plan: MealPlan) -> MealPlanResponse:
        # Display order is by day; generation uses stored order instead
        entries = sorted(plan.entries, key=lambda e: (e.meal_date, e.entry_id))
        return MealPlanResponse(
            plan_id=plan.plan_id,
            user_id=plan.user_id,
            plan_name=plan.plan_name,
            start_date=plan.start_date,
            end_date=plan.end_date,
            created_at=plan.created_at,
            entries=[MealPlanMapper.entry_to_response(e) for e in entries],
        )
