"""
Services package - Business logic layer.
"""

from services.shopping_service import ShoppingService
from services.meal_plan_service import MealPlanService
from services.recipe_service import RecipeService

__all__ = ["ShoppingService", "MealPlanService", "RecipeService"]
