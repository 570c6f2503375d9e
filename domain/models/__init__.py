"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.recipe import Ingredient, MeasurementUnit, Recipe, RecipeIngredient
from domain.models.meal_plan import MealPlan, MealPlanEntry
from domain.models.shopping_list import ShoppingList, ShoppingListItem

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # User models
    "AppUser",
    # Recipe models
    "Ingredient",
    "MeasurementUnit",
    "Recipe",
    "RecipeIngredient",
    # Meal plan models
    "MealPlan",
    "MealPlanEntry",
    # Shopping list models
    "ShoppingList",
    "ShoppingListItem",
]
