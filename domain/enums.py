"""
Domain enums for the Flavourly application.
Contains all enumeration types used across the domain models.
"""

import enum


class UserRole(str, enum.Enum):
    """Account roles"""

    RECIPE_DEVELOPER = "recipe_developer"
    NUTRITIONIST = "nutritionist"


class MealType(str, enum.Enum):
    """Meal slots a recipe can be planned into"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
