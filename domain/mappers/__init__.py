"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.shopping_mapper import ShoppingMapper
from domain.mappers.meal_plan_mapper import MealPlanMapper

__all__ = ["ShoppingMapper", "MealPlanMapper"]
