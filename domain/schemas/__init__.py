"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel
from domain.schemas.shopping_schemas import (
    GenerateShoppingListRequest,
    ShoppingListItemInput,
    ShoppingListCreate,
    ShoppingListReplace,
    ShoppingListItemToggle,
    ShoppingListItemResponse,
    ShoppingListResponse,
    MealPlanSummary,
)
from domain.schemas.plan_schemas import (
    MealPlanCreate,
    MealPlanEntryCreate,
    MealPlanEntryResponse,
    MealPlanResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeIngredientInput,
    RecipeCreate,
    RecipeIngredientResponse,
    RecipeResponse,
)

__all__ = [
    "CamelModel",
    # Shopping list schemas
    "GenerateShoppingListRequest",
    "ShoppingListItemInput",
    "ShoppingListCreate",
    "ShoppingListReplace",
    "ShoppingListItemToggle",
    "ShoppingListItemResponse",
    "ShoppingListResponse",
    "MealPlanSummary",
    # Meal plan schemas
    "MealPlanCreate",
    "MealPlanEntryCreate",
    "MealPlanEntryResponse",
    "MealPlanResponse",
    # Recipe schemas
    "RecipeIngredientInput",
    "RecipeCreate",
    "RecipeIngredientResponse",
    "RecipeResponse",
]
