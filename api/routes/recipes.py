"""Recipe authoring routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, get_current_user_id
from domain.schemas.recipe_schemas import RecipeCreate, RecipeResponse
from services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("flavourly.api.recipes")


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Create a recipe authored by the caller.

    Example request:
    ```json
    {
        "title": "Pancakes",
        "servings": 4,
        "ingredients": [
            {"ingredientName": "Flour", "unitName": "Cup", "quantity": "1.5"},
            {"ingredientName": "Milk", "unitName": "Cup", "quantity": "1.25",
             "notes": "whole"}
        ]
    }
    ```
    """
    recipe = RecipeService.create_recipe(
        db,
        author_id=user_id,
        title=body.title,
        ingredients=body.ingredients,
        description=body.description,
        servings=body.servings,
        cooking_time_minutes=body.cooking_time_minutes,
    )
    return RecipeResponse.model_validate(recipe)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get a recipe with its ingredient lines in recipe order."""
    return RecipeResponse.model_validate(RecipeService.get_recipe(db, recipe_id))
