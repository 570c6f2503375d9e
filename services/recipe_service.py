"""Recipe authoring service"""

import logging
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeIngredientInput
from repositories import RecipeRepository
from services.shopping_list_generator import to_decimal
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("flavourly.recipes")


class RecipeService:
    @staticmethod
    def create_recipe(
        db: Session,
        author_id: Optional[UUID],
        title: str,
        ingredients: Sequence[RecipeIngredientInput] = (),
        description: Optional[str] = None,
        servings: Optional[int] = None,
        cooking_time_minutes: Optional[int] = None,
    ) -> Recipe:
        """
        Create a recipe with its ingredient lines.

        Ingredients and units are named in each line and resolved against the
        catalogue tables, creating missing rows. Lines keep submitted order.

        Raises:
            ServiceValidationError: If the title is blank or a line is invalid
        """
        if not title or not title.strip():
            raise ServiceValidationError("Title is required", details={"field": "title"})

        repo = RecipeRepository(db)
        recipe = Recipe(
            author_id=author_id,
            title=title.strip(),
            description=description,
            servings=servings,
            cooking_time_minutes=cooking_time_minutes,
        )
        try:
            repo.add(recipe)
            for position, line in enumerate(ingredients):
                quantity = to_decimal(line.quantity)
                if quantity < 0:
                    raise ServiceValidationError(
                        f"Negative quantity for ingredient '{line.ingredient_name}'"
                    )
                repo.add_line(
                    recipe,
                    repo.get_or_create_ingredient(line.ingredient_name.strip()),
                    repo.get_or_create_unit(line.unit_name.strip()),
                    quantity,
                    line.notes,
                    position,
                )
            repo.commit()
        except Exception:
            repo.rollback()
            raise

        logger.info(
            "Recipe %s created with %d ingredient lines",
            recipe.recipe_id,
            len(ingredients),
        )
        return RecipeService.get_recipe(db, recipe.recipe_id)

    @staticmethod
    def get_recipe(db: Session, recipe_id: int) -> Recipe:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe
