"""
Recipe Repository - Data access for recipes and the ingredient / unit catalogues
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Recipe, RecipeIngredient, Ingredient, MeasurementUnit


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get recipe with its ingredient lines (ingredient and unit resolved)"""
        return (
            self.db.query(Recipe)
            .options(selectinload(Recipe.ingredients))
            .filter(Recipe.recipe_id == recipe_id)
            .first()
        )

    def exists(self, recipe_id: int) -> bool:
        return (
            self.db.query(Recipe.recipe_id)
            .filter(Recipe.recipe_id == recipe_id)
            .first()
            is not None
        )

    def get_or_create_ingredient(self, name: str) -> Ingredient:
        """Find an ingredient by exact name, staging a new row if absent"""
        ingredient = self.db.query(Ingredient).filter(Ingredient.name == name).first()
        if ingredient is None:
            ingredient = Ingredient(name=name)
            self.db.add(ingredient)
            self.db.flush()
        return ingredient

    def get_or_create_unit(self, unit_name: str) -> MeasurementUnit:
        """Find a unit by exact name, staging a new row if absent"""
        unit = (
            self.db.query(MeasurementUnit)
            .filter(MeasurementUnit.unit_name == unit_name)
            .first()
        )
        if unit is None:
            unit = MeasurementUnit(unit_name=unit_name)
            self.db.add(unit)
            self.db.flush()
        return unit

    def list_units(self) -> List[MeasurementUnit]:
        return self.db.query(MeasurementUnit).order_by(MeasurementUnit.unit_name).all()

    def add_line(
        self,
        recipe: Recipe,
        ingredient: Ingredient,
        unit: MeasurementUnit,
        quantity,
        notes: Optional[str],
        sort_order: int,
    ) -> RecipeIngredient:
        line = RecipeIngredient(
            ingredient=ingredient,
            unit=unit,
            quantity=quantity,
            notes=notes,
            sort_order=sort_order,
        )
        recipe.ingredients.append(line)
        return line
