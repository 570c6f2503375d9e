"""
Recipe catalogue models: recipes, their ingredient lines, and the
ingredient / measurement-unit master tables the lines point at.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    TIMESTAMP,
    ForeignKey,
    Numeric,
    Uuid,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Ingredient(Base):
    """Master ingredient table, one row per distinct ingredient name."""

    __tablename__ = "ingredient"
    __table_args__ = {"sqlite_autoincrement": True}

    ingredient_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True, index=True)

    def __repr__(self):
        return f"<Ingredient(id={self.ingredient_id}, name='{self.name}')>"


class MeasurementUnit(Base):
    """Units an ingredient line can be measured in (Cup, Gram, Pinch...)"""

    __tablename__ = "measurement_unit"
    __table_args__ = {"sqlite_autoincrement": True}

    unit_id = Column(Integer, primary_key=True, autoincrement=True)
    unit_name = Column(Text, nullable=False, unique=True)
    abbreviation = Column(Text)

    def __repr__(self):
        return f"<MeasurementUnit(id={self.unit_id}, unit_name='{self.unit_name}')>"


class Recipe(Base):
    """Recipes authored by recipe developers"""

    __tablename__ = "recipe"
    __table_args__ = {"sqlite_autoincrement": True}

    recipe_id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="SET NULL"), nullable=True
    )
    title = Column(Text, nullable=False)
    description = Column(Text)
    servings = Column(Integer)
    cooking_time_minutes = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    author = relationship("AppUser", back_populates="recipes")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.sort_order",
    )


class RecipeIngredient(Base):
    """One ingredient line of a recipe: quantity of an ingredient in a unit"""

    __tablename__ = "recipe_ingredient"

    recipe_ingredient_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer, ForeignKey("recipe.recipe_id", ondelete="CASCADE"), nullable=False
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredient.ingredient_id"), nullable=False
    )
    unit_id = Column(Integer, ForeignKey("measurement_unit.unit_id"), nullable=False)
    quantity = Column(Numeric(10, 3, asdecimal=True), nullable=False)
    notes = Column(Text)
    sort_order = Column(Integer, nullable=False, default=0)

    recipe = relationship("Recipe", back_populates="ingredients")
    ingredient = relationship("Ingredient", lazy="joined")
    unit = relationship("MeasurementUnit", lazy="joined")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_recipe_ingredient_quantity_nonneg"),
        {"sqlite_autoincrement": True},
    )

    @property
    def ingredient_name(self) -> str:
        return self.ingredient.name

    @property
    def unit_name(self) -> str:
        return self.unit.unit_name
