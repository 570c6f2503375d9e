"""
Meal planning models.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    TIMESTAMP,
    ForeignKey,
    Date,
    Uuid,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.enums import MealType


class MealPlan(Base):
    """A user's plan covering a date range"""

    __tablename__ = "meal_plan"
    __table_args__ = {"sqlite_autoincrement": True}

    plan_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Uuid,
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    plan_name = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("AppUser", back_populates="meal_plans")
    entries = relationship(
        "MealPlanEntry",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="MealPlanEntry.entry_id",
    )


class MealPlanEntry(Base):
    """A recipe scheduled for one meal of one day in a plan"""

    __tablename__ = "meal_plan_entry"

    entry_id = Column(Integer, primary_key=True, autoincrement=True)
    plan_id = Column(
        Integer,
        ForeignKey("meal_plan.plan_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        Integer, ForeignKey("recipe.recipe_id", ondelete="CASCADE"), nullable=False
    )
    meal_date = Column(Date, nullable=False)
    meal_type = Column(SQLEnum(MealType), nullable=False)
    servings_to_prepare = Column(Integer, nullable=False, default=1)

    plan = relationship("MealPlan", back_populates="entries")
    recipe = relationship("Recipe")

    __table_args__ = (
        CheckConstraint(
            "servings_to_prepare >= 1", name="ck_meal_plan_entry_servings_positive"
        ),
        {"sqlite_autoincrement": True},
    )
