"""
Shopping list models.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    TIMESTAMP,
    ForeignKey,
    Numeric,
    Boolean,
    Uuid,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class ShoppingList(Base):
    """Shopping lists, generated from meal plans or written by hand"""

    __tablename__ = "shopping_list"
    __table_args__ = {"sqlite_autoincrement": True}

    list_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Uuid,
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Provenance only: deleting the plan keeps the list
    meal_plan_id = Column(
        Integer, ForeignKey("meal_plan.plan_id", ondelete="SET NULL"), nullable=True
    )
    list_name = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("AppUser", back_populates="shopping_lists")
    meal_plan = relationship("MealPlan")
    items = relationship(
        "ShoppingListItem",
        back_populates="list",
        cascade="all, delete-orphan",
        order_by="ShoppingListItem.sort_order",
    )


class ShoppingListItem(Base):
    """Individual items in a shopping list"""

    __tablename__ = "shopping_list_item"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    list_id = Column(
        Integer,
        ForeignKey("shopping_list.list_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_name = Column(Text, nullable=False)
    quantity = Column(Numeric(12, 3, asdecimal=True), nullable=False, default=0)
    unit = Column(Text)
    notes = Column(Text)
    is_completed = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)

    list = relationship("ShoppingList", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_shopping_item_quantity_nonneg"),
        {"sqlite_autoincrement": True},
    )
