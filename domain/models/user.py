"""
User-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import UserRole


class AppUser(Base):
    """User account model"""

    __tablename__ = "app_user"

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # NULL for accounts provisioned from a forwarded user id
    email = Column(Text, unique=True)
    full_name = Column(Text)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.RECIPE_DEVELOPER)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    recipes = relationship("Recipe", back_populates="author")
    meal_plans = relationship(
        "MealPlan", back_populates="user", cascade="all, delete-orphan"
    )
    shopping_lists = relationship(
        "ShoppingList", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<AppUser(id={self.user_id}, email='{self.email}')>"
