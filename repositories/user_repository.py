"""
User Repository - Data access layer for user accounts
"""

import logging
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from domain.enums import UserRole
from app.exceptions import ConflictError

logger = logging.getLogger("flavourly.users")


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_id(self, user_id: UUID) -> Optional[AppUser]:
        """Get user by ID"""
        return self.db.query(AppUser).filter(AppUser.user_id == user_id).first()

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email"""
        return self.db.query(AppUser).filter(AppUser.email == email).first()

    def create_user(
        self,
        email: str,
        full_name: str = None,
        role: UserRole = UserRole.RECIPE_DEVELOPER,
        user_id: Optional[UUID] = None,
    ) -> AppUser:
        """Create a new user"""
        user = AppUser(user_id=user_id, email=email, full_name=full_name, role=role)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")

    def get_or_create(self, user_id: UUID) -> AppUser:
        """
        Return the account for an authenticated user id, creating a bare row
        the first time the id is seen.

        Two first requests racing on the same id both end with the one row.
        """
        user = self.db.get(AppUser, user_id)
        if user is not None:
            return user

        try:
            user = AppUser(user_id=user_id)
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            user = self.db.get(AppUser, user_id)
            if user is None:
                raise
            return user

        logger.info("Provisioned account for user %s", user_id)
        return user
