"""
API dependencies for dependency injection
"""

from typing import Generator
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from repositories import UserRepository


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user_id(request: Request, db: Session = Depends(get_db)) -> UUID:
    """
    Authenticated user id forwarded by the session layer.

    The header is trusted as-is; a missing or malformed value means the
    request carries no session. The first request from a new id provisions
    its ``app_user`` row so the caller can own plans, recipes and lists.

    Raises:
        UnauthorizedError: If the header is absent or not a UUID
    """
    raw = request.headers.get(settings.user_id_header)
    if not raw:
        raise UnauthorizedError()
    try:
        user_id = UUID(raw)
    except ValueError:
        raise UnauthorizedError()

    UserRepository(db).get_or_create(user_id)
    return user_id
