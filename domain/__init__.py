"""
Domain layer: ORM models, request/response schemas, mappers and enums.
"""

from domain import enums, mappers, models, schemas

__all__ = ["enums", "mappers", "models", "schemas"]
