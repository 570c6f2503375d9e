"""API routes package"""

from fastapi import FastAPI

from . import health, plans, recipes, shopping_lists

__all__ = ["health", "plans", "recipes", "shopping_lists", "include_routers"]


def include_routers(app: FastAPI, prefix: str = "") -> None:
    for module in (health, recipes, plans, shopping_lists):
        app.include_router(module.router, prefix=prefix)
