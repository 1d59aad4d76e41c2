"""API routers for the ingreedy service."""

from ingreedy.routers.ingredients import router as ingredients_router

__all__ = [
    "ingredients_router",
]
