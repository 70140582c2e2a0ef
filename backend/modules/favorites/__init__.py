"""
Favorites module.

Per-user saved lessons, unique per (user_email, lesson_id).

Public API:
- IFavoriteService (modules.favorites.interfaces): Interface for favorite operations
- Favorite, CreateFavoriteRequest, FavoriteResult: Favorite models
- FavoriteNotFoundError
"""

from .models import Favorite, CreateFavoriteRequest, FavoriteResult
from .exceptions import FavoriteNotFoundError

__all__ = [
    "Favorite",
    "CreateFavoriteRequest",
    "FavoriteResult",
    "FavoriteNotFoundError",
]
