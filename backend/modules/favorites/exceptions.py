"""
Favorites module exceptions.
"""

from shared.exceptions import NotFoundError


class FavoriteNotFoundError(NotFoundError):
    """Raised when a favorite is not found."""

    def __init__(self, favorite_id: str):
        super().__init__(
            f"Favorite not found: {favorite_id}",
            code="FAVORITE_NOT_FOUND",
            details={"favorite_id": favorite_id},
        )
