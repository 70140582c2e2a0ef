"""
Comments module.

Append-only comments attached to lessons.

Public API:
- ICommentService (modules.comments.interfaces): Interface for comment operations
- Comment, CreateCommentRequest: Comment models
"""

from .models import Comment, CreateCommentRequest

__all__ = [
    "Comment",
    "CreateCommentRequest",
]
