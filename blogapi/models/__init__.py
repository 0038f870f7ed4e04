from __future__ import annotations

# Import all models so metadata is complete for migrations
from blogapi.models.user import User
from blogapi.models.blog import Blog

__all__ = [
    "User",
    "Blog",
]
