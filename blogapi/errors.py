"""Error taxonomy for the blog API.

Every failure a handler can produce maps to one of these classes. Each carries
the HTTP status it renders with and a symbolic message key; turning the key
into text is left to :func:`blogapi.messages.render_message`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable


class MessageKey(str, Enum):
    BLOG_NOT_CREATED = "blog.notCreated"
    BLOG_NOT_FOUND = "blog.notFound"
    BLOG_NOT_UPDATED = "blog.notUpdated"
    FORBIDDEN = "forbidden"
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION_FAILED = "validation.failed"


class BlogAPIError(Exception):
    status_code: int = 400
    default_key: MessageKey = MessageKey.BLOG_NOT_FOUND

    def __init__(self, key: MessageKey | None = None) -> None:
        self.key = key or self.default_key
        super().__init__(self.key.value)

    def to_dict(self) -> dict[str, Any]:
        from blogapi.messages import render_message

        return {"error": self.key.value, "message": render_message(self.key)}


class ValidationError(BlogAPIError):
    """A required field is missing or empty."""

    status_code = 422
    default_key = MessageKey.VALIDATION_FAILED

    def __init__(self, fields: Iterable[str], key: MessageKey | None = None) -> None:
        super().__init__(key)
        self.fields = list(fields)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["fields"] = self.fields
        return payload


class Unauthorized(BlogAPIError):
    status_code = 401
    default_key = MessageKey.UNAUTHENTICATED


class Forbidden(BlogAPIError):
    status_code = 403
    default_key = MessageKey.FORBIDDEN


class NotFound(BlogAPIError):
    status_code = 404
    default_key = MessageKey.BLOG_NOT_FOUND


class PersistenceError(BlogAPIError):
    """Store failure. The underlying exception is logged, never rendered."""

    status_code = 400
    default_key = MessageKey.BLOG_NOT_CREATED
