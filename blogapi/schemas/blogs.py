from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

REQUIRED_FIELDS: tuple[str, ...] = ("title", "description", "article")


class BlogInput(BaseModel):
    """The writable fields of a blog. Anything else in the request is dropped."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, coerce_numbers_to_str=True)

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    article: str = Field(min_length=1)


def validate_blog_input(data: Any) -> tuple[BlogInput | None, list[str]]:
    """Check the required blog fields.

    Returns ``(payload, [])`` on success, or ``(None, failed_fields)`` where
    ``failed_fields`` lists the offending field names in declaration order.
    """
    if not isinstance(data, dict):
        return None, list(REQUIRED_FIELDS)
    try:
        return BlogInput.model_validate(data), []
    except ValidationError as e:
        failed = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        return None, [name for name in REQUIRED_FIELDS if name in failed]
