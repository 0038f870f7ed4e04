from __future__ import annotations

# Re-export common schema classes for convenient imports
from .blogs import BlogInput, REQUIRED_FIELDS, validate_blog_input  # noqa: F401

__all__ = [
    "BlogInput",
    "REQUIRED_FIELDS",
    "validate_blog_input",
]
