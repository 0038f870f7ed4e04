from __future__ import annotations

from flask import current_app, has_app_context

from blogapi.errors import MessageKey

DEFAULT_MESSAGES: dict[str, str] = {
    MessageKey.BLOG_NOT_CREATED.value: "The blog could not be created.",
    MessageKey.BLOG_NOT_FOUND.value: "The requested blog was not found.",
    MessageKey.BLOG_NOT_UPDATED.value: "The blog could not be updated.",
    MessageKey.FORBIDDEN.value: "You are not allowed to perform this action.",
    MessageKey.UNAUTHENTICATED.value: "Authentication is required.",
    MessageKey.VALIDATION_FAILED.value: "The given data was invalid.",
}


def render_message(key: MessageKey | str) -> str:
    """Resolve a message key to text: app config first, then the built-in catalog."""
    name = key.value if isinstance(key, MessageKey) else key
    if has_app_context():
        overrides = current_app.config.get("MESSAGES") or {}
        if name in overrides:
            return overrides[name]
    return DEFAULT_MESSAGES.get(name, name)
