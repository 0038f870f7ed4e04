from __future__ import annotations

from flask import Blueprint

bp = Blueprint("blog", __name__)

# Register the blog resource routes
import blogapi.blueprints.api.blog  # noqa: F401,E402
