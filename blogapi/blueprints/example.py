from __future__ import annotations

from flask import Blueprint, jsonify

from blogapi.extensions import limiter

bp = Blueprint("example", __name__)


@bp.get("/test")
@limiter.limit("120 per minute")
def test():
    """Smoke-test endpoint"""
    return jsonify({"message": "hello world"})
