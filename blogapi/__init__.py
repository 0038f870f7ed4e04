from __future__ import annotations

import os
from typing import Any, Dict

import click
from flask import Flask, jsonify, g, request

from blogapi.config import Config
from blogapi.errors import BlogAPIError, MessageKey, NotFound
from blogapi.extensions import (
    db,
    migrate,
    login_manager,
    limiter,
)
from blogapi.logging_config import configure_logging
from blogapi.messages import render_message
from blogapi.models import User, Blog  # ensure models imported for migrations
from blogapi.security import apply_security_headers


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # Rate limiter (in-memory for dev). Strict on writes
    limiter.init_app(app)

    # Callers authenticate per request with a bearer token; no session login
    @login_manager.request_loader
    def load_user_from_request(req) -> User | None:
        from blogapi.services.auth import load_user_from_request as _load

        return _load(req)

    @login_manager.unauthorized_handler
    def unauthorized():
        key = MessageKey.UNAUTHENTICATED
        return jsonify({"error": key.value, "message": render_message(key)}), 401

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()
        # The caller is resolved per request, even when an app context is reused
        g.pop("_login_user", None)

    # Security headers
    @app.after_request
    def set_headers(resp):
        return apply_security_headers(resp)

    # Blueprints
    from blogapi.blueprints.blog import bp as blog_bp
    from blogapi.blueprints.example import bp as example_bp

    app.register_blueprint(blog_bp)
    app.register_blueprint(example_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    # Domain errors carry their own status and message key
    @app.errorhandler(BlogAPIError)
    def blog_api_error(e: BlogAPIError):
        return jsonify(e.to_dict()), e.status_code

    # Error handlers (JSON)
    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": str(e)}), 400

    @app.errorhandler(401)
    def unauthorized_error(e):
        return jsonify({"error": "unauthorized", "message": str(e)}), 401

    @app.errorhandler(403)
    def forbidden(e):
        return jsonify({"error": "forbidden", "message": str(e)}), 403

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "method_not_allowed", "message": str(e)}), 405

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({"error": "payload_too_large", "message": "request body too large"}), 413

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: user provisioning
    @app.cli.command("create-user")
    @click.option("--username", prompt=True)
    def create_user_command(username: str) -> None:
        from blogapi.services.auth import create_user

        try:
            user, token = create_user(username)
        except ValueError:
            click.echo("User already exists")
            return
        click.echo(f"User {user.username} created (id={user.id})")
        click.echo(f"API token: {token}")

    @app.cli.command("rotate-token")
    @click.option("--username", prompt=True)
    def rotate_token_command(username: str) -> None:
        from blogapi.services.auth import rotate_token

        user, token = rotate_token(username)
        if not user:
            click.echo("User not found")
            return
        click.echo(f"API token: {token}")

    # CLI: moderation
    @app.cli.command("verify-blog")
    @click.argument("blog_id", type=int)
    def verify_blog_command(blog_id: int) -> None:
        from blogapi.services.blog import verify_blog

        try:
            blog = verify_blog(blog_id)
        except NotFound:
            click.echo(f"Blog {blog_id} not found")
            return
        click.echo(f"Blog {blog.id} verified")

    return app
