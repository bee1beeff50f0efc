"""
Studio - projects and public gallery API.

Flask application factory and initialization.
"""

import logging
import os
from datetime import timedelta
from flask import Flask, jsonify
from config import config

from app.exceptions import StudioError

# Endpoints reachable without an identity. Everything else is default-deny.
PUBLIC_ENDPOINTS = frozenset({
    'api.index',
    'api.health',
    'auth.signup',
    'auth.login',
    'posts.list_posts',
    'posts.get_post',
    'static',
})


def create_app(testing=False):
    """Create and configure the Flask application."""

    app = Flask(__name__)

    app.config['TESTING'] = testing

    # Configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', config.SECRET_KEY)
    app.config['SQLALCHEMY_DATABASE_URI'] = config.SQLALCHEMY_DATABASE_URI
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Session cookie security
    app.config['SESSION_COOKIE_HTTPONLY'] = True
    app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
    app.config['SESSION_COOKIE_SECURE'] = os.getenv('FLASK_ENV') == 'production'

    # Remember-me cookie
    app.config['REMEMBER_COOKIE_DURATION'] = timedelta(days=30)
    app.config['REMEMBER_COOKIE_HTTPONLY'] = True
    app.config['REMEMBER_COOKIE_SAMESITE'] = 'Lax'
    app.config['REMEMBER_COOKIE_SECURE'] = os.getenv('FLASK_ENV') == 'production'

    if not testing:
        logging.basicConfig(
            level=logging.DEBUG if config.DEBUG else logging.INFO,
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        )

    # Ensure directories exist
    config.ensure_dirs()

    # Initialize database
    from app.models import init_db
    init_db(app)

    # Initialize authentication
    from app.auth import init_auth
    init_auth(app)

    # Initialize rate limiter
    from app.limiter import limiter
    if app.config.get('TESTING'):
        app.config['RATELIMIT_ENABLED'] = False
    limiter.init_app(app)

    # Register blueprints
    from app.auth.routes import bp as auth_bp
    from app.routes.api import bp as api_bp
    from app.routes.projects import bp as projects_bp
    from app.routes.posts import bp as posts_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(projects_bp, url_prefix='/api')
    app.register_blueprint(posts_bp, url_prefix='/api')

    @app.before_request
    def require_auth():
        from flask import request as req
        from flask_login import current_user as cu

        endpoint = req.endpoint
        if endpoint is None:
            return
        if endpoint in PUBLIC_ENDPOINTS:
            return
        if cu.is_authenticated:
            return
        return jsonify({'error': 'Authentication required'}), 401

    @app.errorhandler(StudioError)
    def handle_studio_error(error):
        if error.status_code >= 500:
            app.logger.error('Unhandled service error: %s', error.message)
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response

    return app


__all__ = ['create_app', 'PUBLIC_ENDPOINTS']
