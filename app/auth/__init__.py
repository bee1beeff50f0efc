"""
Authentication package for Studio.
Flask-Login session setup and user loader.
"""

from flask_login import LoginManager

login_manager = LoginManager()


def init_auth(app):
    """Initialize authentication with Flask app."""
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from app.models import User
        user = User.query.get(user_id)
        if user and not user.is_active:
            return None
        return user

    @login_manager.unauthorized_handler
    def unauthorized():
        from flask import jsonify
        return jsonify({'error': 'Authentication required'}), 401
