"""
Auth Routes - session sign-up, sign-in and sign-out over the account service.
"""

from flask import Blueprint, jsonify
from flask_login import login_user, logout_user

from config import config
from app.auth.decorators import with_identity
from app.limiter import limiter
from app.models import User
from app.services.account_service import account_service
from app.utils import json_body

bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@bp.route('/signup', methods=['POST'])
@limiter.limit(config.SIGNUP_RATE_LIMIT)
def signup():
    data = json_body()
    user = account_service.register(
        data.get('name'),
        data.get('email'),
        data.get('password'),
        data.get('confirm_password'),
    )
    login_user(user)
    return jsonify(user.to_dict()), 201


@bp.route('/login', methods=['POST'])
@limiter.limit(config.LOGIN_RATE_LIMIT)
def login():
    data = json_body()
    user = account_service.authenticate(data.get('email'), data.get('password'))
    login_user(user, remember=bool(data.get('remember')))
    return jsonify(user.to_dict())


@bp.route('/logout', methods=['POST'])
@with_identity
def logout(requester_id):
    logout_user()
    return jsonify({'success': True})


@bp.route('/me', methods=['GET'])
@with_identity
def me(requester_id):
    """Profile of the session's account, with its project and post counts."""
    return jsonify(User.query.get(requester_id).to_dict())
