"""
Auth Routes - Admin login, logout and session status
"""

from flask import session, jsonify, current_app
from models import LoginCredentials
from utils.decorators import is_authenticated
from utils.helpers import validate_body
from utils.security import get_credentials, get_client_ip
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login"""
    credentials = validate_body(LoginCredentials)
    if credentials is None:
        return jsonify({'message': 'Invalid request'}), 400

    client_ip = get_client_ip()
    if get_credentials().validate(credentials.username, credentials.password):
        session.clear()
        session.permanent = True
        session['admin_logged_in'] = True
        current_app.logger.info(f"Admin login: {credentials.username} from {client_ip}")
        return jsonify({'message': 'Login successful'})

    current_app.logger.warning(f"Failed login for {credentials.username!r} from {client_ip}")
    return jsonify({'message': 'Invalid credentials'}), 401


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current session"""
    session.clear()
    current_app.logger.info(f"Logout from {get_client_ip()}")
    return jsonify({'message': 'Logged out successfully'})


@auth_bp.route('/session')
def session_status():
    """Whether the caller holds an authenticated admin session"""
    return jsonify({'authenticated': is_authenticated()})
