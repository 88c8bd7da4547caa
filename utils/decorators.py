"""
Decorators Module - Authentication decorators
"""

from functools import wraps
from flask import session, jsonify


def is_authenticated():
    return bool(session.get('admin_logged_in'))


def login_required(f):
    """Decorator to require an authenticated admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_authenticated():
            return jsonify({'message': 'Unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function
