"""
Security Module - Admin credential checking and client identification
"""

from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


CREDENTIALS_EXTENSION_KEY = 'portfolio_credentials'


class AdminCredentials:
    """
    The single administrator identity

    Route handlers only call ``validate(username, password)``; any object
    with that method can be passed to ``create_app`` instead, e.g. one backed
    by a user table.
    """

    def __init__(self, username, password=None, password_hash=None):
        if password_hash is None:
            if password is None:
                raise ValueError('Either password or password_hash is required')
            password_hash = generate_password_hash(password)
        self.username = username
        self.password_hash = password_hash

    @classmethod
    def from_config(cls, config):
        return cls(config['ADMIN_USERNAME'], password=config['ADMIN_PASSWORD'])

    def validate(self, username, password):
        if not self.username or username != self.username:
            return False
        return verify_password(password, self.password_hash)


def verify_password(password, password_hash):
    """Verify password against hash"""
    return check_password_hash(password_hash, password)


def get_credentials():
    """Credential checker attached to the current application"""
    return current_app.extensions[CREDENTIALS_EXTENSION_KEY]


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


__all__ = [
    'AdminCredentials',
    'CREDENTIALS_EXTENSION_KEY',
    'get_client_ip',
    'get_credentials',
    'verify_password',
]
