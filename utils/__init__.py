"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required, is_authenticated
from .data import (
    DEFAULT_SITE_CONTENT,
    NotFoundError,
    PersistenceError,
    PortfolioStore,
    get_store
)
from .security import (
    AdminCredentials,
    get_client_ip,
    get_credentials,
    verify_password
)
from .helpers import (
    validate_body,
    should_track_visit,
    track_visitor
)

__all__ = [
    # Decorators
    'login_required',
    'is_authenticated',

    # Data
    'DEFAULT_SITE_CONTENT',
    'NotFoundError',
    'PersistenceError',
    'PortfolioStore',
    'get_store',

    # Security
    'AdminCredentials',
    'get_client_ip',
    'get_credentials',
    'verify_password',

    # Helpers
    'validate_body',
    'should_track_visit',
    'track_visitor'
]
