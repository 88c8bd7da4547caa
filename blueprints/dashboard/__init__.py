"""
Dashboard Blueprint - Admin content management API
Handles: Creating, updating and deleting content; reading contacts and visits
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api/admin')

from . import routes
