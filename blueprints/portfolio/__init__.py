"""
Portfolio Blueprint - Public content API
Handles: Projects, technologies, blogs, timeline, site content, contact form
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
