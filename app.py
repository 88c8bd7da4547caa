"""
Portfolio Site - Main Application Entry Point
Built with the Application Factory Pattern

This module creates the Flask application, attaches the content store and
the admin credential checker, and wires blueprints, error handlers and
request hooks. All route handling is delegated to blueprints.
"""

import atexit
import os
from flask import Flask, jsonify, request
from config import get_config
from utils.data import PortfolioStore, STORE_EXTENSION_KEY
from utils.decorators import is_authenticated
from utils.helpers import should_track_visit, track_visitor
from utils.security import AdminCredentials, CREDENTIALS_EXTENSION_KEY

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.portfolio import portfolio_bp
from blueprints.dashboard import dashboard_bp


def create_app(config_name=None, store=None, credentials=None, config_overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        store (PortfolioStore): Pre-built store; one is loaded from DATA_DIR otherwise
        credentials: Object with ``validate(username, password)``; defaults to
            the configured admin identity
        config_overrides (dict): Settings applied on top of the config class

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if config_overrides:
        app.config.update(config_overrides)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # JSON responses keep model field order and non-ASCII text
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # Attach store and credentials
    initialize_extensions(app, store, credentials)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio API is running'}, 200

    return app


def initialize_extensions(app, store=None, credentials=None):
    """Load the content store and set up the admin credential checker"""
    if store is None:
        store = PortfolioStore(app.config['DATA_DIR']).load()
        app.logger.info(f"✓ Store loaded from {app.config['DATA_DIR']}")
    app.extensions[STORE_EXTENSION_KEY] = store

    if credentials is None:
        credentials = AdminCredentials.from_config(app.config)
    app.extensions[CREDENTIALS_EXTENSION_KEY] = credentials

    if app.config.get('FLUSH_ON_SHUTDOWN'):
        atexit.register(store.close)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(dashboard_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({'message': 'Invalid request'}), 400

    @app.errorhandler(401)
    def unauthorized(e):
        return jsonify({'message': 'Unauthorized'}), 401

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(getattr(e, 'original_exception', None) or e)}")
        return jsonify({'message': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.before_request
    def require_admin_session():
        """Reject anonymous admin requests, even ones matching no route"""
        prefix = app.config['ADMIN_PREFIX']
        is_admin_path = request.path == prefix or request.path.startswith(prefix + '/')
        if is_admin_path and not is_authenticated():
            return jsonify({'message': 'Unauthorized'}), 401

    @app.before_request
    def record_visit():
        """Track every public page view"""
        if should_track_visit():
            track_visitor()

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
