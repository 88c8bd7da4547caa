import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Storage Settings
    DATA_DIR = os.environ.get('PORTFOLIO_DATA_DIR', os.path.join(os.getcwd(), 'data'))
    FLUSH_ON_SHUTDOWN = True

    # API Settings
    API_PREFIX = '/api'
    ADMIN_PREFIX = '/api/admin'
    UNTRACKED_PATHS = ('/health', '/favicon.ico')

    # Admin Settings
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'vwolf')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'prueba')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    # Tests point DATA_DIR at a temporary directory through config overrides.
    FLUSH_ON_SHUTDOWN = False
    ADMIN_USERNAME = 'vwolf'
    ADMIN_PASSWORD = 'prueba'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
