"""Flask application configuration."""
import os


class Config:
    """Base configuration."""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        'sqlite:///recursos.db'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Semantic analysis
    SEMANTICS_BATCH_LIMIT = int(os.environ.get('SEMANTICS_BATCH_LIMIT', 50))
    SEMANTICS_MAX_BATCH_LIMIT = int(os.environ.get('SEMANTICS_MAX_BATCH_LIMIT', 50))
    METRICS_BATCH_LIMIT = 10
    METRICS_MAX_BATCH_LIMIT = 50
    METRICS_REPORT_LIMIT = 100
    DASHBOARD_RESOURCE_LIMIT = 10
    DEFAULT_REPORT_PERIOD_DAYS = 30

    # CORS (for development)
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Test configuration backed by an in-memory database."""
    DEBUG = False
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
