import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Base configuration shared across all environments."""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    # A browsing session keeps its cart for one day
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)

    # Storefront presentation
    SHOP_NAME = os.environ.get('SHOP_NAME', 'SHOP')
    CURRENCY_SUFFIX = os.environ.get('CURRENCY_SUFFIX', '₽')

    LOG_TO_FILE = os.environ.get('LOG_TO_FILE', 'False').lower() == 'true'

class DevelopmentConfig(Config):
    """Development environment configuration."""
    DEBUG = True

class ProductionConfig(Config):
    """Production environment configuration."""
    DEBUG = False

    # Ensure SECRET_KEY is set (checked again in create_app)
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Session Cookie Security
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    LOG_TO_FILE = os.environ.get('LOG_TO_FILE', 'True').lower() == 'true'


class TestingConfig(Config):
    """Testing environment configuration."""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SESSION_COOKIE_SECURE = False
    LOG_TO_FILE = False

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
