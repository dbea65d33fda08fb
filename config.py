"""
Application Configuration

Centralizes Flask settings and the measurement engine defaults
(serving range, dash conversion factor, default descriptor set).
"""

import os

from constants.ingredients import DEFAULT_DESCRIPTOR_SET


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Servings multiplier range
    SERVINGS_MIN = int(os.environ.get('SERVINGS_MIN', 1))
    SERVINGS_MAX = int(os.environ.get('SERVINGS_MAX', 6))

    # ml per dash of bitters
    DASH_TO_ML = float(os.environ.get('DASH_TO_ML', 1.0))

    # Descriptor words used when a request names no drink domain
    DEFAULT_DESCRIPTOR_SET = os.environ.get('DEFAULT_DESCRIPTOR_SET', DEFAULT_DESCRIPTOR_SET)


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SERVINGS_MIN = 1
    SERVINGS_MAX = 6
    DASH_TO_ML = 1.0
    DEFAULT_DESCRIPTOR_SET = DEFAULT_DESCRIPTOR_SET


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
