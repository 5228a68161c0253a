import os
import warnings


class BaseConfig:
    """Base configuration with safe defaults."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")
    if SECRET_KEY == "dev":
        warnings.warn(
            "Using default SECRET_KEY; set the SECRET_KEY environment variable in production",
            UserWarning,
        )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    WTF_CSRF_ENABLED = True
    APP_TIMEZONE = os.environ.get("APP_TIMEZONE", "UTC")

    # Default administrator created by DatabaseSeeder
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@atlasdigitalize.com")
    ADMIN_NAME = os.environ.get("ADMIN_NAME", "Admin")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "AtlasDigitalize@!23")


class DevelopmentConfig(BaseConfig):
    SQLALCHEMY_DATABASE_URI = 'sqlite:///database.sqlite'


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False


class ProductionConfig(BaseConfig):
    SECRET_KEY = os.environ.get('SECRET_KEY')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///database.sqlite')


def validate_runtime_config(config: dict):
    """Fail fast on insecure runtime configuration."""
    if config.get('APP_ENV') == 'production' and not config.get('SECRET_KEY'):
        raise RuntimeError('SECRET_KEY is required in production')
    if not config.get('TESTING', False) and not config.get('WTF_CSRF_ENABLED', True):
        raise RuntimeError('WTF_CSRF_ENABLED must be True outside test environments')
    if not (config.get('ADMIN_EMAIL') or '').strip():
        raise RuntimeError('ADMIN_EMAIL must not be empty')
