import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # SECURITY: set a secure random key in production via env var
    SECRET_KEY = os.environ.get('BOOKCAT_SECRET') or "dev-secret-change-me"
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f"sqlite:///{os.path.join(BASE_DIR, 'bookcat.db')}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    WTF_CSRF_ENABLED = True
    LOG_LEVEL = (os.environ.get('BOOKCAT_LOG_LEVEL') or "INFO").upper()
    # Talisman redirects to https and marks the session cookie secure when on
    FORCE_HTTPS = _env_flag('BOOKCAT_FORCE_HTTPS')


class TestConfig(Config):
    __test__ = False
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    FORCE_HTTPS = False
