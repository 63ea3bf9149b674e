import os
from dotenv import load_dotenv

load_dotenv(override=True)


def _env_flag(name, default='0'):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Base configuration for the Folio portfolio backend.
    Every value can be overridden through app.config or the dict passed to Folio(app, config).
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))

    # Any SQLAlchemy URL; falls back to a SQLite file inside DB_DIR
    DATABASE_URL = os.getenv('DATABASE_URL')

    # Pagination
    DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', '10'))

    # CORS origins for /api/*, comma separated
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Email settings
    # 'log' only records notifications; 'resend' and 'smtp' deliver them
    EMAIL_PROVIDER = os.getenv('EMAIL_PROVIDER', 'log')
    RESEND_API_KEY = os.getenv('RESEND_API_KEY') or os.getenv('RESEND')
    EMAIL_ADDRESS = os.getenv('EMAIL_ADDRESS', 'onboarding@resend.dev')
    EMAIL_ADMIN_EMAIL = os.getenv('EMAIL_ADMIN_EMAIL')
    EMAIL_BRAND_NAME = os.getenv('EMAIL_BRAND_NAME', 'Folio')
    # SMTP provider
    EMAIL_HOST = os.getenv('EMAIL_HOST', 'smtp.gmail.com')
    EMAIL_PORT = int(os.getenv('EMAIL_PORT', '587'))
    EMAIL_PASSWORD = os.getenv('EMAIL_PASSWORD')

    # Error responses carry the exception text instead of a generic message
    FOLIO_EXPOSE_ERRORS = _env_flag('FOLIO_EXPOSE_ERRORS')

    # Mirror log entries into the app_logs table
    LOG_TO_DATABASE = _env_flag('LOG_TO_DATABASE', '1')

    # Port for local server
    port = int(os.getenv('PORT', '5000'))

    @classmethod
    def database_uri(cls, db_dir=None, database_url=None):
        """Resolve the SQLAlchemy URI, normalising legacy postgres:// URLs."""
        url = database_url or cls.DATABASE_URL
        if url:
            if url.startswith('postgres://'):
                url = url.replace('postgres://', 'postgresql://', 1)
            return url
        return 'sqlite:///' + os.path.join(db_dir or cls.DB_DIR, 'folio.db')

    @classmethod
    def as_dict(cls):
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper() and not key.startswith('_')
        }
