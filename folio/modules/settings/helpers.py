"""
Settings Helpers
================

Typed access to site settings for server-side code.
Falls back to environment variables when a key is not stored.
"""

import logging
import os

from sqlalchemy.exc import SQLAlchemyError

from .models import SiteSetting
from ...core.database import db

logger = logging.getLogger('folio.settings')


def get_setting(key, default=None):
    """Typed value of a setting, else the environment, else `default`."""
    try:
        setting = db.session.scalar(db.select(SiteSetting).where(SiteSetting.key == key))
    except SQLAlchemyError as e:
        logger.warning(f"Error getting setting {key}: {e}")
        db.session.rollback()
        return os.environ.get(key, default)

    if setting is not None:
        return setting.typed_value
    return os.environ.get(key, default)


# ============================================
# Site Settings
# ============================================

def get_contact_email():
    """Where contact form notifications go, if set in the dashboard"""
    return get_setting('contact_email')
