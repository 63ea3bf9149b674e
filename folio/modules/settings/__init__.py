"""
Settings Module
===============

Site-wide key/value settings (site title, SEO defaults, social handles).
Public settings are readable by anyone; the rest only by their author.
"""

from flask import Blueprint

settings_bp = Blueprint('settings', __name__, url_prefix='/api/site-settings')

from . import routes
from .helpers import get_setting
from .models import SiteSetting

__all__ = ['settings_bp', 'SiteSetting', 'get_setting']
