"""
Folio Personal Info Module
==========================

The profile shown on the home and about pages, one row per user.
"""

from flask import Blueprint

personal_info_bp = Blueprint('personal_info', __name__, url_prefix='/api/personal-info')

from . import routes
from .models import PersonalInfo

__all__ = ['personal_info_bp', 'PersonalInfo']
