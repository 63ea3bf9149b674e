"""
Folio Experience Module
=======================

Work history entries. An entry without an end date is the current job.
"""

from flask import Blueprint

experience_bp = Blueprint('experience', __name__, url_prefix='/api/experience')

from . import routes
from .models import Experience

__all__ = ['experience_bp', 'Experience']
