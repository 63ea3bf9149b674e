"""
Folio Education Module
======================

Degrees and courses. An entry without an end date is still in progress.
"""

from flask import Blueprint

education_bp = Blueprint('education', __name__, url_prefix='/api/education')

from . import routes
from .models import Education

__all__ = ['education_bp', 'Education']
