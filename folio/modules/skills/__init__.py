"""
Folio Skills Module
===================

Skills shown on the portfolio, grouped by category and linked to projects.
"""

from flask import Blueprint

skills_bp = Blueprint('skills', __name__, url_prefix='/api/skills')

from . import routes
from .models import Skill

__all__ = ['skills_bp', 'Skill']
