"""
Folio Projects Module
=====================

Portfolio projects and the skills used to build them.
- `published`: controls public visibility (new projects go live by default)
- `skillIds`: links to skills, written together with the project
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='/api/projects')

from . import routes
from .models import Project, ProjectSkill

__all__ = ['projects_bp', 'Project', 'ProjectSkill']
