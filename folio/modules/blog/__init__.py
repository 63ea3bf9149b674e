"""
Folio Blog Module
=================

Blog posts with drafts, categories, tags and a public view counter.
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__, url_prefix='/api/blog')

from . import routes
from .models import BlogPost

__all__ = ['blog_bp', 'BlogPost']
