"""
Folio Contact Module
====================

Public contact form. Messages are stored first, then forwarded to the
site owner by email; a failed email never loses the message.
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api/contact')

from . import routes
from .models import ContactMessage

__all__ = ['contact_bp', 'ContactMessage']
