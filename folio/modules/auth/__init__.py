"""
Folio Auth Module

Session lookup for the API. Issuing sessions (login, signup, OAuth) lives
outside this package; whatever does it only has to put `user_id` into the
Flask session, or install its own provider via FOLIO_SESSION_PROVIDER.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
from .models import User
from .utils import AuthSession, get_session, require_auth, require_owner

__all__ = ['auth_bp', 'User', 'AuthSession', 'get_session', 'require_auth', 'require_owner']
