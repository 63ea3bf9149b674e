from dataclasses import dataclass

from flask import current_app, request, session

from ...core.database import db
from ...core.errors import Forbidden, Unauthorized
from .models import User


@dataclass(frozen=True)
class AuthSession:
    user: User


def session_cookie_provider(req):
    """Default provider: `user_id` stored in Flask's signed session cookie."""
    user_id = session.get('user_id')
    if not user_id:
        return None
    user = db.session.get(User, user_id)
    return AuthSession(user) if user else None


def get_session():
    """Session of the current caller, or None when nobody is signed in."""
    provider = current_app.config.get('FOLIO_SESSION_PROVIDER') or session_cookie_provider
    return provider(request)


def require_auth():
    auth = get_session()
    if auth is None:
        raise Unauthorized()
    return auth


def require_owner(entity, auth, owner_attr='author_id'):
    if getattr(entity, owner_attr) != auth.user.id:
        raise Forbidden()


def is_owner(entity, auth, owner_attr='author_id'):
    return auth is not None and getattr(entity, owner_attr) == auth.user.id
