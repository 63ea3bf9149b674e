"""
Folio - A Flask Portfolio Backend
=================================

JSON API behind a personal portfolio site:
- Projects, blog posts, skills, experience and education with drafts
- Profile (personal info) and site-wide settings
- Contact form with email notification
- Dashboard figures and a health endpoint

Usage:
    from flask import Flask
    from folio import Folio

    app = Flask(__name__)
    Folio(app, {'features': {'contact': False}})

Or simply `create_app()`.
"""

from flask import Flask
from flask_cors import CORS

from .cli import register_commands
from .core.api import register_error_handlers
from .core.config import Config
from .core.database import Database

__version__ = '0.1.0'

DEFAULT_FEATURES = {
    'auth': True,
    'projects': True,
    'blog': True,
    'skills': True,
    'experience': True,
    'education': True,
    'personal_info': True,
    'settings': True,
    'contact': True,
    'dashboard': True,
    'ops': True,
}


def _blueprints_for(feature):
    """Blueprints that make up a feature, imported on demand."""
    if feature == 'auth':
        from .modules.auth import auth_bp
        return [auth_bp]
    if feature == 'projects':
        from .modules.projects import projects_bp
        return [projects_bp]
    if feature == 'blog':
        from .modules.blog import blog_bp
        return [blog_bp]
    if feature == 'skills':
        from .modules.skills import skills_bp
        return [skills_bp]
    if feature == 'experience':
        from .modules.experience import experience_bp
        return [experience_bp]
    if feature == 'education':
        from .modules.education import education_bp
        return [education_bp]
    if feature == 'personal_info':
        from .modules.personal_info import personal_info_bp
        return [personal_info_bp]
    if feature == 'settings':
        from .modules.settings import settings_bp
        return [settings_bp]
    if feature == 'contact':
        from .modules.contact import contact_bp
        return [contact_bp]
    if feature == 'dashboard':
        from .modules.dashboard import dashboard_bp
        return [dashboard_bp]
    if feature == 'ops':
        from .modules.ops import ops_api_bp, ops_health_bp
        return [ops_health_bp, ops_api_bp]
    raise ValueError(f"Unknown Folio feature '{feature}'")


class Folio:
    """
    Flask extension that wires the whole API onto an app.

    `config` may hold any upper-case config key (overriding app.config and
    the environment) plus a `features` dict to switch modules off.
    """

    def __init__(self, app=None, config=None):
        self._config = dict(config or {})
        self._registered = []
        self.features = dict(DEFAULT_FEATURES)
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._apply_config(app)

        Database.init_app(app)

        origins = [origin.strip() for origin in str(app.config['CORS_ORIGINS']).split(',') if origin.strip()]
        CORS(app, resources={r"/api/*": {"origins": origins or '*'}}, supports_credentials=True)

        from .modules.email import email_service
        email_service.init_app(app)

        self._register_modules(app)
        register_error_handlers(app)
        register_commands(app)

        app.extensions['folio'] = self

    def _apply_config(self, app):
        for key, value in Config.as_dict().items():
            if app.config.get(key) is None:
                app.config[key] = value
        for key, value in self._config.items():
            if key.isupper():
                app.config[key] = value

        unknown = set(self._config.get('features', {})) - set(DEFAULT_FEATURES)
        if unknown:
            raise ValueError(f"Unknown Folio feature(s): {', '.join(sorted(unknown))}")
        self.features.update(self._config.get('features', {}))

    def _register_modules(self, app):
        for feature, enabled in self.features.items():
            if not enabled:
                continue
            for blueprint in _blueprints_for(feature):
                app.register_blueprint(blueprint)
            self._registered.append(feature)

    def get_registered_modules(self):
        return list(self._registered)


def create_app(config=None):
    """Application factory used by `flask --app folio run` and the tests."""
    app = Flask(__name__)
    Folio(app, config)
    return app


__all__ = ['Folio', 'create_app', 'Config', '__version__']
