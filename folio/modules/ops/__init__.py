"""
Ops Module
==========

Health and error visibility for the running API.

Features:
- Public /health endpoint for uptime monitors (no auth)
- Recent error feed from app_logs for the dashboard (session auth)

Usage:
    app.register_blueprint(ops_health_bp)  # Registers at /health
    app.register_blueprint(ops_api_bp)     # Registers at /api/ops
"""

from flask import Blueprint

# Public health endpoint (no auth, for uptime monitors)
ops_health_bp = Blueprint(
    'ops_health',
    __name__,
    url_prefix='/health'
)

# Error feed for the dashboard (session auth)
ops_api_bp = Blueprint(
    'ops_api',
    __name__,
    url_prefix='/api/ops'
)

from . import routes
