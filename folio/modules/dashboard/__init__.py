"""
Dashboard Module
================

Figures for the admin dashboard's overview page.
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api/dashboard')

from . import routes

__all__ = ['dashboard_bp']
