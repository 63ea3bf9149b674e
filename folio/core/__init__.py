"""
Folio Core
==========

Core utilities and shared functionality for Folio modules.
"""

from .config import Config
from .database import Database, db, transaction
from .errors import ApiError, Conflict, Forbidden, NotFound, Unauthorized, ValidationError
from .logging_service import LoggingService

__all__ = [
    'Config', 'Database', 'db', 'transaction', 'LoggingService',
    'ApiError', 'Conflict', 'Forbidden', 'NotFound', 'Unauthorized', 'ValidationError',
]
