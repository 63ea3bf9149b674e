"""
Centralized logging service for the Folio application.
Provides structured logging with database storage and easy integration.
"""

import json
import logging
import traceback
from datetime import timedelta

from flask import current_app, has_app_context, request, has_request_context

from .database import db, isoformat, utcnow

std_logger = logging.getLogger('folio')


class AppLog(db.Model):
    __tablename__ = 'app_logs'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    timestamp = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    level = db.Column(db.String(16), nullable=False, index=True)
    source = db.Column(db.String(64), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    details = db.Column(db.Text)
    ip_address = db.Column(db.String(64))
    user_agent = db.Column(db.Text)
    request_path = db.Column(db.Text)
    user_id = db.Column(db.String(64))

    def to_dict(self):
        try:
            details = json.loads(self.details) if self.details else None
        except ValueError:
            details = self.details
        return {
            'id': self.id,
            'timestamp': isoformat(self.timestamp),
            'level': self.level,
            'source': self.source,
            'message': self.message,
            'details': details,
            'ipAddress': self.ip_address,
            'requestPath': self.request_path,
            'userId': self.user_id,
        }


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        user_agent = request.headers.get('User-Agent', '')
        return ip_address, user_agent, request.path

    @staticmethod
    def _database_enabled():
        return has_app_context() and current_app.config.get('LOG_TO_DATABASE', False)

    @staticmethod
    def log(level, source, message, details=None, user_id=None):
        """
        Log a message to the `folio` logger and, when enabled, the app_logs table.

        Args:
            level (str): Log level (INFO, WARNING, ERROR)
            source (str): Source component (projects, blog, contact, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
            user_id (str): Optional user identifier
        """
        level = level.upper()
        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)

        std_logger.log(getattr(logging, level, logging.INFO), '[%s] %s', source, message)
        if details:
            std_logger.debug('Details: %s', details)

        if not LoggingService._database_enabled():
            return

        ip_address, user_agent, request_path = LoggingService._get_request_context()

        # Own connection, so the row never rides along with the request's unit of work
        try:
            with db.engine.begin() as conn:
                conn.execute(AppLog.__table__.insert().values(
                    timestamp=utcnow(), level=level, source=source, message=message,
                    details=details, ip_address=ip_address, user_agent=user_agent,
                    request_path=request_path, user_id=user_id,
                ))
        except Exception as e:
            std_logger.warning('Logging service error: %s', e)

    @staticmethod
    def info(source, message, details=None, user_id=None):
        """Log info message"""
        LoggingService.log('INFO', source, message, details, user_id)

    @staticmethod
    def warning(source, message, details=None, user_id=None):
        """Log warning message"""
        LoggingService.log('WARNING', source, message, details, user_id)

    @staticmethod
    def error(source, message, details=None, user_id=None):
        """Log error message"""
        LoggingService.log('ERROR', source, message, details, user_id)

    @staticmethod
    def log_user_action(source, action, user_id=None, details=None):
        """Log user actions (create, update, delete, ...)"""
        LoggingService.info(source, f"User action: {action}", details, user_id)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def recent(limit=100, level=None, source=None):
        """Most recent stored entries, newest first"""
        stmt = db.select(AppLog)
        if level:
            stmt = stmt.where(AppLog.level == level.upper())
        if source:
            stmt = stmt.where(AppLog.source == source)
        stmt = stmt.order_by(AppLog.timestamp.desc(), AppLog.id.desc()).limit(limit)
        return db.session.scalars(stmt).all()

    @staticmethod
    def cleanup_old_logs(days_to_keep=30):
        """Clean up old log entries"""
        cutoff = utcnow() - timedelta(days=days_to_keep)
        result = db.session.execute(db.delete(AppLog).where(AppLog.timestamp < cutoff))
        db.session.commit()

        deleted_count = result.rowcount
        LoggingService.info('system', f"Cleaned up {deleted_count} old log entries")
        return deleted_count

