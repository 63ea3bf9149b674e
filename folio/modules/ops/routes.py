"""
Ops Routes
==========

Public health endpoint and the dashboard's error feed.
"""

import shutil
import time
from datetime import datetime, timezone

from flask import jsonify, request

from . import ops_api_bp, ops_health_bp
from ...core.api import api_response, with_error_handler
from ...core.database import Database
from ...core.logging_service import LoggingService
from ..auth import require_auth

_STARTED_AT = time.time()

# Disk usage at or above this is reported as a warning
DISK_WARNING_PERCENT = 90


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _get_uptime():
    """Process uptime."""
    uptime_seconds = time.time() - _STARTED_AT

    days = int(uptime_seconds // 86400)
    hours = int((uptime_seconds % 86400) // 3600)
    minutes = int((uptime_seconds % 3600) // 60)

    return {
        'seconds': round(uptime_seconds),
        'formatted': f'{days}d {hours}h {minutes}m',
        'days': days,
    }


def _get_disk_usage():
    """Get disk usage for root partition."""
    try:
        usage = shutil.disk_usage('/')
        return {
            'total_gb': round(usage.total / (1024 ** 3), 1),
            'free_gb': round(usage.free / (1024 ** 3), 1),
            'percent': round((usage.used / usage.total) * 100, 1),
        }
    except OSError as e:
        return {'total_gb': 0, 'free_gb': 0, 'percent': 0, 'error': str(e)}


def _build_health_response():
    """Build the health check response dict and its overall status."""
    database_ok = Database.ping()
    disk = _get_disk_usage()

    issues = []
    if not database_ok:
        issues.append('database unreachable')
    if disk.get('percent', 0) >= DISK_WARNING_PERCENT:
        issues.append(f"disk {disk['percent']}% full")

    if not database_ok:
        status = 'critical'
    elif issues:
        status = 'warning'
    else:
        status = 'ok'

    result = {
        'status': status,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'checks': {
            'database': 'ok' if database_ok else 'unreachable',
            'disk': disk,
            'uptime': _get_uptime(),
        },
        'issues': issues,
    }
    return result, status


# ---------------------------------------------------------------------------
# Public routes (ops_health_bp, no auth)
# ---------------------------------------------------------------------------

@ops_health_bp.route('/')
@ops_health_bp.route('')
def health_check():
    """Public health endpoint for uptime monitors."""
    data, status = _build_health_response()
    code = 503 if status == 'critical' else 200
    return jsonify(data), code


# ---------------------------------------------------------------------------
# Dashboard routes (ops_api_bp, session auth)
# ---------------------------------------------------------------------------

@ops_api_bp.route('/errors', methods=['GET'])
@with_error_handler
def recent_errors():
    """Recent errors from app_logs for the error feed."""
    require_auth()
    limit = request.args.get('limit', 50, type=int)
    errors = [entry.to_dict() for entry in LoggingService.recent(limit=max(1, min(limit, 200)), level='ERROR')]
    return api_response({'errors': errors, 'count': len(errors)})
