"""
Site Settings API Routes
========================

The whole (visible) settings table is returned in one read: keyed by
setting key, grouped by category, and as an ordered list.
"""

from flask import request

from . import settings_bp
from .models import SiteSetting, decode_value
from .schemas import SiteSettingCreate, SiteSettingUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, transaction
from ...core.errors import NotFound, ValidationError
from ...core.logging_service import LoggingService
from ...core.query import ListQuery, parse_bool_arg, parse_list_arg
from ..auth import get_session, require_auth, require_owner

DUPLICATE_KEY = 'A setting with this key already exists'


def _setting_from_args():
    key = request.args.get('key')
    if not key:
        raise ValidationError('Key parameter is required')
    setting = db.session.scalar(db.select(SiteSetting).where(SiteSetting.key == key))
    if setting is None:
        raise NotFound('Setting not found')
    return setting


@settings_bp.route('', methods=['GET'])
@with_error_handler
def list_settings():
    auth = get_session()

    query = (ListQuery(SiteSetting)
             .filter_by_value(SiteSetting.category, request.args.get('category'))
             .filter_by_value(SiteSetting.public, parse_bool_arg(request.args, 'public'))
             .in_(SiteSetting.key, parse_list_arg(request.args, 'keys'))
             .visibility_floor(SiteSetting.public, SiteSetting.author_id, auth)
             .order(SiteSetting.category, SiteSetting.key))

    settings = query.all()
    listed = [setting.to_dict() for setting in settings]

    by_key = {}
    grouped = {}
    for item in listed:
        by_key[item['key']] = item
        entry = {name: value for name, value in item.items() if name != 'category'}
        grouped.setdefault(item['category'], {})[item['key']] = entry

    return api_response({
        'settings': by_key,
        'groupedByCategory': grouped,
        'list': listed,
    })


@settings_bp.route('', methods=['POST'])
@with_error_handler
def create_setting():
    auth = require_auth()
    data = parse_request_body(SiteSettingCreate)

    setting = SiteSetting(author_id=auth.user.id, **data.model_dump())
    with transaction(DUPLICATE_KEY):
        db.session.add(setting)

    LoggingService.log_user_action('settings', f"Created setting '{setting.key}'", auth.user.id)
    return api_response(setting.to_dict(), status=201)


@settings_bp.route('', methods=['PUT'])
@with_error_handler
def update_setting():
    auth = require_auth()
    setting = _setting_from_args()
    require_owner(setting, auth)

    changes = parse_request_body(SiteSettingUpdate).model_dump(exclude_unset=True)
    value_type = changes.get('type', setting.type)
    try:
        decode_value(changes.get('value', setting.value), value_type)
    except ValueError as e:
        raise ValidationError(f'value does not match type {value_type}: {e}')

    with transaction():
        apply_changes(setting, changes)

    LoggingService.log_user_action('settings', f"Updated setting '{setting.key}'", auth.user.id)
    return api_response(setting.to_dict())


@settings_bp.route('', methods=['DELETE'])
@with_error_handler
def delete_setting():
    auth = require_auth()
    setting = _setting_from_args()
    require_owner(setting, auth)
    key = setting.key

    with transaction():
        db.session.delete(setting)

    LoggingService.log_user_action('settings', f"Deleted setting '{key}'", auth.user.id)
    return api_response({'success': True})
