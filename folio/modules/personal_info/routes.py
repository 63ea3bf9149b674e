"""
Personal Info API Routes
========================

Anonymous callers (and `?public=true`) get the public profile with the
contact-only fields stripped. A signed-in caller gets their own profile
when one exists, otherwise the public one.
"""

from flask import request
from sqlalchemy import case

from . import personal_info_bp
from .models import PersonalInfo
from .schemas import PersonalInfoCreate, PersonalInfoUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, transaction
from ...core.errors import Conflict, NotFound
from ...core.logging_service import LoggingService
from ...core.query import parse_bool_arg
from ..auth import get_session, require_auth

ALREADY_EXISTS = 'Personal information already exists. Use PUT to update.'


def _own_row(user_id):
    return db.session.scalar(db.select(PersonalInfo).where(PersonalInfo.user_id == user_id))


@personal_info_bp.route('', methods=['GET'])
@with_error_handler
def get_personal_info():
    auth = get_session()
    public_only = bool(parse_bool_arg(request.args, 'public')) or auth is None

    stmt = db.select(PersonalInfo)
    if public_only:
        stmt = stmt.where(PersonalInfo.is_public.is_(True))
    else:
        is_mine = PersonalInfo.user_id == auth.user.id
        stmt = (stmt.where(PersonalInfo.is_public.is_(True) | is_mine)
                .order_by(case((is_mine, 0), else_=1)))
    stmt = stmt.order_by(PersonalInfo.created_at, PersonalInfo.id).limit(1)

    info = db.session.scalar(stmt)
    if info is None:
        raise NotFound('Personal information not found')

    if not public_only and info.user_id == auth.user.id:
        return api_response(info.to_dict())
    return api_response(info.public_dict())


@personal_info_bp.route('', methods=['POST'])
@with_error_handler
def create_personal_info():
    auth = require_auth()
    if _own_row(auth.user.id) is not None:
        raise Conflict(ALREADY_EXISTS)
    data = parse_request_body(PersonalInfoCreate)

    info = PersonalInfo(user_id=auth.user.id, **data.model_dump())
    with transaction(ALREADY_EXISTS):
        db.session.add(info)

    LoggingService.log_user_action('personal_info', 'Created profile', auth.user.id)
    return api_response(info.to_dict(), status=201)


@personal_info_bp.route('', methods=['PUT'])
@with_error_handler
def update_personal_info():
    auth = require_auth()
    changes = parse_request_body(PersonalInfoUpdate).model_dump(exclude_unset=True)

    info = _own_row(auth.user.id)
    if info is None:
        raise NotFound('Personal information not found')

    with transaction():
        apply_changes(info, changes)

    return api_response(info.to_dict())
