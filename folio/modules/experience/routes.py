from flask import current_app, request

from . import experience_bp
from .models import Experience
from .schemas import ExperienceCreate, ExperienceUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, get_or_404, transaction
from ...core.logging_service import LoggingService
from ...core.query import ListQuery, PaginationParams, parse_bool_arg
from ...core.validation import merge_period, resolve_period
from ..auth import require_auth, require_owner


@experience_bp.route('', methods=['GET'])
@with_error_handler
def list_experience():
    params = PaginationParams.from_args(
        request.args, default_limit=current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    )

    query = (ListQuery(Experience)
             .search(params.search, Experience.company, Experience.position)
             .filter_by_value(Experience.current_job, parse_bool_arg(request.args, 'current'))
             .order(Experience.sort_order, Experience.start_date))

    page = query.paginate(params)
    return api_response(page.to_dict('experience', Experience.to_dict))


@experience_bp.route('/<experience_id>', methods=['GET'])
@with_error_handler
def get_experience(experience_id):
    entry = get_or_404(Experience, experience_id, 'Experience not found')
    return api_response(entry.to_dict())


@experience_bp.route('', methods=['POST'])
@with_error_handler
def create_experience():
    auth = require_auth()
    fields = parse_request_body(ExperienceCreate).model_dump()

    start_date, end_date, current = resolve_period(
        fields.pop('start_date'),
        fields.pop('end_date'),
        fields.pop('current_job'),
        'currentJob',
    )
    entry = Experience(
        author_id=auth.user.id,
        start_date=start_date,
        end_date=end_date,
        current_job=current,
        **fields,
    )
    with transaction():
        db.session.add(entry)

    LoggingService.log_user_action('experience', f"Added experience at {entry.company}", auth.user.id)
    return api_response(entry.to_dict(), status=201)


@experience_bp.route('/<experience_id>', methods=['PUT'])
@with_error_handler
def update_experience(experience_id):
    auth = require_auth()
    entry = get_or_404(Experience, experience_id, 'Experience not found')
    require_owner(entry, auth)

    changes = parse_request_body(ExperienceUpdate).model_dump(exclude_unset=True)
    merge_period(entry, changes, 'current_job', 'currentJob')

    with transaction():
        apply_changes(entry, changes)

    return api_response(entry.to_dict())


@experience_bp.route('/<experience_id>', methods=['DELETE'])
@with_error_handler
def delete_experience(experience_id):
    auth = require_auth()
    entry = get_or_404(Experience, experience_id, 'Experience not found')
    require_owner(entry, auth)

    with transaction():
        db.session.delete(entry)

    return api_response({'success': True})
