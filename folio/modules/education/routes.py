from flask import current_app, request

from . import education_bp
from .models import Education
from .schemas import EducationCreate, EducationUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, get_or_404, transaction
from ...core.query import ListQuery, PaginationParams, parse_bool_arg
from ...core.validation import merge_period, resolve_period
from ..auth import require_auth, require_owner


@education_bp.route('', methods=['GET'])
@with_error_handler
def list_education():
    params = PaginationParams.from_args(
        request.args, default_limit=current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    )

    query = (ListQuery(Education)
             .search(params.search, Education.institution, Education.degree, Education.field)
             .filter_by_value(Education.current_student, parse_bool_arg(request.args, 'current'))
             .order(Education.sort_order, Education.start_date))

    page = query.paginate(params)
    return api_response(page.to_dict('education', Education.to_dict))


@education_bp.route('/<education_id>', methods=['GET'])
@with_error_handler
def get_education(education_id):
    entry = get_or_404(Education, education_id, 'Education not found')
    return api_response(entry.to_dict())


@education_bp.route('', methods=['POST'])
@with_error_handler
def create_education():
    auth = require_auth()
    fields = parse_request_body(EducationCreate).model_dump()

    start_date, end_date, current = resolve_period(
        fields.pop('start_date'),
        fields.pop('end_date'),
        fields.pop('current_student'),
        'currentStudent',
    )
    entry = Education(
        author_id=auth.user.id,
        start_date=start_date,
        end_date=end_date,
        current_student=current,
        **fields,
    )
    with transaction():
        db.session.add(entry)

    return api_response(entry.to_dict(), status=201)


@education_bp.route('/<education_id>', methods=['PUT'])
@with_error_handler
def update_education(education_id):
    auth = require_auth()
    entry = get_or_404(Education, education_id, 'Education not found')
    require_owner(entry, auth)

    changes = parse_request_body(EducationUpdate).model_dump(exclude_unset=True)
    merge_period(entry, changes, 'current_student', 'currentStudent')

    with transaction():
        apply_changes(entry, changes)

    return api_response(entry.to_dict())


@education_bp.route('/<education_id>', methods=['DELETE'])
@with_error_handler
def delete_education(education_id):
    auth = require_auth()
    entry = get_or_404(Education, education_id, 'Education not found')
    require_owner(entry, auth)

    with transaction():
        db.session.delete(entry)

    return api_response({'success': True})
