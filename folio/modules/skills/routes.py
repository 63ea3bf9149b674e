"""
Skills API Routes
=================

Skills carry no visibility flag: every skill is public, writes need the
owning session.
"""

from flask import request

from . import skills_bp
from .models import Skill
from .schemas import SkillCreate, SkillUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, get_or_404, transaction
from ...core.logging_service import LoggingService
from ...core.query import ListQuery, PaginationParams, parse_bool_arg
from ..auth import require_auth, require_owner

DUPLICATE_NAME = 'A skill with this name already exists'


@skills_bp.route('', methods=['GET'])
@with_error_handler
def list_skills():
    params = PaginationParams.from_args(request.args, default_limit=50)

    query = (ListQuery(Skill)
             .search(params.search, Skill.name)
             .filter_by_value(Skill.category, request.args.get('category'))
             .filter_by_value(Skill.featured, parse_bool_arg(request.args, 'featured'))
             .has_tag(Skill.tags, request.args.get('tag'))
             .order(Skill.sort_order, Skill.name))

    page = query.paginate(params)
    return api_response(page.to_dict('skills', Skill.to_dict))


@skills_bp.route('/<skill_id>', methods=['GET'])
@with_error_handler
def get_skill(skill_id):
    skill = get_or_404(Skill, skill_id, 'Skill not found')
    return api_response(skill.to_dict())


@skills_bp.route('', methods=['POST'])
@with_error_handler
def create_skill():
    auth = require_auth()
    data = parse_request_body(SkillCreate)

    skill = Skill(author_id=auth.user.id, **data.model_dump())
    with transaction(DUPLICATE_NAME):
        db.session.add(skill)

    LoggingService.log_user_action('skills', f"Created skill '{skill.name}'", auth.user.id)
    return api_response(skill.to_dict(), status=201)


@skills_bp.route('/<skill_id>', methods=['PUT'])
@with_error_handler
def update_skill(skill_id):
    auth = require_auth()
    skill = get_or_404(Skill, skill_id, 'Skill not found')
    require_owner(skill, auth)
    changes = parse_request_body(SkillUpdate).model_dump(exclude_unset=True)

    with transaction(DUPLICATE_NAME):
        apply_changes(skill, changes)

    return api_response(skill.to_dict())


@skills_bp.route('/<skill_id>', methods=['DELETE'])
@with_error_handler
def delete_skill(skill_id):
    auth = require_auth()
    skill = get_or_404(Skill, skill_id, 'Skill not found')
    require_owner(skill, auth)
    name = skill.name

    # project_skills rows go with it (ON DELETE CASCADE)
    with transaction():
        db.session.delete(skill)

    LoggingService.log_user_action('skills', f"Deleted skill '{name}'", auth.user.id)
    return api_response({'success': True})
