"""
Projects API Routes
===================

Non-owners only see published projects; a hidden draft is reported as
not found. Project rows and their skill links are always written in one
transaction.
"""

from flask import current_app, request

from . import projects_bp
from .models import Project, ProjectSkill
from .schemas import ProjectCreate, ProjectUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, get_or_404, transaction
from ...core.errors import NotFound, ValidationError
from ...core.logging_service import LoggingService
from ...core.query import ListQuery, PaginationParams, parse_bool_arg
from ..auth import get_session, require_auth, require_owner
from ..auth.utils import is_owner
from ..skills.models import Skill

DUPLICATE_SLUG = 'A project with this slug already exists'

# ===== Helpers =====

def _resolve_skill_ids(skill_ids):
    """Deduplicate and check that every id names an existing skill."""
    ids = list(dict.fromkeys(skill_ids or []))
    if not ids:
        return []
    found = set(db.session.scalars(db.select(Skill.id).where(Skill.id.in_(ids))))
    missing = [skill_id for skill_id in ids if skill_id not in found]
    if missing:
        raise ValidationError(f"Unknown skill id(s): {', '.join(missing)}")
    return ids


def _replace_skill_links(project, skill_ids):
    ids = _resolve_skill_ids(skill_ids)
    if project.skill_links:
        project.skill_links.clear()
        # Old rows must be gone before re-inserting the same (project, skill) pair
        db.session.flush()
    project.skill_links.extend(ProjectSkill(skill_id=skill_id) for skill_id in ids)


def _visible_or_404(project, auth):
    if project is None or not (project.published or is_owner(project, auth)):
        raise NotFound('Project not found')
    return project

# ===== Read =====

@projects_bp.route('', methods=['GET'])
@with_error_handler
def list_projects():
    auth = get_session()
    params = PaginationParams.from_args(
        request.args, default_limit=current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    )

    query = (ListQuery(Project)
             .search(params.search, Project.title, Project.description)
             .filter_by_value(Project.featured, parse_bool_arg(request.args, 'featured'))
             .filter_by_value(Project.published, parse_bool_arg(request.args, 'published'))
             .has_tag(Project.technologies, request.args.get('technology'))
             .visibility_floor(Project.published, Project.author_id, auth)
             .order(Project.sort_order, Project.created_at))

    page = query.paginate(params)
    return api_response(page.to_dict('projects', Project.to_dict))


@projects_bp.route('/<project_id>', methods=['GET'])
@with_error_handler
def get_project(project_id):
    project = _visible_or_404(db.session.get(Project, project_id), get_session())
    return api_response(project.to_dict())


@projects_bp.route('/slug/<slug>', methods=['GET'])
@with_error_handler
def get_project_by_slug(slug):
    project = db.session.scalar(db.select(Project).where(Project.slug == slug))
    project = _visible_or_404(project, get_session())
    return api_response(project.to_dict())

# ===== Write =====

@projects_bp.route('', methods=['POST'])
@with_error_handler
def create_project():
    auth = require_auth()
    data = parse_request_body(ProjectCreate)

    project = Project(author_id=auth.user.id, **data.model_dump(exclude={'skill_ids'}))
    project.stamp_published()

    with transaction(DUPLICATE_SLUG):
        db.session.add(project)
        _replace_skill_links(project, data.skill_ids)

    LoggingService.log_user_action('projects', f"Created project '{project.slug}'", auth.user.id)
    return api_response(project.to_dict(), status=201)


@projects_bp.route('/<project_id>', methods=['PUT'])
@with_error_handler
def update_project(project_id):
    auth = require_auth()
    project = get_or_404(Project, project_id, 'Project not found')
    require_owner(project, auth)

    changes = parse_request_body(ProjectUpdate).model_dump(exclude_unset=True)
    skill_ids = changes.pop('skill_ids', None)

    with transaction(DUPLICATE_SLUG):
        apply_changes(project, changes)
        project.stamp_published()
        if skill_ids is not None:
            _replace_skill_links(project, skill_ids)

    return api_response(project.to_dict())


@projects_bp.route('/<project_id>', methods=['DELETE'])
@with_error_handler
def delete_project(project_id):
    auth = require_auth()
    project = get_or_404(Project, project_id, 'Project not found')
    require_owner(project, auth)
    slug = project.slug

    with transaction():
        db.session.delete(project)

    LoggingService.log_user_action('projects', f"Deleted project '{slug}'", auth.user.id)
    return api_response({'success': True})
