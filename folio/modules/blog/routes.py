"""
Blog API Routes
===============

Drafts are private to their author. Anonymous reads of a published post
bump its view counter; the response shows the count as it was before.
"""

from flask import current_app, request

from . import blog_bp
from .models import BlogPost, estimate_read_time
from .schemas import BlogPostCreate, BlogPostUpdate
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, get_or_404, transaction
from ...core.errors import NotFound
from ...core.logging_service import LoggingService
from ...core.query import ListQuery, PaginationParams, parse_bool_arg
from ..auth import get_session, require_auth, require_owner
from ..auth.utils import is_owner

DUPLICATE_SLUG = 'A blog post with this slug already exists'

# ===== Helpers =====

def _visible_or_404(post, auth):
    if post is None or not (post.published or is_owner(post, auth)):
        raise NotFound('Blog post not found')
    return post


def _increment_views(post_id):
    # Single UPDATE so concurrent readers never overwrite each other
    db.session.execute(
        db.update(BlogPost)
        .where(BlogPost.id == post_id)
        .values(views=BlogPost.views + 1)
    )
    db.session.commit()


def _read_post(post):
    auth = get_session()
    _visible_or_404(post, auth)
    payload = post.to_dict()
    if post.published and auth is None:
        _increment_views(post.id)
    return api_response(payload)

# ===== Read =====

@blog_bp.route('', methods=['GET'])
@with_error_handler
def list_posts():
    auth = get_session()
    params = PaginationParams.from_args(
        request.args, default_limit=current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    )

    query = (ListQuery(BlogPost)
             .search(params.search, BlogPost.title, BlogPost.excerpt, BlogPost.slug)
             .filter_by_value(BlogPost.featured, parse_bool_arg(request.args, 'featured'))
             .filter_by_value(BlogPost.published, parse_bool_arg(request.args, 'published'))
             .filter_by_value(BlogPost.category, request.args.get('category'))
             .has_tag(BlogPost.tags, request.args.get('tag'))
             .visibility_floor(BlogPost.published, BlogPost.author_id, auth)
             .order(BlogPost.created_at))

    page = query.paginate(params)
    return api_response(page.to_dict('posts', BlogPost.to_dict))


@blog_bp.route('/categories', methods=['GET'])
@with_error_handler
def list_categories():
    """Categories of the posts the caller can see, with post counts"""
    query = ListQuery(BlogPost).visibility_floor(BlogPost.published, BlogPost.author_id, get_session())
    categories = [
        {'category': category, 'count': count}
        for category, count in query.count_by(BlogPost.category)
    ]
    return api_response({'categories': categories})


@blog_bp.route('/<post_id>', methods=['GET'])
@with_error_handler
def get_post(post_id):
    return _read_post(db.session.get(BlogPost, post_id))


@blog_bp.route('/slug/<slug>', methods=['GET'])
@with_error_handler
def get_post_by_slug(slug):
    return _read_post(db.session.scalar(db.select(BlogPost).where(BlogPost.slug == slug)))

# ===== Write =====

@blog_bp.route('', methods=['POST'])
@with_error_handler
def create_post():
    auth = require_auth()
    data = parse_request_body(BlogPostCreate)

    post = BlogPost(author_id=auth.user.id, **data.model_dump())
    if post.read_time is None:
        post.read_time = estimate_read_time(post.content)
    post.stamp_published()

    with transaction(DUPLICATE_SLUG):
        db.session.add(post)

    LoggingService.log_user_action('blog', f"Created post '{post.slug}'", auth.user.id)
    return api_response(post.to_dict(), status=201)


@blog_bp.route('/<post_id>', methods=['PUT'])
@with_error_handler
def update_post(post_id):
    auth = require_auth()
    post = get_or_404(BlogPost, post_id, 'Blog post not found')
    require_owner(post, auth)

    changes = parse_request_body(BlogPostUpdate).model_dump(exclude_unset=True)
    if ('content' in changes or 'read_time' in changes) and changes.get('read_time') is None:
        changes['read_time'] = estimate_read_time(changes.get('content', post.content))

    with transaction(DUPLICATE_SLUG):
        apply_changes(post, changes)
        post.stamp_published()

    return api_response(post.to_dict())


@blog_bp.route('/<post_id>', methods=['DELETE'])
@with_error_handler
def delete_post(post_id):
    auth = require_auth()
    post = get_or_404(BlogPost, post_id, 'Blog post not found')
    require_owner(post, auth)
    slug = post.slug

    with transaction():
        db.session.delete(post)

    LoggingService.log_user_action('blog', f"Deleted post '{slug}'", auth.user.id)
    return api_response({'success': True})
