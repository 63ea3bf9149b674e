"""
Dashboard API Routes
====================

Counts are scoped to the signed-in author; contact messages have no
author and are counted site-wide.
"""

from sqlalchemy import func

from . import dashboard_bp
from ...core.api import api_response, with_error_handler
from ...core.database import db
from ..auth import require_auth
from ..blog.models import BlogPost
from ..contact.models import ContactMessage
from ..education.models import Education
from ..experience.models import Experience
from ..projects.models import Project
from ..skills.models import Skill


def _count(model, *criteria):
    return db.session.scalar(db.select(func.count()).select_from(model).where(*criteria))


@dashboard_bp.route('/stats', methods=['GET'])
@with_error_handler
def stats():
    auth = require_auth()
    user_id = auth.user.id

    published_projects = _count(Project, Project.author_id == user_id, Project.published.is_(True))
    total_projects = _count(Project, Project.author_id == user_id)
    published_posts = _count(BlogPost, BlogPost.author_id == user_id, BlogPost.published.is_(True))
    total_views = db.session.scalar(
        db.select(func.coalesce(func.sum(BlogPost.views), 0)).where(BlogPost.author_id == user_id)
    )

    return api_response({
        'projects': {
            'total': total_projects,
            'published': published_projects,
            'drafts': total_projects - published_projects,
        },
        'posts': {
            'total': _count(BlogPost, BlogPost.author_id == user_id),
            'published': published_posts,
            'views': total_views,
        },
        'skills': _count(Skill, Skill.author_id == user_id),
        'experience': _count(Experience, Experience.author_id == user_id),
        'education': _count(Education, Education.author_id == user_id),
        'messages': {
            'pending': _count(ContactMessage, ContactMessage.status == 'pending'),
            'total': _count(ContactMessage),
        },
    })
