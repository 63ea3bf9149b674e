"""Every model in one place, so db.create_all() sees the full schema."""

from ..core.logging_service import AppLog
from .auth.models import User
from .blog.models import BlogPost
from .contact.models import ContactMessage
from .education.models import Education
from .experience.models import Experience
from .personal_info.models import PersonalInfo
from .projects.models import Project, ProjectSkill
from .settings.models import SiteSetting
from .skills.models import Skill

__all__ = [
    'AppLog', 'User', 'BlogPost', 'ContactMessage', 'Education', 'Experience',
    'PersonalInfo', 'Project', 'ProjectSkill', 'SiteSetting', 'Skill',
]
