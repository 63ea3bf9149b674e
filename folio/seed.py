"""
Demo content for a fresh database: one admin user and a small portfolio
(profile, skills, work history, education, projects, posts, settings).
"""

import json
from datetime import datetime

from .core.database import db, transaction
from .core.logging_service import LoggingService
from .modules.models import (
    BlogPost, Education, Experience, PersonalInfo, Project, ProjectSkill,
    SiteSetting, Skill, User,
)
from .modules.blog.models import estimate_read_time

DEMO_EMAIL = 'admin@portfolio.com'

SKILLS = [
    ('React', 'Frontend', 5),
    ('TypeScript', 'Frontend', 5),
    ('Next.js', 'Frontend', 5),
    ('Tailwind CSS', 'Frontend', 4),
    ('Python', 'Backend', 5),
    ('Flask', 'Backend', 5),
    ('PostgreSQL', 'Backend', 4),
    ('SQLAlchemy', 'Backend', 4),
    ('Git', 'Tools', 5),
    ('Docker', 'Tools', 3),
    ('AWS', 'Tools', 3),
]

PROJECTS = [
    {
        'title': 'Dynamic Portfolio Website',
        'slug': 'dynamic-portfolio-website',
        'description': 'A modern portfolio website with an admin dashboard',
        'long_description': 'A full-featured portfolio website with admin dashboard, blog functionality, and contact form.',
        'technologies': ['Flask', 'SQLAlchemy', 'TypeScript', 'Tailwind CSS'],
        'project_url': 'https://portfolio.example.com',
        'github_url': 'https://github.com/johndoe/portfolio',
        'featured': True,
        'skills': ['Flask', 'SQLAlchemy', 'TypeScript', 'Tailwind CSS'],
    },
    {
        'title': 'Task Management App',
        'slug': 'task-management-app',
        'description': 'A collaborative task management application',
        'technologies': ['React', 'Python', 'PostgreSQL'],
        'project_url': 'https://tasks.example.com',
        'github_url': 'https://github.com/johndoe/task-app',
        'featured': False,
        'skills': ['React', 'Python', 'PostgreSQL'],
    },
]

POSTS = [
    {
        'title': 'Getting Started with SQLAlchemy',
        'slug': 'getting-started-with-sqlalchemy',
        'excerpt': 'Set up SQLAlchemy in a Flask application and write your first queries.',
        'content': (
            '# Getting Started with SQLAlchemy\n\n'
            'SQLAlchemy gives Python applications a typed, composable way to talk to a database.\n\n'
            '## Setup\n\n1. Define your models\n2. Create the tables\n3. Query with select()\n'
        ),
        'tags': ['Python', 'Database', 'ORM', 'Flask'],
        'category': 'Development',
        'featured': True,
        'meta_title': 'Getting Started with SQLAlchemy - Complete Guide',
    },
    {
        'title': 'Building Responsive Layouts with Tailwind CSS',
        'slug': 'responsive-layouts-tailwind-css',
        'excerpt': 'Tips and tricks for creating beautiful responsive layouts.',
        'content': (
            '# Building Responsive Layouts with Tailwind CSS\n\n'
            'Tailwind CSS makes it easy to create responsive designs without writing custom CSS.\n'
        ),
        'tags': ['CSS', 'Tailwind', 'Responsive Design', 'Frontend'],
        'category': 'Frontend',
        'featured': False,
    },
]

SETTINGS = [
    ('site_title', 'John Doe - Full Stack Developer', 'text', 'general', True),
    ('site_description', 'Personal portfolio showcasing my projects and experience', 'text', 'general', True),
    ('contact_email', 'john.doe@example.com', 'text', 'contact', False),
    ('social_links', json.dumps({'github': 'https://github.com/johndoe',
                                 'linkedin': 'https://linkedin.com/in/johndoe'}), 'json', 'social', True),
    ('maintenance_mode', 'false', 'boolean', 'general', False),
]


def seed_demo_content(email=DEMO_EMAIL):
    """
    Insert the demo portfolio owned by a new admin user.
    Returns the user, or None when a user with `email` already exists.
    """
    if db.session.scalar(db.select(User).where(User.email == email)) is not None:
        return None

    with transaction():
        user = User(email=email, name='Portfolio Admin', role='admin')
        db.session.add(user)
        db.session.flush()

        db.session.add(PersonalInfo(
            user_id=user.id,
            first_name='John',
            last_name='Doe',
            title='Full Stack Developer',
            bio='Passionate developer with expertise in modern web technologies',
            location='San Francisco, CA',
            email='john.doe@example.com',
            website='https://johndoe.dev',
            social_links={
                'github': 'https://github.com/johndoe',
                'linkedin': 'https://linkedin.com/in/johndoe',
            },
            languages=['English', 'Spanish'],
        ))

        skills = {}
        for position, (name, category, proficiency) in enumerate(SKILLS):
            skills[name] = Skill(name=name, category=category, proficiency=proficiency,
                                 sort_order=position, author_id=user.id)
            db.session.add(skills[name])

        db.session.add_all([
            Experience(
                company='Tech Company Inc.',
                position='Senior Full Stack Developer',
                location='San Francisco, CA',
                description='Led development of scalable web applications',
                responsibilities=[
                    'Architected and implemented service-based applications',
                    'Mentored junior developers and conducted code reviews',
                ],
                current_job=True,
                start_date=datetime(2022, 1, 15),
                author_id=user.id,
            ),
            Experience(
                company='Startup LLC',
                position='Full Stack Developer',
                location='Austin, TX',
                description='Developed and maintained full-stack applications',
                current_job=False,
                start_date=datetime(2020, 6, 1),
                end_date=datetime(2021, 12, 31),
                author_id=user.id,
            ),
            Education(
                institution='University of Technology',
                degree='Bachelor of Science',
                field='Computer Science',
                location='Boston, MA',
                description='Graduated with honors',
                gpa='3.8',
                current_student=False,
                start_date=datetime(2016, 9, 1),
                end_date=datetime(2020, 5, 31),
                author_id=user.id,
            ),
        ])

        for data in PROJECTS:
            data = dict(data)
            skill_names = data.pop('skills')
            project = Project(author_id=user.id, published=True, **data)
            project.stamp_published()
            project.skill_links = [ProjectSkill(skill=skills[name]) for name in skill_names]
            db.session.add(project)

        for data in POSTS:
            post = BlogPost(author_id=user.id, published=True,
                            read_time=estimate_read_time(data['content']), **data)
            post.stamp_published()
            db.session.add(post)

        for key, value, value_type, category, public in SETTINGS:
            db.session.add(SiteSetting(key=key, value=value, type=value_type, category=category,
                                       public=public, author_id=user.id))

    LoggingService.info('seed', f'Seeded demo content for {email}', user_id=user.id)
    return user
