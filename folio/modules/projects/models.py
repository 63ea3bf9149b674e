from ...core.database import db, generate_id, isoformat, utcnow, PublishableMixin, TimestampMixin


class ProjectSkill(db.Model):
    """Join row between a project and one of the skills it uses."""
    __tablename__ = 'project_skills'
    __table_args__ = (
        db.UniqueConstraint('project_id', 'skill_id'),
    )

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    project_id = db.Column(db.String(64), db.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True)
    skill_id = db.Column(db.String(64), db.ForeignKey('skills.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    skill = db.relationship('Skill', lazy='joined')


class Project(PublishableMixin, TimestampMixin, db.Model):
    __tablename__ = 'projects'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=False)
    long_description = db.Column(db.Text)
    image_url = db.Column(db.String(512))
    images = db.Column(db.JSON, nullable=False, default=list)
    technologies = db.Column(db.JSON, nullable=False, default=list)
    project_url = db.Column(db.String(512))
    github_url = db.Column(db.String(512))
    featured = db.Column(db.Boolean, nullable=False, default=False)
    published = db.Column(db.Boolean, nullable=False, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    author_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    author = db.relationship('User', lazy='joined')
    skill_links = db.relationship(
        'ProjectSkill',
        cascade='all, delete-orphan',
        passive_deletes=True,
        lazy='selectin',
        order_by='ProjectSkill.created_at',
    )

    @property
    def skills(self):
        return [link.skill for link in self.skill_links]

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'description': self.description,
            'longDescription': self.long_description,
            'imageUrl': self.image_url,
            'images': self.images or [],
            'technologies': self.technologies or [],
            'projectUrl': self.project_url,
            'githubUrl': self.github_url,
            'featured': self.featured,
            'published': self.published,
            'publishedAt': isoformat(self.published_at),
            'sortOrder': self.sort_order,
            'authorId': self.author_id,
            'author': self.author.summary(with_email=True) if self.author else None,
            'skills': [skill.summary() for skill in self.skills],
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Project {self.slug}>'
