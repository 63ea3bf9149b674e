from ...core.database import db, generate_id, isoformat, TimestampMixin


class Skill(TimestampMixin, db.Model):
    __tablename__ = 'skills'
    __table_args__ = (
        db.CheckConstraint('proficiency BETWEEN 1 AND 5', name='proficiency_range'),
    )

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    name = db.Column(db.String(255), unique=True, nullable=False)
    category = db.Column(db.String(255), nullable=False, index=True)
    proficiency = db.Column(db.Integer, nullable=False)
    description = db.Column(db.Text)
    icon = db.Column(db.String(512))
    featured = db.Column(db.Boolean, nullable=False, default=False)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    tags = db.Column(db.JSON, nullable=False, default=list)
    author_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    author = db.relationship('User', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'proficiency': self.proficiency,
            'description': self.description,
            'icon': self.icon,
            'featured': self.featured,
            'sortOrder': self.sort_order,
            'tags': self.tags or [],
            'authorId': self.author_id,
            'author': self.author.summary() if self.author else None,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def summary(self):
        """Compact form embedded in project payloads"""
        return {'id': self.id, 'name': self.name, 'category': self.category}

    def __repr__(self):
        return f'<Skill {self.name}>'
