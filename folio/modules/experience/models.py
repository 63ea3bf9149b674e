from ...core.database import db, generate_id, isoformat, utcnow, TimestampMixin


class Experience(TimestampMixin, db.Model):
    __tablename__ = 'experience'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    company = db.Column(db.String(255), nullable=False)
    position = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255))
    description = db.Column(db.Text, nullable=False)
    responsibilities = db.Column(db.JSON, nullable=False, default=list)
    achievements = db.Column(db.Text)
    company_logo = db.Column(db.String(512))
    current_job = db.Column(db.Boolean, nullable=False, default=False)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    start_date = db.Column(db.DateTime, nullable=False, default=utcnow)
    end_date = db.Column(db.DateTime)
    author_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    author = db.relationship('User', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'company': self.company,
            'position': self.position,
            'location': self.location,
            'description': self.description,
            'responsibilities': self.responsibilities or [],
            'achievements': self.achievements,
            'companyLogo': self.company_logo,
            'currentJob': self.current_job,
            'sortOrder': self.sort_order,
            'startDate': isoformat(self.start_date),
            'endDate': isoformat(self.end_date),
            'authorId': self.author_id,
            'author': self.author.summary() if self.author else None,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Experience {self.position} @ {self.company}>'
