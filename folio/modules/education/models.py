from ...core.database import db, generate_id, isoformat, utcnow, TimestampMixin


class Education(TimestampMixin, db.Model):
    __tablename__ = 'education'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    institution = db.Column(db.String(255), nullable=False)
    degree = db.Column(db.String(255), nullable=False)
    field = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255))
    description = db.Column(db.Text)
    gpa = db.Column(db.String(32))
    honors = db.Column(db.Text)
    institution_logo = db.Column(db.String(512))
    current_student = db.Column(db.Boolean, nullable=False, default=False)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    start_date = db.Column(db.DateTime, nullable=False, default=utcnow)
    end_date = db.Column(db.DateTime)
    author_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    author = db.relationship('User', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'institution': self.institution,
            'degree': self.degree,
            'field': self.field,
            'location': self.location,
            'description': self.description,
            'gpa': self.gpa,
            'honors': self.honors,
            'institutionLogo': self.institution_logo,
            'currentStudent': self.current_student,
            'sortOrder': self.sort_order,
            'startDate': isoformat(self.start_date),
            'endDate': isoformat(self.end_date),
            'authorId': self.author_id,
            'author': self.author.summary() if self.author else None,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
