from ...core.database import db, generate_id, isoformat, TimestampMixin

# Never shown to anyone but the profile's owner
PRIVATE_FIELDS = ('id', 'userId', 'author', 'phone', 'email', 'resumeUrl')


class PersonalInfo(TimestampMixin, db.Model):
    __tablename__ = 'personal_info'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    user_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), unique=True, nullable=False)
    first_name = db.Column(db.String(255), nullable=False)
    last_name = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255))
    bio = db.Column(db.Text)
    avatar = db.Column(db.String(512))
    location = db.Column(db.String(255))
    phone = db.Column(db.String(64))
    email = db.Column(db.String(255))
    website = db.Column(db.String(512))
    resume_url = db.Column(db.String(512))
    social_links = db.Column(db.JSON, nullable=False, default=dict)
    skills = db.Column(db.Text)
    languages = db.Column(db.JSON, nullable=False, default=list)
    interests = db.Column(db.Text)
    is_public = db.Column(db.Boolean, nullable=False, default=True)

    user = db.relationship('User', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'title': self.title,
            'bio': self.bio,
            'avatar': self.avatar,
            'location': self.location,
            'phone': self.phone,
            'email': self.email,
            'website': self.website,
            'resumeUrl': self.resume_url,
            'socialLinks': self.social_links or {},
            'skills': self.skills,
            'languages': self.languages or [],
            'interests': self.interests,
            'isPublic': self.is_public,
            'author': self.user.summary() if self.user else None,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def public_dict(self):
        data = self.to_dict()
        for name in PRIVATE_FIELDS:
            data.pop(name, None)
        return data
