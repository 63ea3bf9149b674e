from ...core.database import db, generate_id, TimestampMixin, isoformat


class User(TimestampMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    email = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(255))
    role = db.Column(db.String(32), nullable=False, default='admin')

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role,
            'createdAt': isoformat(self.created_at),
        }

    def summary(self, with_email=False):
        """Author block embedded in content payloads"""
        data = {'id': self.id, 'name': self.name}
        if with_email:
            data['email'] = self.email
        return data

    def __repr__(self):
        return f'<User {self.email}>'
