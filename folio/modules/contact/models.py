from ...core.database import db, generate_id, isoformat, TimestampMixin

MESSAGE_STATUSES = ('pending', 'read', 'replied', 'archived')


class ContactMessage(TimestampMixin, db.Model):
    __tablename__ = 'contact_messages'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    phone = db.Column(db.String(64))
    company = db.Column(db.String(255))
    website = db.Column(db.String(512))
    newsletter = db.Column(db.Boolean, nullable=False, default=False)
    source = db.Column(db.String(255))
    status = db.Column(db.String(16), nullable=False, default='pending', index=True)
    ip = db.Column(db.String(64))
    user_agent = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'phone': self.phone,
            'company': self.company,
            'website': self.website,
            'newsletter': self.newsletter,
            'source': self.source,
            'status': self.status,
            'ip': self.ip,
            'userAgent': self.user_agent,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
