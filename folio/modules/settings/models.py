import json
import math

from ...core.database import db, generate_id, isoformat, TimestampMixin

SETTING_TYPES = ('text', 'number', 'boolean', 'json')


def decode_value(value, value_type):
    """
    Parse a stored setting string according to its declared type.
    Raises ValueError when the string is not a valid value of that type.
    """
    if value_type == 'text':
        return value
    if value_type == 'number':
        try:
            return int(value)
        except ValueError:
            number = float(value)
            if not math.isfinite(number):
                raise ValueError(f"'{value}' is not a finite number")
            return number
    if value_type == 'boolean':
        lowered = value.strip().lower()
        if lowered not in ('true', 'false'):
            raise ValueError(f"'{value}' is not 'true' or 'false'")
        return lowered == 'true'
    if value_type == 'json':
        return json.loads(value)
    raise ValueError(f"Unknown setting type '{value_type}'")


class SiteSetting(TimestampMixin, db.Model):
    __tablename__ = 'site_settings'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    key = db.Column(db.String(255), unique=True, nullable=False)
    value = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(16), nullable=False, default='text')
    description = db.Column(db.Text)
    category = db.Column(db.String(255), nullable=False, default='general', index=True)
    public = db.Column(db.Boolean, nullable=False, default=False)
    author_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    @property
    def typed_value(self):
        return decode_value(self.value, self.type)

    def to_dict(self):
        return {
            'id': self.id,
            'key': self.key,
            'value': self.value,
            'typedValue': self.typed_value,
            'type': self.type,
            'description': self.description,
            'category': self.category,
            'public': self.public,
            'authorId': self.author_id,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<SiteSetting {self.key}>'
