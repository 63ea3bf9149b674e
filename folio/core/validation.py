"""
Shared pieces for the per-entity input schemas.

Request bodies use camelCase keys on the wire; schemas expose snake_case
attributes so that `model_dump(exclude_unset=True)` maps straight onto the
SQLAlchemy models.
"""

import re
from datetime import datetime, timezone
from typing import Annotated, Optional
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .database import utcnow
from .errors import ValidationError

SLUG_RE = re.compile(r'^[a-z0-9-]+$')

# Rejects consecutive dots, leading/trailing dots in local part
EMAIL_RE = re.compile(r'^[a-zA-Z0-9_%+-]+(\.[a-zA-Z0-9_%+-]+)*@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$')


def _check_slug(value):
    if not SLUG_RE.match(value):
        raise ValueError('Slug must contain only lowercase letters, numbers, and hyphens')
    return value


def _is_url(value):
    parsed = urlparse(value)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def _check_url(value):
    if not _is_url(value):
        raise ValueError('Invalid URL format')
    return value


def _check_optional_url(value):
    # Forms submit '' for a cleared URL field
    if value is None or not value.strip():
        return None
    return _check_url(value.strip())


def _check_email(value):
    value = value.strip().lower()
    if not EMAIL_RE.match(value):
        raise ValueError('Invalid email address')
    return value


def _to_naive_utc(value):
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
Slug = Annotated[str, AfterValidator(_check_slug)]
Url = Annotated[str, AfterValidator(_check_url)]
OptionalUrl = Annotated[Optional[str], AfterValidator(_check_optional_url)]
Email = Annotated[str, AfterValidator(_check_email)]
Timestamp = Annotated[datetime, AfterValidator(_to_naive_utc)]
SortOrder = Annotated[int, Field(ge=0)]


class ApiSchema(BaseModel):
    """Base for request bodies: camelCase aliases, unknown keys dropped."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


def first_error_message(error: PydanticValidationError) -> str:
    """Human readable message for the first failing field."""
    err = error.errors()[0]
    message = err['msg']
    if message.startswith('Value error, '):
        message = message[len('Value error, '):]
    location = '.'.join(str(part) for part in err['loc'])
    return f"{location}: {message}" if location else message


def validate(schema, payload):
    """Validate a decoded JSON payload, raising the API ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(first_error_message(e)) from e


def resolve_period(start_date, end_date, current, flag):
    """
    Reconcile a dated period where an open end means "ongoing".

    `current` is None when the client did not say; it then follows the end
    date. A missing start date falls back to the end date, or now. Returns (start_date, end_date, current) or raises ValidationError.
    """
    if start_date is None:
        start_date = end_date or utcnow()
    if current is None:
        current = end_date is None
    if current and end_date is not None:
        raise ValidationError(f'endDate must be empty when {flag} is true')
    if not current and end_date is None:
        raise ValidationError(f'endDate is required when {flag} is false')
    if end_date is not None and start_date is not None and end_date < start_date:
        raise ValidationError('endDate must not be before startDate')
    return start_date, end_date, current


def merge_period(entity, changes, flag_attr, flag):
    """Apply resolve_period to a partial update of an existing row, in place."""
    current = changes.get(flag_attr)
    if 'end_date' in changes:
        end_date = changes['end_date']
    elif current:
        # Marking a period as ongoing drops its end date
        end_date = None
    else:
        end_date = entity.end_date
    if current is None and 'end_date' not in changes:
        current = getattr(entity, flag_attr)

    start_date = changes.get('start_date', entity.start_date)
    start_date, end_date, current = resolve_period(start_date, end_date, current, flag)
    changes.update(start_date=start_date, end_date=end_date)
    changes[flag_attr] = current
    return changes
