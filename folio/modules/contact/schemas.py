from typing import Literal, Optional

from pydantic import Field

from ...core.validation import ApiSchema, Email, NonEmptyStr

MessageStatus = Literal['pending', 'read', 'replied', 'archived']


class ContactSubmission(ApiSchema):
    name: NonEmptyStr
    email: Email
    subject: NonEmptyStr
    message: str = Field(min_length=10)
    phone: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    newsletter: bool = False
    source: Optional[str] = None


class ContactStatusUpdate(ApiSchema):
    status: MessageStatus
