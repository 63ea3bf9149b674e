from typing import Dict, List, Optional

from pydantic import Field

from ...core.validation import ApiSchema, NonEmptyStr, OptionalUrl


class PersonalInfoCreate(ApiSchema):
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    title: Optional[str] = None
    bio: Optional[str] = None
    avatar: OptionalUrl = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: OptionalUrl = None
    resume_url: OptionalUrl = None
    social_links: Dict[str, OptionalUrl] = Field(default_factory=dict)
    skills: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    interests: Optional[str] = None
    is_public: bool = True


class PersonalInfoUpdate(ApiSchema):
    first_name: NonEmptyStr = None
    last_name: NonEmptyStr = None
    title: Optional[str] = None
    bio: Optional[str] = None
    avatar: OptionalUrl = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: OptionalUrl = None
    resume_url: OptionalUrl = None
    social_links: Dict[str, OptionalUrl] = None
    skills: Optional[str] = None
    languages: List[str] = None
    interests: Optional[str] = None
    is_public: bool = None
