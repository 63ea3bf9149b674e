from typing import List, Optional

from pydantic import Field

from ...core.validation import ApiSchema, NonEmptyStr, OptionalUrl, SortOrder, Timestamp


class ExperienceCreate(ApiSchema):
    company: NonEmptyStr
    position: NonEmptyStr
    location: Optional[str] = None
    description: NonEmptyStr
    responsibilities: List[str] = Field(default_factory=list)
    achievements: Optional[str] = None
    company_logo: OptionalUrl = None
    current_job: Optional[bool] = None
    sort_order: SortOrder = 0
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None


class ExperienceUpdate(ApiSchema):
    company: NonEmptyStr = None
    position: NonEmptyStr = None
    location: Optional[str] = None
    description: NonEmptyStr = None
    responsibilities: List[str] = None
    achievements: Optional[str] = None
    company_logo: OptionalUrl = None
    current_job: bool = None
    sort_order: SortOrder = None
    start_date: Timestamp = None
    # null reopens the entry as the current job
    end_date: Optional[Timestamp] = None
