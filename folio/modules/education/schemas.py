from typing import Optional

from ...core.validation import ApiSchema, NonEmptyStr, OptionalUrl, SortOrder, Timestamp


class EducationCreate(ApiSchema):
    institution: NonEmptyStr
    degree: NonEmptyStr
    field: NonEmptyStr
    location: Optional[str] = None
    description: Optional[str] = None
    gpa: Optional[str] = None
    honors: Optional[str] = None
    institution_logo: OptionalUrl = None
    current_student: Optional[bool] = None
    sort_order: SortOrder = 0
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None


class EducationUpdate(ApiSchema):
    institution: NonEmptyStr = None
    degree: NonEmptyStr = None
    field: NonEmptyStr = None
    location: Optional[str] = None
    description: Optional[str] = None
    gpa: Optional[str] = None
    honors: Optional[str] = None
    institution_logo: OptionalUrl = None
    current_student: bool = None
    sort_order: SortOrder = None
    start_date: Timestamp = None
    end_date: Optional[Timestamp] = None
