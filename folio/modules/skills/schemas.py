from typing import List, Optional

from pydantic import Field

from ...core.validation import ApiSchema, NonEmptyStr, OptionalUrl, SortOrder


class SkillCreate(ApiSchema):
    name: NonEmptyStr
    category: NonEmptyStr
    proficiency: int = Field(ge=1, le=5)
    description: Optional[str] = None
    icon: OptionalUrl = None
    featured: bool = False
    sort_order: SortOrder = 0
    tags: List[str] = Field(default_factory=list)


class SkillUpdate(ApiSchema):
    name: NonEmptyStr = None
    category: NonEmptyStr = None
    proficiency: int = Field(None, ge=1, le=5)
    description: Optional[str] = None
    icon: OptionalUrl = None
    featured: bool = None
    sort_order: SortOrder = None
    tags: List[str] = None
