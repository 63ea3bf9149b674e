from typing import List, Optional

from pydantic import Field

from ...core.validation import ApiSchema, NonEmptyStr, OptionalUrl, Slug, SortOrder, Url


class ProjectCreate(ApiSchema):
    title: NonEmptyStr
    slug: Slug
    description: NonEmptyStr
    long_description: Optional[str] = None
    image_url: OptionalUrl = None
    images: List[Url] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    project_url: OptionalUrl = None
    github_url: OptionalUrl = None
    featured: bool = False
    published: bool = True
    sort_order: SortOrder = 0
    skill_ids: List[str] = Field(default_factory=list)


class ProjectUpdate(ApiSchema):
    title: NonEmptyStr = None
    slug: Slug = None
    description: NonEmptyStr = None
    long_description: Optional[str] = None
    image_url: OptionalUrl = None
    images: List[Url] = None
    technologies: List[str] = None
    project_url: OptionalUrl = None
    github_url: OptionalUrl = None
    featured: bool = None
    published: bool = None
    sort_order: SortOrder = None
    skill_ids: List[str] = None
