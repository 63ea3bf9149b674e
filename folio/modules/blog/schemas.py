from typing import List, Optional

from pydantic import Field

from ...core.validation import ApiSchema, NonEmptyStr, OptionalUrl, Slug, SortOrder


class BlogPostCreate(ApiSchema):
    title: NonEmptyStr
    slug: Slug
    excerpt: Optional[str] = None
    content: NonEmptyStr
    featured_image: OptionalUrl = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    read_time: Optional[int] = Field(None, ge=1)
    featured: bool = False
    published: bool = False
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_image: OptionalUrl = None
    sort_order: SortOrder = 0


class BlogPostUpdate(ApiSchema):
    title: NonEmptyStr = None
    slug: Slug = None
    excerpt: Optional[str] = None
    content: NonEmptyStr = None
    featured_image: OptionalUrl = None
    tags: List[str] = None
    category: Optional[str] = None
    read_time: Optional[int] = Field(None, ge=1)
    featured: bool = None
    published: bool = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_image: OptionalUrl = None
    sort_order: SortOrder = None
