import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostFrontMatter(BaseModel):
    """Validated front-matter of a markdown post.

    Absent keys fall back to their defaults; unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    published: bool = True

    @field_validator("title", "description", "date", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        # YAML turns bare 2024-07-28 into a date object and yes/no into bools
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return value

    @field_validator("published", mode="before")
    @classmethod
    def _default_published(cls, value: Any) -> Any:
        return True if value is None else value


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    published: bool = True
    excerpt: Optional[str] = None
    readingTime: Optional[str] = None


class PostDetail(PostSummary):
    content: str  # Rendered HTML


class RouteSlug(BaseModel):
    slug: str


class RouteParams(BaseModel):
    params: RouteSlug
