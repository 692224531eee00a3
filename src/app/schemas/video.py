# File: app/schemas/video.py
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, StringConstraints, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(HttpUrl)


def _validate_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("must be a well-formed http(s) URL")
    return value


# Well-formed http(s) URL, stored exactly as sent
UrlStr = Annotated[str, AfterValidator(_validate_url)]
TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
CategoryStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase keys, serializes camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Schema for creating a new video. Counters are never accepted from callers.
class VideoCreate(CamelModel):
    title: TitleStr = Field(..., examples=["Introduction to Web Development"])
    description: Optional[str] = Field(default=None, examples=["HTML, CSS and JavaScript fundamentals."])
    thumbnail_url: UrlStr = Field(..., examples=["https://images.example.com/intro.jpg"])
    video_url: UrlStr = Field(..., examples=["https://cdn.example.com/videos/intro.mp4"])
    tags: List[str] = Field(default_factory=list, examples=[["web", "tutorial"]])
    category: CategoryStr = Field(..., examples=["Education"])
    is_active: bool = True


# Schema for updating an existing video; only the provided fields are applied
class VideoUpdate(CamelModel):
    title: Optional[TitleStr] = None
    description: Optional[str] = None
    thumbnail_url: Optional[UrlStr] = None
    video_url: Optional[UrlStr] = None
    tags: Optional[List[str]] = None
    category: Optional[CategoryStr] = None
    is_active: Optional[bool] = None

    @field_validator("title", "thumbnail_url", "video_url", "tags", "category", "is_active", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field may be omitted but not set to null")
        return value


class VideoRead(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    thumbnail_url: str
    video_url: str
    tags: List[str] = []
    category: str
    views: int
    likes: int
    is_active: bool
    date_posted: datetime
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class VideoListResponse(CamelModel):
    videos: List[VideoRead]
    pagination: Pagination

