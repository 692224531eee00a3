# File: app/models/video.py
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, JSON, Text
from datetime import datetime
from typing import Optional, TYPE_CHECKING, List

from src.app.utils.time import get_utc_time

if TYPE_CHECKING:
    from src.app.models.video_view import VideoView

class Video(SQLModel, table=True):
    __tablename__ = 'video'

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    thumbnail_url: str = Field(sa_column=Column(Text, nullable=False))
    video_url: str = Field(sa_column=Column(Text, nullable=False))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    category: str = Field(max_length=100, index=True)
    views: int = Field(default=0)
    likes: int = Field(default=0)
    is_active: bool = Field(default=True, index=True)
    date_posted: datetime = Field(default_factory=get_utc_time, sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    created_at: datetime = Field(default_factory=get_utc_time, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=get_utc_time, sa_column=Column(DateTime(timezone=True), nullable=False))

    # View events are removed together with their video. This is the one place
    # the otherwise append-only audit log loses rows: a hard delete of a video
    # takes its history with it instead of leaving orphans behind.
    view_events: List["VideoView"] = Relationship(back_populates="video", sa_relationship_kwargs={"cascade": "all, delete-orphan"})
