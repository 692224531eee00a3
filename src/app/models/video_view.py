# File: app/models/video_view.py
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, Text
from datetime import datetime
from typing import Optional, TYPE_CHECKING

from src.app.utils.time import get_utc_time

if TYPE_CHECKING:
    from src.app.models.video import Video

class VideoView(SQLModel, table=True):
    """Append-only audit row for a single playback of a video."""
    __tablename__ = 'video_view'

    id: Optional[int] = Field(default=None, primary_key=True)
    video_id: int = Field(foreign_key="video.id", index=True)
    viewer_ip: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, sa_column=Column(Text))
    viewed_at: datetime = Field(default_factory=get_utc_time, sa_column=Column(DateTime(timezone=True), nullable=False))

    video: "Video" = Relationship(back_populates="view_events")
