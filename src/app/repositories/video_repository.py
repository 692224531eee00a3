# File: app/repositories/video_repository.py
import logging
from typing import Iterable, List, Optional

from sqlalchemy import func, update
from sqlmodel import Session, select

from src.app.config.settings import STORAGE_USED_PLACEHOLDER
from src.app.models.video import Video
from src.app.models.video_view import VideoView
from src.app.schemas.video import VideoCreate, VideoUpdate
from src.app.utils.time import get_utc_time

# Named sort orders for the public listing. Unknown names fall back to "latest".
SORT_ORDERS = {
    "latest": Video.date_posted,
    "popular": Video.views,
    "most-viewed": Video.views,
    "favorite": Video.likes,
}
DEFAULT_FILTER = "latest"


def _offset(page: int, limit: int) -> int:
    return (page - 1) * limit


class VideoRepository:
    """
    Typed access to the video and video_view tables.

    Expected conditions (missing ids) are reported through ``None``/``False``
    return values. Only unexpected datastore errors propagate.
    """

    def __init__(self, session: Session):
        self.session = session

    # --- Public listing ---

    def list_videos(self, page: int, limit: int, filter: str = DEFAULT_FILTER, category: Optional[str] = None) -> List[Video]:
        sort_column = SORT_ORDERS.get(filter, SORT_ORDERS[DEFAULT_FILTER])
        query = select(Video).where(Video.is_active == True)  # noqa: E712
        if category:
            query = query.where(Video.category == category)
        query = (
            query.order_by(sort_column.desc(), Video.id.desc())
            .offset(_offset(page, limit))
            .limit(limit)
        )
        return list(self.session.exec(query).all())

    def count_videos(self, category: Optional[str] = None) -> int:
        query = select(func.count()).select_from(Video).where(Video.is_active == True)  # noqa: E712
        if category:
            query = query.where(Video.category == category)
        return self.session.exec(query).one()

    def count_all_videos(self) -> int:
        return self.session.exec(select(func.count()).select_from(Video)).one()

    def get_video(self, video_id: int) -> Optional[Video]:
        return self.session.get(Video, video_id)

    def get_popular_videos(self, limit: int = 10) -> List[Video]:
        return self.list_videos(1, limit, "popular")

    def get_latest_videos(self, limit: int = 10) -> List[Video]:
        return self.list_videos(1, limit, "latest")

    # --- Admin ---

    def list_all_videos_for_admin(self, page: int, limit: int) -> List[Video]:
        query = (
            select(Video)
            .order_by(Video.date_posted.desc(), Video.id.desc())
            .offset(_offset(page, limit))
            .limit(limit)
        )
        return list(self.session.exec(query).all())

    def create_video(self, data: VideoCreate) -> Video:
        now = get_utc_time()
        video = Video(
            **data.model_dump(),
            views=0,
            likes=0,
            date_posted=now,
            created_at=now,
            updated_at=now,
        )
        self.session.add(video)
        self.session.commit()
        self.session.refresh(video)
        logging.info(f"Created video {video.id} ({video.title!r})")
        return video

    def update_video(self, video_id: int, data: VideoUpdate) -> Optional[Video]:
        video = self.session.get(Video, video_id)
        if video is None:
            return None

        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(video, key, value)
        video.updated_at = get_utc_time()

        self.session.add(video)
        self.session.commit()
        self.session.refresh(video)
        logging.info(f"Updated video {video_id}")
        return video

    def delete_video(self, video_id: int) -> bool:
        video = self.session.get(Video, video_id)
        if video is None:
            return False

        # view_events are removed with the video through the relationship cascade
        self.session.delete(video)
        self.session.commit()
        logging.info(f"Deleted video {video_id}")
        return True

    # --- View tracking ---

    def increment_views(self, video_id: int) -> bool:
        # Evaluated by the datastore so concurrent calls cannot lose increments
        statement = (
            update(Video)
            .where(Video.id == video_id)
            .values(views=Video.views + 1, updated_at=get_utc_time())
            .execution_options(synchronize_session=False)
        )
        result = self.session.exec(statement)
        self.session.commit()
        return result.rowcount > 0

    def record_view(self, video_id: int, viewer_ip: Optional[str] = None, user_agent: Optional[str] = None) -> Optional[VideoView]:
        if self.session.get(Video, video_id) is None:
            return None

        view = VideoView(video_id=video_id, viewer_ip=viewer_ip, user_agent=user_agent)
        self.session.add(view)
        self.session.commit()
        self.session.refresh(view)
        return view

    def count_view_events(self, video_id: int) -> int:
        query = select(func.count()).select_from(VideoView).where(VideoView.video_id == video_id)
        return self.session.exec(query).one()

    # --- Stats ---

    def admin_stats(self) -> dict:
        total_videos = self.count_all_videos()
        # Includes inactive videos, unlike the public listings
        total_views = self.session.exec(select(func.coalesce(func.sum(Video.views), 0))).one()
        categories = self.session.exec(select(func.count(func.distinct(Video.category)))).one()
        return {
            "total_videos": total_videos,
            "total_views": int(total_views),
            "storage_used": STORAGE_USED_PLACEHOLDER,
            "categories": categories,
        }

    # --- Seeding ---

    def import_videos(self, records: Iterable[dict]) -> int:
        """Bulk insert existing catalogue rows, keeping their counters."""
        videos = [Video(**record) for record in records]
        self.session.add_all(videos)
        self.session.commit()
        return len(videos)
