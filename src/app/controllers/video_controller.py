# File: app/controllers/video_controller.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from src.app.config.settings import DEFAULT_PAGE_SIZE, DEFAULT_TOP_N, MAX_PAGE
from src.app.repositories.video_repository import DEFAULT_FILTER, VideoRepository
from src.app.schemas.admin import MessageResponse
from src.app.schemas.video import VideoListResponse, VideoRead
from src.app.utils.dependencies import get_video_repository
from src.app.utils.pagination import build_pagination, clamp_limit

router = APIRouter()


@router.get("", response_model=VideoListResponse)
def list_videos(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    filter: str = Query(DEFAULT_FILTER, description="latest, popular, most-viewed or favorite"),
    category: Optional[str] = None,
    repo: VideoRepository = Depends(get_video_repository),
):
    """
    Paginated listing of active videos.

    - **filter**: sort order, unknown values fall back to `latest`
    - **category**: exact category match
    """
    limit = clamp_limit(limit)
    try:
        videos = repo.list_videos(page, limit, filter, category)
        total = repo.count_videos(category)
    except Exception as e:
        logging.error(f"Error fetching videos: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch videos")

    return VideoListResponse(
        videos=[VideoRead.model_validate(video) for video in videos],
        pagination=build_pagination(page, limit, total),
    )


@router.get("/popular", response_model=List[VideoRead])
def popular_videos(limit: int = Query(DEFAULT_TOP_N, ge=1), repo: VideoRepository = Depends(get_video_repository)):
    try:
        return repo.get_popular_videos(clamp_limit(limit))
    except Exception as e:
        logging.error(f"Error fetching popular videos: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch popular videos")


@router.get("/latest", response_model=List[VideoRead])
def latest_videos(limit: int = Query(DEFAULT_TOP_N, ge=1), repo: VideoRepository = Depends(get_video_repository)):
    try:
        return repo.get_latest_videos(clamp_limit(limit))
    except Exception as e:
        logging.error(f"Error fetching latest videos: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch latest videos")


@router.get("/{video_id}", response_model=VideoRead)
def get_video(video_id: int, repo: VideoRepository = Depends(get_video_repository)):
    try:
        video = repo.get_video(video_id)
    except Exception as e:
        logging.error(f"Error fetching video {video_id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch video")

    if not video:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")
    return video


@router.post("/{video_id}/view", response_model=MessageResponse)
def track_view(video_id: int, request: Request, repo: VideoRepository = Depends(get_video_repository)):
    """
    Record a playback: appends an audit row and bumps the view counter.
    """
    viewer_ip = request.client.host if request.client else None
    user_agent = request.headers.get("user-agent")
    try:
        view = repo.record_view(video_id, viewer_ip=viewer_ip, user_agent=user_agent)
        if view is not None:
            repo.increment_views(video_id)
    except Exception as e:
        logging.error(f"Error tracking view for video {video_id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to track view")

    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")
    return {"message": "View tracked successfully"}
