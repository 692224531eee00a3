# Standard Library Imports
import logging

# Third-party Imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Application-specific Imports
from src.app.config.settings import DEFAULT_ADMIN_PAGE_SIZE, MAX_PAGE
from src.app.repositories.admin_repository import AdminRepository
from src.app.repositories.video_repository import VideoRepository
from src.app.utils.dependencies import get_admin_repository, get_current_admin, get_video_repository
from src.app.utils.pagination import build_pagination, clamp_limit
from src.app.utils.security import TokenPayload, create_access_token, dummy_verify, verify_password

# Schemas
from src.app.schemas.admin import AdminRead, AdminStats, LoginRequest, LoginResponse, MessageResponse
from src.app.schemas.video import VideoCreate, VideoListResponse, VideoRead, VideoUpdate

router = APIRouter()

# ─── Authentication ────────────────────────────────────────────────────────────

@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, admins: AdminRepository = Depends(get_admin_repository)):
    """
    Exchange admin credentials for a 24 hour bearer token.
    The same 401 is returned for an unknown username and a wrong password.
    """
    admin = admins.get_admin_by_username(credentials.username)
    if admin is None:
        dummy_verify()
    if admin is None or not verify_password(credentials.password, admin.password):
        logging.warning(f"Failed admin login attempt for username {credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(admin.id, admin.username)
    logging.info(f"Admin {admin.username!r} logged in")
    return LoginResponse(token=token, admin=AdminRead.model_validate(admin))

# ─── Dashboard ─────────────────────────────────────────────────────────────────

@router.get("/stats", response_model=AdminStats)
def get_stats(
    repo: VideoRepository = Depends(get_video_repository),
    admin: TokenPayload = Depends(get_current_admin),
):
    try:
        return AdminStats(**repo.admin_stats())
    except Exception as e:
        logging.error(f"Error fetching admin stats: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch stats")

# ─── Video Management ──────────────────────────────────────────────────────────

@router.get("/videos", response_model=VideoListResponse)
def list_all_videos(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(DEFAULT_ADMIN_PAGE_SIZE, ge=1),
    repo: VideoRepository = Depends(get_video_repository),
    admin: TokenPayload = Depends(get_current_admin),
):
    """Every video, active or not, newest first."""
    limit = clamp_limit(limit)
    try:
        videos = repo.list_all_videos_for_admin(page, limit)
        total = repo.count_all_videos()
    except Exception as e:
        logging.error(f"Error fetching admin video list: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch videos")

    return VideoListResponse(
        videos=[VideoRead.model_validate(video) for video in videos],
        pagination=build_pagination(page, limit, total),
    )


@router.post("/videos", response_model=VideoRead, status_code=status.HTTP_201_CREATED)
def create_video(
    video: VideoCreate,
    repo: VideoRepository = Depends(get_video_repository),
    admin: TokenPayload = Depends(get_current_admin),
):
    try:
        return repo.create_video(video)
    except Exception as e:
        logging.error(f"Error creating video: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create video")


@router.put("/videos/{video_id}", response_model=VideoRead)
def update_video(
    video_id: int,
    video: VideoUpdate,
    repo: VideoRepository = Depends(get_video_repository),
    admin: TokenPayload = Depends(get_current_admin),
):
    """
    Partial update: fields missing from the body are left untouched.
    """
    try:
        updated = repo.update_video(video_id, video)
    except Exception as e:
        logging.error(f"Error updating video {video_id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update video")

    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")
    return updated


@router.delete("/videos/{video_id}", response_model=MessageResponse)
def delete_video(
    video_id: int,
    repo: VideoRepository = Depends(get_video_repository),
    admin: TokenPayload = Depends(get_current_admin),
):
    try:
        deleted = repo.delete_video(video_id)
    except Exception as e:
        logging.error(f"Error deleting video {video_id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete video")

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")
    return {"message": "Video deleted successfully"}
