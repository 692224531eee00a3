from .admin_repository import AdminRepository
from .video_repository import VideoRepository

__all__ = ["AdminRepository", "VideoRepository"]
