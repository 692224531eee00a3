# src/app/schemas/__init__.py

from .video import (
    VideoCreate, VideoUpdate, VideoRead, VideoListResponse, Pagination
)
from .admin import LoginRequest, LoginResponse, AdminRead, AdminStats, MessageResponse

__all__ = [
    "VideoCreate",
    "VideoUpdate",
    "VideoRead",
    "VideoListResponse",
    "Pagination",
    "LoginRequest",
    "LoginResponse",
    "AdminRead",
    "AdminStats",
    "MessageResponse",
]
