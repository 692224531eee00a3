# src/app/models/__init__.py

# This file centralizes all model imports, ensuring that SQLAlchemy's metadata
# is aware of every table before any operations are performed.

from .admin import Admin
from .video import Video
from .video_view import VideoView


# The __all__ list defines the public API for the 'models' package.
__all__ = [
    "Admin",
    "Video",
    "VideoView",
]
