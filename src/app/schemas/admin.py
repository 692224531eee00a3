# File location: src/app/schemas/admin.py
from typing import Annotated

from pydantic import BaseModel, StringConstraints

from src.app.schemas.video import CamelModel

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class LoginRequest(BaseModel):
    username: NonEmptyStr
    password: NonEmptyStr


class AdminRead(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    token: str
    admin: AdminRead


class AdminStats(CamelModel):
    total_videos: int
    total_views: int
    storage_used: str
    categories: int


class MessageResponse(BaseModel):
    message: str
