# File: app/models/admin.py
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Text
from datetime import datetime
from typing import Optional

from src.app.utils.time import get_utc_time

class Admin(SQLModel, table=True):
    __tablename__ = 'admin'

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=255, unique=True, index=True)
    # bcrypt hash, never the plaintext
    password: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=get_utc_time, sa_column=Column(DateTime(timezone=True), nullable=False))
