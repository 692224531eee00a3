# File: app/repositories/admin_repository.py
import logging
from typing import Optional

from sqlmodel import Session, select

from src.app.models.admin import Admin


class AdminRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_admin_by_username(self, username: str) -> Optional[Admin]:
        return self.session.exec(select(Admin).where(Admin.username == username)).first()

    def create_admin(self, username: str, password_hash: str) -> Admin:
        admin = Admin(username=username, password=password_hash)
        self.session.add(admin)
        self.session.commit()
        self.session.refresh(admin)
        logging.info(f"Created admin account {username!r}")
        return admin
