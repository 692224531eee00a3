# File location: src/app/utils/dependencies.py
import logging
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from src.app.db.session import get_db
from src.app.repositories.admin_repository import AdminRepository
from src.app.repositories.video_repository import VideoRepository
from src.app.utils.security import TokenFailure, TokenPayload, verify_token

# auto_error is off so a missing header gets our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)


def get_video_repository(session: Annotated[Session, Depends(get_db)]) -> VideoRepository:
    return VideoRepository(session)


def get_admin_repository(session: Annotated[Session, Depends(get_db)]) -> AdminRepository:
    return AdminRepository(session)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_admin(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> TokenPayload:
    """
    Dependency guarding every protected admin route.

    Reads the bearer token from the Authorization header, verifies it and
    attaches the decoded payload to ``request.state.admin``.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("No token provided")

    result = verify_token(credentials.credentials)
    if isinstance(result, TokenFailure):
        logging.info(f"Rejected admin token ({result.value}) for {request.method} {request.url.path}")
        raise _unauthorized("Invalid token")

    request.state.admin = result
    return result
