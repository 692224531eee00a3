# File location: src/app/utils/security.py
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from src.app.config.settings import ACCESS_TOKEN_EXPIRE_HOURS, JWT_ALGORITHM, get_jwt_secret

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class TokenPayload:
    admin_id: int
    username: str


class TokenFailure(str, Enum):
    MALFORMED = "malformed"
    EXPIRED = "expired"
    BAD_SIGNATURE = "bad_signature"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised or corrupted hash
        return False

def dummy_verify() -> None:
    """Spend the same bcrypt work as a real check when there is no hash to compare."""
    pwd_context.dummy_verify()

def create_access_token(
    admin_id: int,
    username: str,
    secret_key: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    to_encode = {
        "adminId": admin_id,
        "username": username,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, secret_key or get_jwt_secret(), algorithm=JWT_ALGORITHM)

def verify_token(token: str, secret_key: Optional[str] = None) -> Union[TokenPayload, TokenFailure]:
    """
    Validate signature and expiry of an admin token.

    Expected failures are returned as a ``TokenFailure`` member rather than
    raised, callers decide how to report them.
    """
    try:
        jwt.get_unverified_header(token)
    except JWTError:
        return TokenFailure.MALFORMED

    try:
        claims = jwt.decode(token, secret_key or get_jwt_secret(), algorithms=[JWT_ALGORITHM])
    except ExpiredSignatureError:
        return TokenFailure.EXPIRED
    except JWTError as e:
        logging.debug(f"Token rejected: {e}")
        return TokenFailure.BAD_SIGNATURE

    admin_id = claims.get("adminId")
    username = claims.get("username")
    if not isinstance(admin_id, int) or not isinstance(username, str):
        return TokenFailure.MALFORMED
    return TokenPayload(admin_id=admin_id, username=username)
