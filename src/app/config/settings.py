import os
import logging
from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./streamvibe.db")

# JWT
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_HOURS = 24

# CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Pagination
DEFAULT_PAGE_SIZE = 12
DEFAULT_ADMIN_PAGE_SIZE = 20
DEFAULT_TOP_N = 10
MAX_PAGE_SIZE = 100
# Keeps (page - 1) * limit inside a 64-bit integer
MAX_PAGE = 1_000_000

# Placeholder, media files are hosted on external URLs
STORAGE_USED_PLACEHOLDER = "0 GB"


def get_jwt_secret() -> str:
    """
    Return the token signing secret.

    Read on every call so a secret injected after import is honoured.
    There is no default value.
    """
    secret = os.getenv("JWT_SECRET")
    if not secret:
        logger.error("JWT_SECRET is not set; admin tokens cannot be issued or verified")
        raise RuntimeError("JWT_SECRET environment variable must be set")
    return secret
