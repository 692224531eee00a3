import math

from src.app.config.settings import MAX_PAGE_SIZE
from src.app.schemas.video import Pagination


def clamp_limit(limit: int) -> int:
    return min(limit, MAX_PAGE_SIZE)


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )
