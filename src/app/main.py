# ───────────────────────────────────────────────────────────────
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import configure_mappers

# ─── Local imports ─────────────────────────────────────────────
from src.app.config.settings import CORS_ORIGINS, LOG_LEVEL
from src.app.db.session import create_db_and_tables
from src.app.utils.time import get_utc_time

# Importing the models package registers every table before mapper configuration.
from src.app.models import Admin, Video, VideoView  # noqa: F401

# Import routers
from src.app.routers import admin_router, video_router


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

# ─── FastAPI app ───────────────────────────────────────────────
app = FastAPI(
    title="StreamVibe API",
    description="Video catalogue with public browsing and an admin panel",
    version="1.0.0",
)

# ─── Middlewares ───────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ─── Error handlers ────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        field = ".".join(location[1:]) or ".".join(location)
        errors.append({"field": field, "message": error.get("msg", "Invalid value")})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )

# ─── Startup ───────────────────────────────────────────────────
@app.on_event("startup")
async def on_startup():
    logging.info("Configuring SQLAlchemy mappers...")
    try:
        configure_mappers()
        logging.info("Mappers configured successfully.")
    except Exception as e:
        logging.error(f"Mapper configuration failed: {e}", exc_info=True)
        raise

    logging.info("Creating database and tables...")
    try:
        create_db_and_tables()
    except Exception as e:
        logging.error(f"Failed to create database and tables: {e}", exc_info=True)
        raise

# ─── Routers ───────────────────────────────────────────────────
app.include_router(video_router.router, prefix="/api")
app.include_router(admin_router.router, prefix="/api")

# ─── Simple endpoints ──────────────────────────────────────────
@app.get("/")
async def root():
    return {
        "message": "Welcome to StreamVibe API",
        "docs_url": "/docs",
        "redoc_url": "/redoc",
    }

@app.get("/health")
async def health_check():
    return {"status": "ok", "timestamp": get_utc_time().isoformat()}
