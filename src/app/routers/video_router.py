from fastapi import APIRouter
from src.app.controllers import video_controller

router = APIRouter()
router.include_router(video_controller.router, prefix="/videos", tags=["Videos"])
