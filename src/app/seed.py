"""
Populate an empty database with an admin account and a sample catalogue.

Usage:
    SEED_ADMIN_USERNAME=admin SEED_ADMIN_PASSWORD=... python -m src.app.seed

Running it again is harmless: an existing admin is left alone and videos are
only inserted into an empty table.
"""
import logging
import os
import sys
from typing import List, Optional

from sqlmodel import Session

from src.app.db.session import create_db_and_tables, engine
from src.app.repositories.admin_repository import AdminRepository
from src.app.repositories.video_repository import VideoRepository
from src.app.utils.security import hash_password

SAMPLE_BUCKET = "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample"

# title, category, tags, views, likes, thumbnail photo id, video file
SAMPLE_VIDEOS = [
    ("Introduction to Web Development", "Education", ["web development", "programming", "tutorial"], 1250, 89, "1461749280684-dccba630e2f6", "BigBuckBunny.mp4"),
    ("React Tutorial for Beginners", "Programming", ["react", "javascript", "frontend"], 2840, 234, "1633356122544-f134324a6cee", "ElephantsDream.mp4"),
    ("Node.js Backend Development", "Programming", ["nodejs", "backend", "express"], 1876, 156, "1558494949-ef010cbdcc31", "ForBiggerBlazes.mp4"),
    ("Database Design Fundamentals", "Database", ["database", "sql", "design"], 987, 78, "1544383835-bda2bc66a55d", "ForBiggerEscapes.mp4"),
    ("Modern CSS Techniques", "Design", ["css", "styling", "frontend"], 1543, 112, "1507721999472-8ed4421c4af2", "ForBiggerFun.mp4"),
    ("JavaScript ES6+ Features", "Programming", ["javascript", "es6", "modern"], 2156, 189, "1579468118864-1b9ea3c0db4a", "ForBiggerJoyrides.mp4"),
    ("API Development with Express", "Programming", ["api", "express", "rest"], 1698, 134, "1555066931-4365d14bab8c", "ForBiggerMeltdowns.mp4"),
    ("Git and Version Control", "Tools", ["git", "version control", "development"], 1432, 98, "1556075798-4825dfaaf498", "Sintel.mp4"),
    ("Responsive Web Design", "Design", ["responsive", "mobile", "design"], 2045, 167, "1512941937669-90a1b58e7e9c", "SubaruOutbackOnStreetAndDirt.mp4"),
    ("TypeScript for JavaScript Developers", "Programming", ["typescript", "javascript", "typing"], 1789, 142, "1516116216624-53e697fedbea", "TearsOfSteel.mp4"),
    ("Docker for Developers", "DevOps", ["docker", "containers", "devops"], 1234, 89, "1605745341112-85968b19335b", "VolkswagenGTIReview.mp4"),
    ("AWS Cloud Fundamentals", "Cloud", ["aws", "cloud", "infrastructure"], 1567, 123, "1451187580459-43490279c0fa", "WeAreGoingOnBullrun.mp4"),
]


def sample_video_records() -> List[dict]:
    return [
        {
            "title": title,
            "description": f"{title}: a hands-on walkthrough.",
            "thumbnail_url": f"https://images.unsplash.com/photo-{photo}?w=400&h=225&fit=crop",
            "video_url": f"{SAMPLE_BUCKET}/{video_file}",
            "category": category,
            "tags": tags,
            "views": views,
            "likes": likes,
            "is_active": True,
        }
        for title, category, tags, views, likes, photo, video_file in SAMPLE_VIDEOS
    ]


def seed_database(session: Session, admin_username: Optional[str], admin_password: Optional[str]) -> dict:
    admins = AdminRepository(session)
    videos = VideoRepository(session)
    summary = {"admin_created": False, "videos_created": 0}

    if admin_username and admin_password:
        if admins.get_admin_by_username(admin_username) is None:
            admins.create_admin(admin_username, hash_password(admin_password))
            summary["admin_created"] = True
        else:
            logging.info(f"Admin {admin_username!r} already exists, skipping")
    else:
        logging.warning("SEED_ADMIN_USERNAME/SEED_ADMIN_PASSWORD not set, no admin account created")

    if videos.count_all_videos() == 0:
        summary["videos_created"] = videos.import_videos(sample_video_records())
        logging.info(f"Inserted {summary['videos_created']} sample videos")
    else:
        logging.info("Videos already present, skipping sample catalogue")

    return summary


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")
    logging.info("Seeding database...")
    try:
        create_db_and_tables()
        with Session(engine) as session:
            seed_database(
                session,
                os.getenv("SEED_ADMIN_USERNAME"),
                os.getenv("SEED_ADMIN_PASSWORD"),
            )
    except Exception as e:
        logging.error(f"Seeding failed: {e}", exc_info=True)
        return 1
    logging.info("Seeding completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
