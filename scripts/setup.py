#!/usr/bin/env python3
"""Setup script for the admin dashboard: migrate the database and seed it."""

import asyncio
import logging
import os
import sys
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command
from alembic.config import Config
from sqlalchemy import func, select

from mtp_admin.core.database import async_session_factory, close_db
from mtp_admin.core.security import hash_password
from mtp_admin.models import Admin, Difficulty, Tour, TourStatus

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SEED_ADMIN_EMAIL = os.environ.get("SEED_ADMIN_EMAIL", "admin@mountaintravels.pk")
SEED_ADMIN_PASSWORD = os.environ.get("SEED_ADMIN_PASSWORD", "change-me-now")


def run_migrations() -> None:
    """Upgrade the database to the latest Alembic revision."""
    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(server_dir / "db" / "alembic"))

    logger.info("Running database migrations...")
    command.upgrade(alembic_cfg, "head")
    logger.info("Database migrations completed")


async def create_sample_data() -> None:
    """Create the first admin and a published sample tour if the tables are empty."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        try:
            admins = (await db.execute(select(func.count()).select_from(Admin))).scalar_one()
            if admins == 0:
                db.add(Admin(
                    name="Site Admin",
                    email=SEED_ADMIN_EMAIL,
                    password_hash=hash_password(SEED_ADMIN_PASSWORD),
                ))
                logger.info(f"Seed admin created: {SEED_ADMIN_EMAIL}")

            tours = (await db.execute(select(func.count()).select_from(Tour))).scalar_one()
            if tours == 0:
                db.add(Tour(
                    title="K2 Base Camp Trek",
                    description="Trek along the Baltoro Glacier to the foot of the world's second highest peak.",
                    location="Skardu, Gilgit-Baltistan",
                    price=2450.0,
                    duration=21,
                    category="Trekking",
                    status=TourStatus.PUBLISHED.value,
                    difficulty_level=Difficulty.HARD.value,
                    max_group_size=12,
                    itineraries=[
                        {"day": 1, "title": "Arrive in Islamabad", "description": "Transfer to the hotel and team briefing."},
                        {"day": 2, "title": "Fly to Skardu", "description": "Scenic flight past Nanga Parbat."},
                    ],
                    included_services=["Permits", "Guide", "Porters", "Camping equipment"],
                    excluded_services=["International flights", "Travel insurance"],
                    required_equipment=["Sleeping bag", "Trekking poles"],
                    keywords=["k2", "baltoro", "trekking"],
                ))
                logger.info("Sample tour created")

            await db.commit()
            logger.info("Sample data created successfully!")

        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create sample data: {e}")
            raise

    await close_db()


def main() -> None:
    """Main setup function."""
    logger.info("Starting admin dashboard setup...")

    run_migrations()
    asyncio.run(create_sample_data())

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn mtp_admin.main:app --reload")


if __name__ == "__main__":
    main()
