# migration_script.py
"""
Create tables and seed the clinic directory and meditation library.
Usage: python migration_script.py [--reset]
"""

import argparse
import logging
import os
import sys

# project root on sys.path when run as a script
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sqlalchemy.exc import SQLAlchemyError

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import Clinic, MeditationSession

logger = logging.getLogger("migration")

DEFAULT_CLINICS = [
    {
        "name": "Riverside Community Health Center",
        "address": "120 Main St, Riverside",
        "distance": "2.4 mi",
        "rating": "4.7",
        "services": ["Primary care", "Mental health", "Women's health"],
    },
    {
        "name": "Valley Family Clinic",
        "address": "48 Orchard Rd, Valley Springs",
        "distance": "6.1 mi",
        "rating": "4.5",
        "services": ["Primary care", "Counseling"],
    },
    {
        "name": "Prairie Telehealth Hub",
        "address": "9 County Rd 12, Prairie View",
        "distance": "11.8 mi",
        "rating": "4.8",
        "services": ["Video consultation", "Mental health"],
    },
]

DEFAULT_MEDITATIONS = [
    {"title": "Deep Sleep Body Scan", "duration": 20, "category": "sleep",
     "description": "Release tension from head to toe before bed.", "is_featured": True},
    {"title": "Calm in Five", "duration": 5, "category": "anxiety",
     "description": "A short breathing practice for anxious moments."},
    {"title": "Morning Focus", "duration": 10, "category": "focus",
     "description": "Set a clear intention for the day."},
    {"title": "Kindness Toward Yourself", "duration": 15, "category": "self-love",
     "description": "A guided loving-kindness meditation."},
]


def run_migration(reset: bool = False) -> bool:
    if reset:
        logger.warning("Dropping all tables")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables created")

    db = SessionLocal()
    try:
        if db.query(Clinic).count() == 0:
            db.add_all(Clinic(**c) for c in DEFAULT_CLINICS)
            logger.info(f"Seeded {len(DEFAULT_CLINICS)} clinics")
        if db.query(MeditationSession).count() == 0:
            db.add_all(MeditationSession(**m) for m in DEFAULT_MEDITATIONS)
            logger.info(f"Seeded {len(DEFAULT_MEDITATIONS)} meditation sessions")
        db.commit()
        return True
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Seeding failed: {e}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Create and seed the HerVital database")
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    args = parser.parse_args()
    sys.exit(0 if run_migration(reset=args.reset) else 1)
