#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the schema and seeds the measurement-unit catalogue.
Can be run from host machine (outside Docker) or inside container.
"""

import logging
import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import MeasurementUnit, SessionLocal, init_database

logger = logging.getLogger("flavourly.scripts.init_db")

MEASUREMENT_UNITS = [
    ("Cup", "cup"),
    ("Tablespoon", "tbsp"),
    ("Teaspoon", "tsp"),
    ("Pound", "lb"),
    ("Ounce", "oz"),
    ("Gram", "g"),
    ("Kilogram", "kg"),
    ("Milliliter", "ml"),
    ("Liter", "L"),
    ("Piece", "pc"),
    ("Clove", "clove"),
    ("Bunch", "bunch"),
    ("Can", "can"),
    ("Package", "pkg"),
    ("Pinch", "pinch"),
    ("To Taste", "to taste"),
    ("Fillets", "fillets"),
    ("Slices", "slices"),
    ("Sprigs", "sprigs"),
    ("Packets", "packets"),
    ("Heads", "heads"),
    ("Loaves", "loaves"),
    ("Cans", "cans"),
    ("Pieces", "pieces"),
    ("Medium", "medium"),
    ("Large", "large"),
    ("Small", "small"),
]


def seed_units(db) -> int:
    """Insert missing units; returns how many were added."""
    existing = {name for (name,) in db.query(MeasurementUnit.unit_name).all()}
    added = 0
    for unit_name, abbreviation in MEASUREMENT_UNITS:
        if unit_name in existing:
            continue
        db.add(MeasurementUnit(unit_name=unit_name, abbreviation=abbreviation))
        added += 1
    db.commit()
    return added


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
        db = SessionLocal()
        try:
            added = seed_units(db)
        finally:
            db.close()
    except Exception:
        logger.exception("Database initialization failed")
        return 1

    logger.info("Seeded %d measurement units", added)
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Flavourly Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! The database is ready to use.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
