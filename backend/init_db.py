from database import engine, Base, SessionLocal
from models import Product, ProductBrand, ProductType
from config.settings import SEED_DATA_DIR
from pathlib import Path
from sqlalchemy.orm import Session
import json
import logging

logger = logging.getLogger(__name__)

# Seed files in dependency order: products reference brands and types
_SEED_FILES = [
    (ProductBrand, 'brands.json'),
    (ProductType, 'types.json'),
    (Product, 'products.json'),
]


def _seed_table(db: Session, model, path: Path) -> int:
    """
    Insert the rows in a JSON file if the model's table is empty.

    Returns:
        Number of rows inserted (0 if the table already had data)
    """
    if db.query(model).first() is not None:
        return 0

    rows = json.loads(path.read_text(encoding='utf-8'))
    for row in rows:
        db.add(model(**row))
    db.commit()

    logger.info(f"Seeded {len(rows)} row(s) into {model.__tablename__}")
    return len(rows)


def seed_catalog(db: Session, seed_dir: Path = SEED_DATA_DIR) -> int:
    """
    Seed brands, types and products from JSON files.

    Each table is seeded only when empty, so this is safe to call on every
    startup.

    Args:
        db: Database session
        seed_dir: Directory holding brands.json, types.json and products.json

    Returns:
        Total number of rows inserted
    """
    inserted = 0
    for model, filename in _SEED_FILES:
        inserted += _seed_table(db, model, seed_dir / filename)
    return inserted


def init_database(seed: bool = True):
    """Create tables and optionally seed the catalog"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    if not seed:
        return

    db = SessionLocal()
    try:
        inserted = seed_catalog(db)
        if inserted:
            logger.info(f"✅ Catalog seeded with {inserted} row(s)")
    except Exception as e:
        logger.error(f"Catalog seeding failed: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()
