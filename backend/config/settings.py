"""
Runtime Configuration

Environment-driven settings for the catalog backend. Values are read once at
import time; override them by exporting the variables before startup.

Variables:
- DATABASE_URL: SQLAlchemy URL of the catalog store
- REDIS_URL: Redis URL of the basket store
- BASE_URL: Prefix prepended to product picture paths in API responses
- ENVIRONMENT: 'development' exposes exception details in error bodies
- LOG_DIR: Directory for the rotating backend log
- BASKET_TTL_DAYS: Expiry applied to stored baskets
- SEED_ON_STARTUP: Seed empty catalog tables from data/seed on startup
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BACKEND_DIR = Path(__file__).parent.parent


def _env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


DATABASE_URL = os.environ.get('DATABASE_URL', f"sqlite:///{BACKEND_DIR / 'catalog.db'}")
REDIS_URL = os.environ.get('REDIS_URL', 'redis://localhost:6379/0')
BASE_URL = os.environ.get('BASE_URL', 'http://localhost:8888/')
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'production').lower()
LOG_DIR = Path(os.environ.get('LOG_DIR', BACKEND_DIR / 'logs'))
BASKET_TTL_DAYS = int(os.environ.get('BASKET_TTL_DAYS', '1'))
SEED_ON_STARTUP = _env_flag('SEED_ON_STARTUP', 'true')
SEED_DATA_DIR = BACKEND_DIR / 'data' / 'seed'


def is_development() -> bool:
    """Check whether error responses may include stack traces."""
    return ENVIRONMENT == 'development'
