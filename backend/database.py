from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import DATABASE_URL

_is_sqlite = DATABASE_URL.startswith('sqlite')

# Create engine; SQLite needs cross-thread access for FastAPI's threadpool
engine = create_engine(
    DATABASE_URL,
    connect_args={'check_same_thread': False} if _is_sqlite else {},
    echo=False,
    pool_pre_ping=True,  # Verify connections are alive before using
    pool_recycle=3600  # Recycle connections after 1 hour to prevent stale connections
)

if _is_sqlite:
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
