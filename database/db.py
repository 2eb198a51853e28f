from datetime import datetime, timezone

from sqlalchemy import create_engine               # SQLAlchemy engine factory
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import settings               # ✅ environment-driven settings

# SQLite needs check_same_thread off because FastAPI runs sync routes in a threadpool
_connect_args = {"check_same_thread": False} if settings.DB_URL.startswith("sqlite") else {}

# ✅ engine built from the configured DB URL
engine = create_engine(settings.DB_URL, connect_args=_connect_args, pool_pre_ping=True)

# ✅ session factory used by every request
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ base class for all declarative models
Base = declarative_base()


# ==========================================================
# [shared] per-request DB session
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ==========================================================
# [shared] column default timestamps
# ==========================================================
def utc_now() -> datetime:
    # DateTime columns are naive and hold UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)
