"""
Single place to:
- Read DATABASE_URL from config (env / .env)
- Create a SQLAlchemy Engine
- Create a Session factory (SessionLocal) for per-request DB sessions
- Provide get_db() dependency for FastAPI routes
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .config import config

# SQLite needs this flag when FastAPI hands the session to a worker thread
connect_args = {"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {}

# pool_pre_ping=True = auto-detect dead connections (helps with long-lived processes).
engine = create_engine(
    config.DATABASE_URL,
    pool_pre_ping=True,
    echo=False,
    future=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


class Base(DeclarativeBase):
    pass


# FastAPI dependency: one session per request, always closed
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
