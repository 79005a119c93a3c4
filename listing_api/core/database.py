"""
Database utilities and session management.
"""
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from listing_api.core.config import settings


def make_engine(database_url: str) -> Engine:
    engine_options = {}
    if database_url.startswith("sqlite"):
        # FastAPI serves sync endpoints from a threadpool
        engine_options["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_options["poolclass"] = StaticPool
    return create_engine(database_url, echo=False, **engine_options)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db(request: Request):
    """Get database session from the engine the app was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
