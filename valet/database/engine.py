"""Database engine and session helpers.

Nothing connects or touches the filesystem at import time: callers build an
engine with `get_engine()` and a session factory from it. Without an explicit
URL the SQLite database lives under the project root in `data/valet.db`
(overridable with `DATABASE_URL`).
"""

import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from valet.config import get_settings

from .models import Base


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return a SQLAlchemy engine, creating the data dir as needed."""
    url = database_url or get_settings().database_url
    if url.startswith("sqlite:///"):
        db_location = url.replace("sqlite:///", "")
        if db_location != ":memory:" and db_location:
            os.makedirs(os.path.dirname(os.path.abspath(db_location)), exist_ok=True)
    return create_engine(url, echo=False, future=True)


def make_session_factory(eng: Engine) -> sessionmaker:
    return sessionmaker(bind=eng, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(eng: Engine) -> None:
    """Create tables if they don't exist."""
    Base.metadata.create_all(eng)
