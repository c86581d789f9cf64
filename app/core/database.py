import logging
import re
from typing import Any, Dict, List, Protocol, Sequence

from fastapi import Depends
from sqlalchemy import create_engine, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# $1, $2, ... -> :p1, :p2, ... (SQLAlchemy named binds)
_PLACEHOLDER = re.compile(r"\$(\d+)")


class QueryExecutor(Protocol):
    """Anything that can run a parameterized statement and hand back rows."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        ...


class SQLExecutor:
    """
    Query executor bound to a SQLAlchemy session.

    Statements use positional placeholders (`$1`, `$2`, ...) which are bound
    to `params` by position. Every statement is committed on success and
    rolled back on failure; errors are re-raised unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        statement = text(_PLACEHOLDER.sub(r":p\1", sql))
        bind = {f"p{idx}": value for idx, value in enumerate(params, start=1)}

        logger.debug("Executing SQL: %s | params=%s", " ".join(sql.split()), list(params))

        try:
            result = self.db.execute(statement, bind)
            rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        return rows


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_executor(db: Session = Depends(get_db)) -> SQLExecutor:
    """Dependency wrapping the request's session in a query executor."""
    return SQLExecutor(db)


def init_db():
    """
    Initialize database.

    Imports the models so they register on Base, then creates any missing
    tables. There is no migration tooling; existing tables are left as-is.
    """
    from app.models import company, job  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=engine)
