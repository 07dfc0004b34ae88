# ticketdesk/core/database.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, Request
from sqlalchemy import Column, DateTime, create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class Database:
    def __init__(self, url: str):
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.url = url
        self.engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


# Common DB dependency
def get_db(request: Request):
    database: Database | None = getattr(request.app.state, "db", None)
    if database is None:
        logger.error("Request to %s with no database configured", request.url.path)
        raise HTTPException(status_code=500, detail="Base de datos no disponible")
    db = database.session()
    try:
        yield db
    finally:
        db.close()
