"""
SQLAlchemy-backed persisted storage.

Entries live in a single ``storage_entries`` table; the default URL points
at a local SQLite file so a session survives process restarts.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, String, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Mapped, declarative_base, mapped_column, sessionmaker

from stayhub.config.logging import get_logger
from stayhub.config.settings import settings
from stayhub.storage.base import KeyValueStorage

Base = declarative_base()

logger = get_logger(__name__)


class StorageEntry(Base):
    """One persisted key/value pair"""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


def create_storage_engine(url: Optional[str] = None, echo: bool = False) -> Engine:
    """Create an engine for the storage database"""
    url = url or settings.STORAGE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


class SqlStorage(KeyValueStorage):
    """Key/value storage persisted through SQLAlchemy"""

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None, echo: bool = False):
        self.engine = engine or create_storage_engine(url, echo=echo)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        self.init_db()

    def init_db(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def get_item(self, key: str) -> Optional[str]:
        with self.SessionLocal() as db:
            entry = db.get(StorageEntry, key)
            return entry.value if entry is not None else None

    def set_item(self, key: str, value: str) -> None:
        with self.SessionLocal.begin() as db:
            entry = db.get(StorageEntry, key)
            if entry is None:
                db.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value

    def remove_item(self, key: str) -> None:
        with self.SessionLocal.begin() as db:
            entry = db.get(StorageEntry, key)
            if entry is not None:
                db.delete(entry)

    def keys(self) -> List[str]:
        with self.SessionLocal() as db:
            return list(db.scalars(select(StorageEntry.key).order_by(StorageEntry.key)))

    def close(self) -> None:
        self.engine.dispose()
        logger.debug("Storage engine disposed")
