from sqlalchemy import Column, String, Integer, DateTime, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class URLItem(Base):
    __tablename__ = "url"
    # SQLite would otherwise hand out max(id)+1 again after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    # Numeric surrogate key, internal bookkeeping only
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Public key: unique among live mappings, case-sensitive
    alias = Column(String, unique=True, index=True, nullable=False)

    url = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
