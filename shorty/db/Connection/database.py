import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from shorty.core.config import Settings
from shorty.db.Models.models import Base
from shorty.db.memory import InMemoryURLStore
from shorty.db.repository import SQLURLStore
from shorty.db.storage import URLStore

MEMORY_URL = "memory://"

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        # Requests are served from a thread pool
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            parent = os.path.dirname(url.database)
            if parent:
                os.makedirs(parent, exist_ok=True)
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def create_store(settings: Settings) -> URLStore:
    database_url = settings.database_url
    if database_url == MEMORY_URL:
        logger.info("Using in-memory URL store")
        return InMemoryURLStore()

    engine = build_engine(database_url)
    Base.metadata.create_all(bind=engine)
    logger.info("Database models initialized/checked (%s)", engine.url.render_as_string(hide_password=True))
    return SQLURLStore(engine)
