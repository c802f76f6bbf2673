from sqlalchemy import select, update, delete, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from shorty.db.Models.models import URLItem, utcnow
from shorty.db.storage import (
    URLStore,
    URLAlreadyExistsError,
    URLNotFoundError,
    StoreFailureError,
)

OPERATION_SAVE = "storage.sql.save"
OPERATION_RESOLVE = "storage.sql.resolve"
OPERATION_RENAME = "storage.sql.rename"
OPERATION_DELETE = "storage.sql.delete"


def _is_unique_violation(e: IntegrityError) -> bool:
    error_msg = str(e.orig).lower() if getattr(e, 'orig', None) is not None else str(e).lower()
    return "unique" in error_msg or "duplicate" in error_msg


class SQLURLStore(URLStore):
    """URLStore backed by any SQLAlchemy engine (SQLite, Postgres)."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def save(self, url: str, alias: str) -> int:
        now = utcnow()
        db_url = URLItem(alias=alias, url=url, created_at=now, updated_at=now)
        with self.SessionLocal() as db:
            try:
                db.add(db_url)
                db.flush()
                new_id = db_url.id
                db.commit()
                return new_id
            except IntegrityError as e:
                db.rollback()
                if _is_unique_violation(e):
                    raise URLAlreadyExistsError(alias) from e
                raise StoreFailureError(OPERATION_SAVE, "integrity error") from e
            except SQLAlchemyError as e:
                db.rollback()
                raise StoreFailureError(OPERATION_SAVE) from e

    def resolve(self, alias: str) -> str:
        with self.SessionLocal() as db:
            try:
                url = db.execute(
                    select(URLItem.url).where(URLItem.alias == alias)
                ).scalar_one_or_none()
            except SQLAlchemyError as e:
                raise StoreFailureError(OPERATION_RESOLVE) from e
        if url is None:
            raise URLNotFoundError(alias)
        return url

    def rename(self, old_alias: str, new_alias: str) -> None:
        stmt = (
            update(URLItem)
            .where(URLItem.alias == old_alias)
            .values(alias=new_alias, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        with self.SessionLocal() as db:
            try:
                updated = db.execute(stmt).rowcount
                if not updated:
                    db.rollback()
                    raise URLNotFoundError(old_alias)
                db.commit()
            except IntegrityError as e:
                db.rollback()
                if _is_unique_violation(e):
                    raise URLAlreadyExistsError(new_alias) from e
                raise StoreFailureError(OPERATION_RENAME, "integrity error") from e
            except SQLAlchemyError as e:
                db.rollback()
                raise StoreFailureError(OPERATION_RENAME) from e

    def delete(self, alias: str) -> None:
        stmt = (
            delete(URLItem)
            .where(URLItem.alias == alias)
            .execution_options(synchronize_session=False)
        )
        with self.SessionLocal() as db:
            try:
                db.execute(stmt)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StoreFailureError(OPERATION_DELETE) from e

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def close(self) -> None:
        self.engine.dispose()
