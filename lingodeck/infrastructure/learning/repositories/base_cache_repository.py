"""Shared SQLAlchemy implementation of the cache store protocol."""

from datetime import UTC, datetime
from typing import Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lingodeck.database import Base
from lingodeck.domain.learning.entities.cache_entry import CacheEntry
from lingodeck.exceptions import CacheStoreError

PayloadT = TypeVar("PayloadT")
OrmT = TypeVar("OrmT", bound=Base)


class _CacheMapper(Protocol[OrmT, PayloadT]):
    def to_domain(self, orm_model: OrmT) -> CacheEntry[PayloadT]: ...

    def to_orm(self, key: str, payload: PayloadT, created_at: datetime) -> OrmT: ...


class SqlCacheRepository(Generic[OrmT, PayloadT]):
    """
    Key to document store over one table with a string primary key.

    Point lookups only. Writes are upserts, so a key that another writer
    stored first is overwritten (last writer wins).
    """

    orm_class: type[OrmT]

    def __init__(self, db: Session, mapper: _CacheMapper[OrmT, PayloadT]) -> None:
        self.db = db
        self.mapper = mapper

    def exists(self, key: str) -> bool:
        """
        Check whether an entry is stored under a key.

        Args:
            key: The derived cache key

        Returns:
            True if an entry exists
        """
        stmt = select(self.orm_class.key).where(self.orm_class.key == key)  # type: ignore[attr-defined]
        try:
            return self.db.execute(stmt).first() is not None
        except SQLAlchemyError as e:
            self.db.rollback()
            raise CacheStoreError(key, "exists", str(e)) from e

    def get(self, key: str) -> CacheEntry[PayloadT] | None:
        """
        Get the entry stored under a key.

        Args:
            key: The derived cache key

        Returns:
            Cache entry if found, None otherwise
        """
        try:
            orm_model = self.db.get(self.orm_class, key)
            return self.mapper.to_domain(orm_model) if orm_model else None
        except (SQLAlchemyError, KeyError, TypeError) as e:
            # KeyError/TypeError: a stored document that no longer maps
            self.db.rollback()
            raise CacheStoreError(key, "get", str(e)) from e

    def put(self, key: str, payload: PayloadT) -> CacheEntry[PayloadT]:
        """
        Store a payload under a key.

        Args:
            key: The derived cache key
            payload: The payload to store

        Returns:
            The stored cache entry
        """
        orm_model = self.mapper.to_orm(key, payload, datetime.now(UTC))
        try:
            merged = self.db.merge(orm_model)
            self.db.commit()
            self.db.refresh(merged)
            return self.mapper.to_domain(merged)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise CacheStoreError(key, "put", str(e)) from e
