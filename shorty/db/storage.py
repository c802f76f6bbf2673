"""Storage contract for alias -> URL mappings.

The request layer depends only on :class:`URLStore`, so the backing engine
(SQLite file, managed Postgres, in-process dict) can be swapped without
touching the alias lifecycle. Implementations do not log; they raise the
typed errors below and leave messaging and retries to the caller.
"""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Base class for every error raised by a URL store."""


class URLNotFoundError(StorageError):
    """No live mapping exists under the alias."""

    def __init__(self, alias: str):
        super().__init__(f"url not found for alias {alias!r}")
        self.alias = alias


class URLAlreadyExistsError(StorageError):
    """The alias is already taken by a live mapping."""

    def __init__(self, alias: str):
        super().__init__(f"alias {alias!r} already exists")
        self.alias = alias


class StoreFailureError(StorageError):
    """Any other persistence failure (I/O, schema, connection).

    The only retryable error. The engine exception is chained as
    ``__cause__`` for diagnosis.
    """

    def __init__(self, operation: str, reason: str = "persistence failure"):
        super().__init__(f"{operation}: {reason}")
        self.operation = operation


class URLStore(ABC):
    """Abstract alias -> URL store.

    Each call is one independent transaction. Alias uniqueness is enforced
    by the engine at write time, never by a separate pre-check.
    """

    @abstractmethod
    def save(self, url: str, alias: str) -> int:
        """Insert a new mapping.

        Returns:
            The surrogate id assigned by the store.

        Raises:
            URLAlreadyExistsError: alias is held by a live mapping.
            StoreFailureError: any other persistence error.
        """

    @abstractmethod
    def resolve(self, alias: str) -> str:
        """Return the target URL for alias without mutating anything.

        Raises:
            URLNotFoundError: no live mapping has this alias.
            StoreFailureError: any other persistence error.
        """

    @abstractmethod
    def rename(self, old_alias: str, new_alias: str) -> None:
        """Move a mapping from old_alias to new_alias in one update.

        The id, url and created_at of the mapping are kept; updated_at is
        refreshed.

        Raises:
            URLNotFoundError: nothing is stored under old_alias.
            URLAlreadyExistsError: new_alias is held by another mapping.
            StoreFailureError: any other persistence error.
        """

    @abstractmethod
    def delete(self, alias: str) -> None:
        """Remove the mapping for alias. Deleting a missing alias is not an error.

        Raises:
            StoreFailureError: persistence error.
        """

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        pass
