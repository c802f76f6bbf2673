"""In-process URLStore.

Keeps mappings in a dict keyed by alias. A single lock stands in for the
engine's transaction isolation, so every operation is atomic and ids are
never reused.
"""

import itertools
import threading
from typing import Dict

from shorty.db.Models.models import URLItem, utcnow
from shorty.db.storage import URLStore, URLAlreadyExistsError, URLNotFoundError


class InMemoryURLStore(URLStore):

    def __init__(self):
        self._items: Dict[str, URLItem] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, url: str, alias: str) -> int:
        with self._lock:
            if alias in self._items:
                raise URLAlreadyExistsError(alias)
            now = utcnow()
            item = URLItem(id=next(self._ids), alias=alias, url=url, created_at=now, updated_at=now)
            self._items[alias] = item
            return item.id

    def resolve(self, alias: str) -> str:
        with self._lock:
            item = self._items.get(alias)
        if item is None:
            raise URLNotFoundError(alias)
        return item.url

    def rename(self, old_alias: str, new_alias: str) -> None:
        with self._lock:
            item = self._items.get(old_alias)
            if item is None:
                raise URLNotFoundError(old_alias)
            if new_alias == old_alias:
                item.updated_at = utcnow()
                return
            if new_alias in self._items:
                raise URLAlreadyExistsError(new_alias)
            del self._items[old_alias]
            item.alias = new_alias
            item.updated_at = utcnow()
            self._items[new_alias] = item

    def delete(self, alias: str) -> None:
        with self._lock:
            self._items.pop(alias, None)

    def __len__(self):
        with self._lock:
            return len(self._items)
