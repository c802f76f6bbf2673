import logging
from typing import Optional, Tuple

from shorty.db.storage import URLStore, URLAlreadyExistsError
from shorty.utils.encoding import generate_alias, DEFAULT_ALIAS_LENGTH

logger = logging.getLogger(__name__)


class InvalidAliasError(ValueError):
    """Rename request is malformed; nothing was sent to the store."""


class AliasGenerationError(RuntimeError):
    """Every generated alias collided with a live one."""


class URLService:
    """Alias lifecycle on top of a URLStore.

    Owns alias generation and the request-shape checks for renames; all
    persistence rules (uniqueness, not-found) are left to the store.
    """

    def __init__(self, store: URLStore, alias_length: int = DEFAULT_ALIAS_LENGTH, max_attempts: int = 5):
        self.store = store
        self.alias_length = alias_length
        self.max_attempts = max_attempts

    def create_short_url(self, original_url: str, alias: Optional[str] = None) -> Tuple[int, str]:
        if alias:
            return self.store.save(original_url, alias), alias
        return self._save_with_generated_alias(original_url)

    def _save_with_generated_alias(self, original_url: str) -> Tuple[int, str]:
        for attempt in range(self.max_attempts):
            alias = generate_alias(self.alias_length)
            try:
                return self.store.save(original_url, alias), alias
            except URLAlreadyExistsError:
                logger.info("Alias collision on attempt %d/%d: %s", attempt + 1, self.max_attempts, alias)

        raise AliasGenerationError(f"Failed to generate unique alias after {self.max_attempts} attempts")

    def resolve(self, alias: str) -> str:
        return self.store.resolve(alias)

    def rename_alias(self, old_alias: str, new_alias: str) -> None:
        if not new_alias:
            raise InvalidAliasError("new alias is empty")
        if len(new_alias) < self.alias_length:
            raise InvalidAliasError("new alias is too short")
        if new_alias == old_alias:
            raise InvalidAliasError("new alias is the same as the old one")
        self.store.rename(old_alias, new_alias)

    def delete_alias(self, alias: str) -> None:
        self.store.delete(alias)
