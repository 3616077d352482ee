"""In-process document store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcprag.config import config
from mcprag.stores.base import matches, query_terms, resolve_limit

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = config.get_logger(__name__)


class InMemoryDocumentStore:
    """Keeps documents in a list and matches them by query terms."""

    backend = "memory"

    def __init__(self, documents: Iterable[str] = (), limit: int | None = None) -> None:
        """Initialize the store.

        Args:
            documents: Initial document texts.
            limit: Maximum results per search. If None, uses
                config.STORE_SEARCH_LIMIT.

        Raises:
            ValueError: If the limit is not positive.
        """
        self.limit = resolve_limit(limit, config.STORE_SEARCH_LIMIT)
        self.documents: list[str] = list(documents)

    def add_documents(self, documents: Iterable[str]) -> None:
        """Append documents to the store."""
        added = [document for document in documents if document.strip()]
        self.documents.extend(added)
        logger.info("Added %d documents to in-memory store", len(added))

    def count(self) -> int:
        return len(self.documents)

    def clear(self) -> None:
        self.documents = []

    async def search(self, query: str) -> list[str]:
        """Return matching documents in insertion order.

        Returns:
            list[str]: Up to ``limit`` matching documents.
        """
        terms = query_terms(query)
        if not terms:
            return []

        results = [document for document in self.documents if matches(document, terms)]
        return results[: self.limit]
