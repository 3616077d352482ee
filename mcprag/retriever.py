"""Document retrieval over a pluggable store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .config import config

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = config.get_logger(__name__)


@runtime_checkable
class DocumentStore(Protocol):
    """Search capability every document backend provides."""

    async def search(self, query: str) -> Sequence[str]:
        """Return documents relevant to ``query`` in the store's own order."""
        ...


class Retriever:
    """Thin pass-through over an injected document store."""

    def __init__(self, store: DocumentStore) -> None:
        """Initialize the retriever.

        Args:
            store: Backend implementing ``search(query)``.
        """
        self.store = store

    async def retrieve(self, query: str) -> list[str]:
        """Fetch documents for a query.

        Results are returned unfiltered and in the order the store produced
        them. A store returning ``None`` yields an empty list.

        Returns:
            list[str]: Retrieved document texts.
        """
        logger.info("Retrieving documents for query: %s", query)
        try:
            documents = await self.store.search(query)
        except Exception:
            logger.exception("Document store search failed")
            raise

        results = list(documents) if documents is not None else []
        logger.info("Retrieved %d documents", len(results))
        return results
