"""Document store backends and factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from mcprag.config import config

from .memory_store import InMemoryDocumentStore
from .sqlite_store import SQLiteDocumentStore

if TYPE_CHECKING:
    from pathlib import Path

StoreBackend = Literal["memory", "sqlite"]


def get_document_store(
    store: StoreBackend | str | None = None,
    *,
    db_path: Path | None = None,
    limit: int | None = None,
) -> InMemoryDocumentStore | SQLiteDocumentStore:
    """Return a configured document store instance.

    Raises:
        ValueError: If an unsupported backend is requested.
    """
    backend = (store if store is not None else config.DOCUMENT_STORE).lower()

    if backend == "memory":
        return InMemoryDocumentStore(limit=limit)

    if backend == "sqlite":
        return SQLiteDocumentStore(
            db_path=db_path if db_path is not None else config.DOCUMENT_STORE_DB_PATH,
            limit=limit,
        )

    msg = f"Unsupported document store backend: {backend}"
    raise ValueError(msg)


__all__ = [
    "InMemoryDocumentStore",
    "SQLiteDocumentStore",
    "StoreBackend",
    "get_document_store",
]
