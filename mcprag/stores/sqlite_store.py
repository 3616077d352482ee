"""SQLite-backed document store."""

from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from mcprag.config import config
from mcprag.stores.base import query_terms, resolve_limit

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mcprag.models import DocumentChunk

logger = config.get_logger(__name__)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLiteDocumentStore:
    """Stores document chunks in a SQLite table and matches them with LIKE."""

    backend = "sqlite"

    def __init__(
        self,
        db_path: Path = Path("data/documents.db"),
        limit: int | None = None,
    ) -> None:
        """Initialize the store and ensure the schema exists.

        Args:
            db_path: Path to the SQLite database file.
            limit: Maximum results per search. If None, uses
                config.STORE_SEARCH_LIMIT.

        Raises:
            ValueError: If the limit is not positive.
        """
        self.limit = resolve_limit(limit, config.STORE_SEARCH_LIMIT)
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(exist_ok=True, parents=True)
        self._create_tables()

    def _create_tables(self) -> None:
        """Create the documents table if it doesn't exist."""
        with sqlite3.connect(str(self.db_path)) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    source TEXT NOT NULL,
                    chunk_id INTEGER NOT NULL DEFAULT 0,
                    content TEXT NOT NULL,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """)
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_documents_source ON documents(source)"
            )
            conn.commit()

    def add_documents(self, chunks: Iterable[DocumentChunk]) -> int:
        """Insert chunks into the store.

        Returns:
            int: Number of rows inserted.

        Raises:
            sqlite3.Error: If the insert fails.
        """
        rows = [
            (
                str(chunk.metadata.get("source", "unknown")),
                int(chunk.metadata.get("chunk_id", 0)),
                chunk.content,
            )
            for chunk in chunks
            if chunk.content.strip()
        ]
        if not rows:
            return 0

        try:
            with sqlite3.connect(str(self.db_path)) as conn:
                conn.executemany(
                    "INSERT INTO documents (source, chunk_id, content) VALUES (?, ?, ?)",
                    rows,
                )
                conn.commit()
        except sqlite3.Error:
            logger.exception("Error writing to SQLite document store")
            raise

        logger.info("Added %d chunks to SQLite document store", len(rows))
        return len(rows)

    def count(self) -> int:
        with sqlite3.connect(str(self.db_path)) as conn:
            (total,) = conn.execute("SELECT COUNT(*) FROM documents").fetchone()
        return int(total)

    def clear(self) -> None:
        """Delete every stored document."""
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("DELETE FROM documents")
            conn.commit()
        logger.info("Cleared SQLite document store")

    def search_sync(self, query: str) -> list[str]:
        """Blocking search used by :meth:`search`.

        Returns:
            list[str]: Up to ``limit`` matching documents in insertion order.

        Raises:
            sqlite3.Error: If the query fails.
        """
        terms = query_terms(query)
        if not terms:
            return []

        where = " OR ".join("py_lower(content) LIKE ? ESCAPE '\\'" for _ in terms)
        params: list[str | int] = [f"%{_escape_like(term)}%" for term in terms]
        params.append(self.limit)

        try:
            with sqlite3.connect(str(self.db_path)) as conn:
                # SQLite lower() only folds ASCII; match Python casing rules
                conn.create_function("py_lower", 1, str.lower, deterministic=True)
                cursor = conn.execute(
                    f"SELECT content FROM documents WHERE {where} ORDER BY id LIMIT ?",  # noqa: S608
                    params,
                )
                return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error:
            logger.exception("Error searching SQLite document store")
            raise

    async def search(self, query: str) -> list[str]:
        """Search in a worker thread so the event loop is not blocked.

        Returns:
            list[str]: Matching documents.
        """
        return await asyncio.to_thread(self.search_sync, query)
