"""Command-line entry point for ingesting documents and asking questions."""

from __future__ import annotations

import argparse
import asyncio
import sqlite3
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from openai import OpenAIError

from mcprag import (
    DocumentLoader,
    Orchestrator,
    SQLiteDocumentStore,
    TextChunker,
    UserInput,
    get_document_store,
)
from mcprag.config import config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from logging import Logger


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Build the CLI parser and read command-line arguments."""  # noqa: DOC201
    parser = argparse.ArgumentParser(
        description="Retrieval-augmented answers over a local document store.",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="SQLite document store path (default: DOCUMENT_STORE_DB_PATH).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ingest = subparsers.add_parser("ingest", help="Load documents into the store.")
    ingest.add_argument("paths", nargs="+", type=Path, help=".txt or .pdf files.")
    ingest.add_argument(
        "--reset",
        action="store_true",
        help="Remove existing documents before ingesting.",
    )

    ask = subparsers.add_parser("ask", help="Answer a request about a topic.")
    ask.add_argument("--user", required=True, help="Name of the requesting user.")
    ask.add_argument("--topic", required=True, help="Topic used for retrieval.")

    return parser.parse_args(argv)


def open_store(db_path: Path | None) -> SQLiteDocumentStore:
    """Open the configured document store shared by every subcommand.

    Raises:
        ValueError: If the configured backend does not persist between runs.
    """  # noqa: DOC201
    store = get_document_store(db_path=db_path)
    if not isinstance(store, SQLiteDocumentStore):
        msg = (
            f"DOCUMENT_STORE={store.backend} does not persist between commands; "
            "use the sqlite backend from the command line"
        )
        raise ValueError(msg)
    return store


def run_ingest(args: argparse.Namespace, logger: Logger) -> int:
    """Load, chunk and store every given document."""  # noqa: DOC201
    store = open_store(args.db)
    if args.reset:
        store.clear()

    chunker = TextChunker()
    total = 0
    for path in args.paths:
        text = DocumentLoader.load_document(path)
        total += store.add_documents(chunker.chunk_text(text, source=path.name))

    logger.info("Ingested %d chunks; store now holds %d", total, store.count())
    return 0


def run_ask(args: argparse.Namespace, logger: Logger) -> int:
    """Run one request through the orchestrator and print the answer."""  # noqa: DOC201
    config.validate()

    store = open_store(args.db)
    if store.count() == 0:
        logger.warning("Document store is empty; answering without context")

    orchestrator = Orchestrator.from_store(store)
    answer = asyncio.run(
        orchestrator.handle_request(UserInput(user_name=args.user, topic=args.topic))
    )
    print(answer)  # noqa: T201
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch the selected subcommand."""  # noqa: DOC201
    args = parse_args(argv)

    config.setup_logging()
    logger = config.get_logger(__name__)

    handlers = {"ingest": run_ingest, "ask": run_ask}
    try:
        return handlers[args.command](args, logger)
    except (ValueError, OSError, sqlite3.Error, OpenAIError):
        logger.exception("Command %s failed", args.command)
        return 1


if __name__ == "__main__":
    sys.exit(main())
