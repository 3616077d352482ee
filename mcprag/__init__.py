"""MCP RAG - context collection, retrieval and completion pipeline."""

from .collector import ContextCollector
from .context_builder import MissingContextFieldError, build_prompt
from .document_processing import DocumentLoader, TextChunker
from .model_adapter import CompletionModel, OpenAICompletionAdapter
from .models import DocumentChunk, UserInput
from .orchestrator import Orchestrator
from .retriever import DocumentStore, Retriever
from .stores import InMemoryDocumentStore, SQLiteDocumentStore, get_document_store

__all__ = [
    "CompletionModel",
    "ContextCollector",
    "DocumentChunk",
    "DocumentLoader",
    "DocumentStore",
    "InMemoryDocumentStore",
    "MissingContextFieldError",
    "OpenAICompletionAdapter",
    "Orchestrator",
    "Retriever",
    "SQLiteDocumentStore",
    "TextChunker",
    "UserInput",
    "build_prompt",
    "get_document_store",
]
