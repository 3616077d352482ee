"""Tests for Retriever."""

import sqlite3

import pytest

from mcprag import DocumentStore, InMemoryDocumentStore, Retriever

from .conftest import FailingDocumentStore, StubDocumentStore


@pytest.mark.asyncio
async def test_retrieve_returns_store_results_in_order(stub_store_factory):
    store = stub_store_factory(["DocB", "DocA", "DocB"])

    result = await Retriever(store).retrieve("pumps")

    assert result == ["DocB", "DocA", "DocB"]
    assert store.queries == ["pumps"]


@pytest.mark.asyncio
async def test_retrieve_converts_tuple_results_to_list(stub_store_factory):
    result = await Retriever(stub_store_factory(("DocA",))).retrieve("pumps")

    assert result == ["DocA"]


@pytest.mark.asyncio
async def test_retrieve_normalises_missing_results(stub_store_factory):
    result = await Retriever(stub_store_factory(None)).retrieve("pumps")

    assert result == []


@pytest.mark.asyncio
async def test_retrieve_propagates_store_failure():
    retriever = Retriever(FailingDocumentStore(sqlite3.OperationalError("locked")))

    with pytest.raises(sqlite3.OperationalError, match="locked"):
        await retriever.retrieve("pumps")


def test_stores_satisfy_document_store_protocol():
    assert isinstance(StubDocumentStore(), DocumentStore)
    assert isinstance(InMemoryDocumentStore(), DocumentStore)
