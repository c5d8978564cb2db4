"""Integration tests for Azure AI Search with structured filters.

Targets a real search service configured through AZURE_AI_SEARCH_ENDPOINT and
AZURE_AI_SEARCH_API_KEY. Skipped when those are not set.
"""

import time
import uuid

import pytest
from dotenv import load_dotenv

from aisearchvector import AzureAISearchAdapter, FilterExpression
from aisearchvector.exceptions import DimensionMismatchError, DocumentNotFoundError, MissingConfigError

load_dotenv()

DIMENSION = 4
INDEX_NAME = f"test-aisearchvector-{uuid.uuid4().hex[:8]}"


def wait_for_count(adapter, index_name, expected, timeout=30.0):
    """Poll until the index reports the expected document count."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if adapter.describe_index(index_name).count == expected:
            return
        time.sleep(1)
    pytest.fail(f"Index {index_name} did not reach {expected} documents in {timeout}s")


@pytest.fixture(scope="module")
def adapter():
    db = AzureAISearchAdapter()
    try:
        _ = db.index_client
    except MissingConfigError as e:
        pytest.skip(f"Azure AI Search not available: {e}")

    db.create_index(INDEX_NAME, DIMENSION)
    yield db
    db.delete_index(INDEX_NAME)


@pytest.fixture(scope="module")
def sample_ids(adapter):
    vectors = [
        [1.0, 0.0, 0.0, 0.0],
        [0.9, 0.1, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ]
    metadata = [
        {"content": "Wireless headphones", "category": "tech"},
        {"content": "Bluetooth speaker", "category": "tech"},
        {"content": "Pasta recipes", "category": "food"},
        {"content": "Travel guide to Lisbon", "category": "travel"},
    ]
    ids = adapter.upsert(INDEX_NAME, vectors, metadata=metadata, ids=["doc1", "doc2", "doc3", "doc4"])
    wait_for_count(adapter, INDEX_NAME, len(ids))
    return ids


def test_index_is_listed(adapter):
    assert INDEX_NAME in adapter.list_indexes()


def test_describe_index(adapter, sample_ids):
    stats = adapter.describe_index(INDEX_NAME)
    assert stats.dimension == DIMENSION
    assert stats.metric == "cosine"
    assert stats.count == len(sample_ids)


def test_query_orders_by_similarity(adapter, sample_ids):
    results = adapter.query(INDEX_NAME, [1.0, 0.0, 0.0, 0.0], top_k=2)
    assert [r.id for r in results] == ["doc1", "doc2"]
    assert results[0].metadata["category"] == "tech"
    assert results[0].document == "Wireless headphones"


def test_query_with_raw_filter(adapter, sample_ids):
    results = adapter.query(INDEX_NAME, [1.0, 0.0, 0.0, 0.0], top_k=4, filter="search.ismatch('Pasta', 'content')")
    assert [r.id for r in results] == ["doc3"]


def test_query_with_structured_filter(adapter, sample_ids):
    expr = FilterExpression(contains={"content": "headphones"}) | FilterExpression(contains={"content": "Lisbon"})
    results = adapter.query(INDEX_NAME, [0.0, 0.0, 1.0, 0.0], top_k=4, filter=expr)
    assert {r.id for r in results} == {"doc1", "doc4"}


def test_exact_query(adapter, sample_ids):
    results = adapter.exact_query(INDEX_NAME, [0.0, 1.0, 0.0, 0.0], top_k=1)
    assert results[0].id == "doc3"


def test_upsert_rejects_wrong_dimension(adapter):
    with pytest.raises(DimensionMismatchError):
        adapter.upsert(INDEX_NAME, [[1.0, 0.0]])


def test_update_vector(adapter, sample_ids):
    adapter.update_vector(INDEX_NAME, "doc4", metadata={"content": "Travel guide to Porto", "category": "travel"})
    deadline = time.monotonic() + 30
    while time.monotonic() < deadline:
        results = adapter.query(INDEX_NAME, [0.0, 0.0, 1.0, 0.0], top_k=1)
        if results and results[0].document == "Travel guide to Porto":
            break
        time.sleep(1)
    else:
        pytest.fail("Updated document not visible")


def test_update_missing_document(adapter):
    with pytest.raises(DocumentNotFoundError):
        adapter.update_vector(INDEX_NAME, "missing", metadata={"a": 1})


def test_delete_vector(adapter, sample_ids):
    adapter.delete_vector(INDEX_NAME, "doc2")
    adapter.delete_vector(INDEX_NAME, "doc2")
    wait_for_count(adapter, INDEX_NAME, len(sample_ids) - 1)
