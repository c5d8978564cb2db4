"""Pytest configuration and fixtures for adapter and filter tests."""

from types import SimpleNamespace
from typing import Any, List, Optional
from unittest.mock import Mock, patch

import pytest
from dotenv import load_dotenv

from aisearchvector.dbs.aisearch import AzureAISearchAdapter

# Load environment variables
load_dotenv()

TEST_ENDPOINT = "https://test-service.search.windows.net"
TEST_INDEX = "products"


def make_field(name: str, type: str = "Edm.String", dimensions: Optional[int] = None) -> SimpleNamespace:
    """Stand-in for an SDK SearchField."""
    return SimpleNamespace(name=name, type=type, vector_search_dimensions=dimensions)


def make_index(
    dimension: Optional[int] = 3,
    vector_field: str = "vector",
    metric: Any = "cosine",
    extra_fields: Optional[List[SimpleNamespace]] = None,
) -> SimpleNamespace:
    """Stand-in for an SDK SearchIndex with one vector field."""
    fields = [make_field("id")]
    if dimension is not None:
        fields.append(make_field(vector_field, "Collection(Edm.Single)", dimension))
    fields += [make_field("metadata"), make_field("content")]
    fields += extra_fields or []
    algorithms = [SimpleNamespace(parameters=SimpleNamespace(metric=metric))] if metric else []
    return SimpleNamespace(name=TEST_INDEX, fields=fields, vector_search=SimpleNamespace(algorithms=algorithms))


@pytest.fixture
def index_client():
    """Mocked SearchIndexClient reporting a 3-dimensional cosine index."""
    client = Mock()
    client.get_index.return_value = make_index()
    client.list_index_names.return_value = iter([TEST_INDEX, "articles"])
    return client


@pytest.fixture
def search_client():
    """Mocked SearchClient with an empty index."""
    client = Mock()
    client.get_document_count.return_value = 0
    client.search.return_value = iter([])
    client.upload_documents.side_effect = lambda documents: [
        SimpleNamespace(key=d["id"], succeeded=True, error_message=None, status_code=201) for d in documents
    ]
    return client


@pytest.fixture
def adapter(index_client, search_client):
    """Adapter wired to mocked SDK clients."""
    with (
        patch("aisearchvector.dbs.aisearch.SearchIndexClient", return_value=index_client),
        patch("aisearchvector.dbs.aisearch.SearchClient", return_value=search_client),
    ):
        yield AzureAISearchAdapter(endpoint=TEST_ENDPOINT, credential="test-key")


@pytest.fixture
def sample_vectors():
    return [[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]]


@pytest.fixture
def sample_metadata():
    return [
        {"category": "electronics", "price": 99.5, "content": "Noise cancelling headphones"},
        {"category": "books", "price": 12},
    ]
