"""Pydantic schemas for vector store operations."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .constants import HNSW_DEFAULTS


class IndexStats(BaseModel):
    dimension: int = Field(..., description="Vector dimension of the index.")
    count: int = Field(0, description="Number of documents in the index.")
    metric: str = Field("cosine", description="Similarity metric.")


class QueryResult(BaseModel):
    id: str = Field(..., description="Document key.")
    score: float = Field(0.0, description="Search score reported by the service.")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Decoded document metadata.")
    document: Optional[str] = Field(None, description="Stored content text.")
    vector: Optional[List[float]] = Field(None, description="Never populated; vector fields are not retrievable.")


class AdditionalField(BaseModel):
    """Extra index field declared alongside the default schema."""

    name: str
    type: str = "Edm.String"
    searchable: bool = False
    filterable: bool = False
    retrievable: bool = True
    sortable: bool = False
    facetable: bool = False
    key: bool = False


class HnswConfig(BaseModel):
    m: int = HNSW_DEFAULTS["m"]
    ef_construction: int = HNSW_DEFAULTS["ef_construction"]
    ef_search: int = HNSW_DEFAULTS["ef_search"]


class PrioritizedFields(BaseModel):
    title_field: Optional[str] = "content"
    content_fields: List[str] = Field(default_factory=lambda: ["content"])
    keywords_fields: List[str] = Field(default_factory=lambda: ["tags"])


class SemanticConfig(BaseModel):
    """Semantic ranking configuration stored on the index."""

    name: Optional[str] = None
    prioritized_fields: PrioritizedFields = Field(default_factory=PrioritizedFields)


class SemanticOptions(BaseModel):
    """Per-query semantic ranking options."""

    configuration_name: Optional[str] = None
    semantic_query: Optional[str] = None
    answers: bool = False
    captions: bool = False
    max_wait_time: Optional[int] = Field(None, description="Milliseconds to wait for semantic ranking.")


class TextVectorization(BaseModel):
    """Text vectorized server-side by the index's vectorizer."""

    text: str
    fields: Optional[List[str]] = None


class AdditionalVectorQuery(BaseModel):
    vector: List[float]
    fields: Optional[List[str]] = None
    weight: Optional[float] = None
    k_nearest_neighbors_count: Optional[int] = None


QueryType = Literal["simple", "full", "semantic"]
FilterMode = Literal["preFilter", "postFilter"]
