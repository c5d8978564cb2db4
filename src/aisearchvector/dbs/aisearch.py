"""Concrete adapter for Azure AI Search.

This module provides the Azure AI Search implementation of the VectorStoreAdapter
interface, enabling vector storage and retrieval using the service's HNSW vector
search, with optional semantic ranking and hybrid queries.

Key Features:
    - Lazy index client initialization, search clients cached per index
    - Index creation with customizable vector field, HNSW and semantic settings
    - Vector field auto-detection on existing indexes
    - Dimension validation before upload
    - Structured filters translated to OData
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Type, TypeVar, Union

from azure.core.credentials import AzureKeyCredential
from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.search.documents import SearchClient
from azure.search.documents.indexes import SearchIndexClient
from azure.search.documents.indexes.models import (
    HnswAlgorithmConfiguration,
    HnswParameters,
    SearchField,
    SearchFieldDataType,
    SearchIndex,
    SemanticConfiguration,
    SemanticField,
    SemanticPrioritizedFields,
    SemanticSearch,
    VectorSearch,
    VectorSearchProfile,
)
from azure.search.documents.models import VectorizableTextQuery, VectorizedQuery
from pydantic import BaseModel

from aisearchvector.abc import VectorStoreAdapter
from aisearchvector.constants import (
    DEFAULT_VECTOR_FIELD,
    SELECT_FIELDS,
    VECTOR_ALGORITHM_NAME,
    VECTOR_FIELD_TYPE,
    VECTOR_METRIC_MAP,
    VECTOR_PROFILE_NAME,
    VectorMetric,
)
from aisearchvector.exceptions import (
    AISearchVectorError,
    DimensionMismatchError,
    DocumentNotFoundError,
    ErrorCategory,
    InvalidFieldError,
    MissingConfigError,
    MissingFieldError,
    PartialUploadError,
    VectorStoreError,
)
from aisearchvector.logger import Logger
from aisearchvector.querydsl.compilers.odata import ODataWhereCompiler, odata_where
from aisearchvector.schema import (
    AdditionalField,
    AdditionalVectorQuery,
    FilterMode,
    HnswConfig,
    IndexStats,
    QueryResult,
    QueryType,
    SemanticConfig,
    SemanticOptions,
    TextVectorization,
)
from aisearchvector.settings import settings as api_settings
from aisearchvector.types import FilterInput
from aisearchvector.utils import (
    chunk_iter,
    dump_metadata,
    load_metadata,
    normalize_ids,
    normalize_metadatas,
    parse_connection_string,
)

M = TypeVar("M", bound=BaseModel)

Credential = Union[str, AzureKeyCredential, Any]


def _coerce(model: Type[M], value: Union[M, Dict[str, Any], None]) -> Optional[M]:
    """Accept either a schema instance or a plain dict for nested options."""
    if value is None:
        return None
    return model.model_validate(value)


def _status_code(error: BaseException) -> Optional[int]:
    return getattr(error, "status_code", None)


class AzureAISearchAdapter(VectorStoreAdapter):
    """Vector store adapter for Azure AI Search.

    Documents are stored as ``{id, <vector field>, metadata, content}`` where
    `metadata` is a JSON string and `content` mirrors ``metadata["content"]``.

    Attributes:
        endpoint: Search service URL
        api_version: Optional REST API version pinned on every client
        client_options: Extra keyword arguments for SDK clients (policies, retries)
    """

    supports_vector_retrieval: bool = False  # Vector fields are not returned by search
    where_compiler: ODataWhereCompiler = odata_where

    def __init__(
        self,
        endpoint: Optional[str] = None,
        credential: Optional[Credential] = None,
        api_version: Optional[str] = None,
        client_options: Optional[Dict[str, Any]] = None,
        logger: Optional[Logger] = None,
        **kwargs: Any,
    ) -> None:
        """Configure the adapter; no network call is made until first use.

        Args:
            endpoint: Service URL, defaults to AZURE_AI_SEARCH_ENDPOINT
            credential: API key string, AzureKeyCredential or TokenCredential,
                defaults to AZURE_AI_SEARCH_API_KEY
            api_version: REST API version, defaults to AZURE_AI_SEARCH_API_VERSION
            client_options: Extra keyword arguments merged into every SDK client
            logger: Optional custom logger
        """
        super().__init__(logger=logger, **kwargs)
        self.endpoint = endpoint or api_settings.AZURE_AI_SEARCH_ENDPOINT
        self._credential = credential or api_settings.AZURE_AI_SEARCH_API_KEY
        self.api_version = api_version or api_settings.AZURE_AI_SEARCH_API_VERSION
        self.client_options: Dict[str, Any] = dict(client_options or {})
        self._index_client: Optional[SearchIndexClient] = None
        self._search_clients: Dict[str, SearchClient] = {}
        self._dimensions: Dict[str, int] = {}

    @classmethod
    def from_connection_string(
        cls, connection_string: str, api_version: Optional[str] = None, **kwargs: Any
    ) -> "AzureAISearchAdapter":
        """Build an adapter from ``https://<service>.search.windows.net?api-key=<key>``.

        Raises:
            MissingConfigError: If the connection string carries no key
        """
        parsed = parse_connection_string(connection_string)
        if not parsed["api_key"]:
            raise MissingConfigError("API key not found in connection string", config_key="api-key")
        return cls(endpoint=parsed["endpoint"], credential=parsed["api_key"], api_version=api_version, **kwargs)

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    @property
    def credential(self) -> Any:
        """Return the SDK credential, wrapping plain API keys.

        Raises:
            MissingConfigError: If no credential is configured
        """
        if not self._credential:
            raise MissingConfigError(
                "AZURE_AI_SEARCH_API_KEY is not set. Please configure it in your .env file.",
                config_key="AZURE_AI_SEARCH_API_KEY",
                env_file=".env",
            )
        if isinstance(self._credential, str):
            return AzureKeyCredential(self._credential)
        return self._credential

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs = dict(self.client_options)
        if self.api_version:
            kwargs["api_version"] = self.api_version
        return kwargs

    @property
    def index_client(self) -> SearchIndexClient:
        """Lazily initialize and return the SearchIndexClient.

        Raises:
            MissingConfigError: If endpoint or credential is not configured
        """
        if self._index_client is None:
            if not self.endpoint:
                raise MissingConfigError(
                    "AZURE_AI_SEARCH_ENDPOINT is not set. Please configure it in your .env file.",
                    config_key="AZURE_AI_SEARCH_ENDPOINT",
                    env_file=".env",
                )
            self._index_client = SearchIndexClient(self.endpoint, self.credential, **self._client_kwargs())
            self.logger.message("Azure AI Search index client initialized.")
        return self._index_client

    def get_search_client(self, index_name: str) -> SearchClient:
        """Return the cached SearchClient for an index, creating it on first use."""
        client = self._search_clients.get(index_name)
        if client is None:
            if not self.endpoint:
                raise MissingConfigError(
                    "AZURE_AI_SEARCH_ENDPOINT is not set. Please configure it in your .env file.",
                    config_key="AZURE_AI_SEARCH_ENDPOINT",
                    env_file=".env",
                )
            client = SearchClient(self.endpoint, index_name, self.credential, **self._client_kwargs())
            self._search_clients[index_name] = client
        return client

    def _service_error(
        self, operation: str, error: BaseException, category: str = ErrorCategory.THIRD_PARTY, **details: Any
    ) -> VectorStoreError:
        self.logger.error(f"Azure AI Search {operation.lower().replace('_', ' ')} failed: {error}", exc_info=True)
        return VectorStoreError(
            f"Azure AI Search {operation.lower().replace('_', ' ')} failed: {error}",
            error_id=f"AZURE_AI_SEARCH_{operation}_FAILED",
            category=category,
            **details,
        )

    # ------------------------------------------------------------------
    # Schema introspection
    # ------------------------------------------------------------------

    @staticmethod
    def _field_dimensions(field: Any) -> Optional[int]:
        return getattr(field, "vector_search_dimensions", None) or getattr(field, "dimensions", None)

    def _find_vector_field(self, index: SearchIndex) -> Optional[SearchField]:
        """Return the first float vector field that declares dimensions."""
        for field in index.fields or []:
            if field.type == VECTOR_FIELD_TYPE and self._field_dimensions(field):
                return field
        return None

    def _get_vector_field_name(self, index_name: str) -> str:
        """Detect the vector field of an index.

        Falls back to DEFAULT_VECTOR_FIELD when no vector field is found or the
        index cannot be read.
        """
        try:
            field = self._find_vector_field(self.index_client.get_index(index_name))
        except Exception as e:
            self.logger.warning("Vector field detection failed for index=%s: %s", index_name, e)
            return DEFAULT_VECTOR_FIELD
        return field.name if field is not None else DEFAULT_VECTOR_FIELD

    @staticmethod
    def _metric_from_index(index: SearchIndex) -> str:
        algorithms = getattr(index.vector_search, "algorithms", None) or []
        if not algorithms:
            return VectorMetric.COSINE
        parameters = getattr(algorithms[0], "parameters", None)
        azure_metric = getattr(parameters, "metric", None)
        if azure_metric is None:
            return VectorMetric.COSINE
        azure_metric = str(getattr(azure_metric, "value", azure_metric))
        for name, value in VECTOR_METRIC_MAP.items():
            if value.lower() == azure_metric.lower():
                return name
        return VectorMetric.COSINE

    # ------------------------------------------------------------------
    # Index Management
    # ------------------------------------------------------------------

    def _build_fields(
        self, dimension: int, vector_field: str, additional_fields: Iterable[AdditionalField]
    ) -> List[SearchField]:
        fields = [
            SearchField(
                name="id",
                type=SearchFieldDataType.String,
                key=True,
                filterable=False,
                sortable=False,
                facetable=False,
                searchable=False,
            ),
            SearchField(
                name=vector_field,
                type=VECTOR_FIELD_TYPE,
                searchable=True,
                hidden=False,
                vector_search_dimensions=dimension,
                vector_search_profile_name=VECTOR_PROFILE_NAME,
            ),
            SearchField(
                name="metadata",
                type=SearchFieldDataType.String,
                searchable=False,
                filterable=True,
                sortable=False,
                facetable=False,
            ),
            SearchField(
                name="content",
                type=SearchFieldDataType.String,
                searchable=True,
                filterable=False,
                sortable=False,
                facetable=False,
            ),
        ]
        existing = {f.name for f in fields}
        for extra in additional_fields:
            if extra.name in existing:
                continue
            existing.add(extra.name)
            fields.append(
                SearchField(
                    name=extra.name,
                    type=extra.type,
                    searchable=extra.searchable,
                    filterable=extra.filterable,
                    hidden=not extra.retrievable,
                    sortable=extra.sortable,
                    facetable=extra.facetable,
                    key=extra.key,
                )
            )
        return fields

    def _build_semantic_search(self, config: SemanticConfig) -> SemanticSearch:
        prioritized = config.prioritized_fields
        return SemanticSearch(
            configurations=[
                SemanticConfiguration(
                    name=config.name or api_settings.AZURE_AI_SEARCH_SEMANTIC_CONFIG,
                    prioritized_fields=SemanticPrioritizedFields(
                        title_field=SemanticField(field_name=prioritized.title_field)
                        if prioritized.title_field
                        else None,
                        content_fields=[SemanticField(field_name=f) for f in prioritized.content_fields],
                        keywords_fields=[SemanticField(field_name=f) for f in prioritized.keywords_fields],
                    ),
                )
            ]
        )

    def create_index(
        self,
        index_name: str,
        dimension: int,
        metric: Optional[str] = None,
        vector_field: str = DEFAULT_VECTOR_FIELD,
        additional_fields: Optional[Sequence[Union[AdditionalField, Dict[str, Any]]]] = None,
        hnsw_parameters: Union[HnswConfig, Dict[str, Any], None] = None,
        semantic_config: Union[SemanticConfig, Dict[str, Any], None] = None,
        **kwargs: Any,
    ) -> None:
        """Create a vector search index.

        An index that already exists is left untouched.

        Args:
            index_name: Name of the index
            dimension: Vector dimension, a positive integer
            metric: 'cosine', 'euclidean' or 'dotproduct' (default from settings)
            vector_field: Name of the vector field
            additional_fields: Extra fields added to the default schema
            hnsw_parameters: HNSW `m`, `ef_construction`, `ef_search` overrides
            semantic_config: Semantic ranking configuration, omitted when None

        Raises:
            InvalidFieldError: If dimension is not a positive integer
            pydantic.ValidationError: If a field, HNSW or semantic option dict is malformed
            VectorStoreError: If the service rejects the index
        """
        if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
            raise InvalidFieldError(
                "Dimension must be a positive integer", field="dimension", value=dimension, index_name=index_name
            )
        metric = (metric or api_settings.VECTOR_METRIC or VectorMetric.COSINE).lower()
        if metric not in VECTOR_METRIC_MAP:
            raise InvalidFieldError(
                "Unsupported metric",
                field="metric",
                value=metric,
                expected=", ".join(sorted(VECTOR_METRIC_MAP)),
            )

        hnsw = _coerce(HnswConfig, hnsw_parameters) or HnswConfig()
        extras = [_coerce(AdditionalField, raw) for raw in additional_fields or []]
        semantic = _coerce(SemanticConfig, semantic_config)

        try:
            index = SearchIndex(
                name=index_name,
                fields=self._build_fields(dimension, vector_field, extras),
                vector_search=VectorSearch(
                    profiles=[
                        VectorSearchProfile(
                            name=VECTOR_PROFILE_NAME,
                            algorithm_configuration_name=VECTOR_ALGORITHM_NAME,
                        )
                    ],
                    algorithms=[
                        HnswAlgorithmConfiguration(
                            name=VECTOR_ALGORITHM_NAME,
                            parameters=HnswParameters(
                                metric=VECTOR_METRIC_MAP[metric],
                                m=hnsw.m,
                                ef_construction=hnsw.ef_construction,
                                ef_search=hnsw.ef_search,
                            ),
                        )
                    ],
                ),
            )
            if semantic is not None:
                index.semantic_search = self._build_semantic_search(semantic)

            self.logger.message(f"Creating Azure AI Search index '{index_name}'...")
            self.index_client.create_index(index)
            self._dimensions[index_name] = dimension
            self.logger.message(
                f"Azure AI Search index '{index_name}' created: dimension={dimension}, metric={metric}, "
                f"vector_field={vector_field}"
            )
        except AISearchVectorError:
            raise
        except Exception as e:
            if isinstance(e, ResourceExistsError) or _status_code(e) == 409 or "already exists" in str(e):
                self.logger.message(f"Azure AI Search index '{index_name}' already exists.")
                return
            raise self._service_error(
                "CREATE_INDEX", e, index_name=index_name, dimension=dimension, metric=metric
            ) from e

    def create_advanced_index(self, index_name: str, dimension: int, **kwargs: Any) -> None:
        """Alias of `create_index` accepting every extended option."""
        self.create_index(index_name, dimension, **kwargs)

    def list_indexes(self) -> List[str]:
        """Return the names of all indexes in the service."""
        try:
            return list(self.index_client.list_index_names())
        except AISearchVectorError:
            raise
        except Exception as e:
            raise self._service_error("LIST_INDEXES", e) from e

    def describe_index(self, index_name: str) -> IndexStats:
        """Return dimension, document count and metric of an index.

        Raises:
            VectorStoreError: If the index cannot be read or has no vector field
        """
        try:
            index = self.index_client.get_index(index_name)
            count = self.get_search_client(index_name).get_document_count()

            field = self._find_vector_field(index)
            if field is None:
                fallback = next((f for f in index.fields or [] if f.name == DEFAULT_VECTOR_FIELD), None)
                if fallback is None or not self._field_dimensions(fallback):
                    raise VectorStoreError(
                        "Vector field not found or missing dimensions",
                        error_id="AZURE_AI_SEARCH_DESCRIBE_INDEX_FAILED",
                        category=ErrorCategory.USER,
                        index_name=index_name,
                    )
                dimension = self._field_dimensions(fallback)
                metric = VectorMetric.COSINE
            else:
                dimension = self._field_dimensions(field)
                metric = self._metric_from_index(index)

            self._dimensions[index_name] = dimension
            return IndexStats(dimension=dimension, count=count, metric=metric)
        except AISearchVectorError:
            raise
        except Exception as e:
            raise self._service_error("DESCRIBE_INDEX", e, index_name=index_name) from e

    def delete_index(self, index_name: str) -> None:
        """Delete an index and all its documents."""
        try:
            self.index_client.delete_index(index_name)
        except AISearchVectorError:
            raise
        except Exception as e:
            raise self._service_error("DELETE_INDEX", e, index_name=index_name) from e
        self._search_clients.pop(index_name, None)
        self._dimensions.pop(index_name, None)
        self.logger.message(f"Azure AI Search index '{index_name}' deleted.")

    # ------------------------------------------------------------------
    # Vector Operations
    # ------------------------------------------------------------------

    def _index_dimension(self, index_name: str) -> int:
        """Known dimension of an index, read from the service when not cached."""
        if index_name not in self._dimensions:
            self.describe_index(index_name)
        return self._dimensions[index_name]

    @staticmethod
    def _validate_vector_dimensions(vectors: Sequence[Sequence[float]], dimension: int) -> None:
        """Reject any vector whose length differs from the index dimension."""
        for i, vector in enumerate(vectors):
            if vector is None or len(vector) != dimension:
                actual = None if vector is None else len(vector)
                raise DimensionMismatchError(
                    f"Vector at index {i} has invalid dimension {actual}. Expected {dimension} dimensions.",
                    position=i,
                    actual=actual,
                    expected=dimension,
                )

    def upsert(
        self,
        index_name: str,
        vectors: Sequence[Sequence[float]],
        metadata: Optional[Sequence[Optional[Dict[str, Any]]]] = None,
        ids: Optional[Sequence[str]] = None,
    ) -> List[str]:
        """Insert or replace vectors.

        Args:
            index_name: Target index
            vectors: Vectors to store, each matching the index dimension
            metadata: Per-vector metadata; ``metadata["content"]`` also fills `content`
            ids: Per-vector ids, generated when omitted

        Returns:
            Ids of the upserted vectors

        Raises:
            DimensionMismatchError: If any vector has the wrong length (nothing is uploaded)
            PartialUploadError: If some documents failed to upload
            VectorStoreError: If the service call fails
        """
        vectors = list(vectors)
        if ids and len(ids) != len(vectors):
            raise InvalidFieldError(
                "ids and vectors must have the same length", field="ids", ids=len(ids), vectors=len(vectors)
            )
        try:
            self._validate_vector_dimensions(vectors, self._index_dimension(index_name))
            vector_field = self._get_vector_field_name(index_name)

            vector_ids = normalize_ids(ids, vectors)
            metadatas = normalize_metadatas(metadata, len(vectors))
            documents = [
                {
                    "id": doc_id,
                    vector_field: list(vector),
                    "metadata": dump_metadata(meta),
                    "content": meta.get("content") or "",
                }
                for doc_id, vector, meta in zip(vector_ids, vectors, metadatas)
            ]

            client = self.get_search_client(index_name)
            results = []
            for batch in chunk_iter(documents, api_settings.AZURE_AI_SEARCH_UPLOAD_BATCH_SIZE):
                results.extend(client.upload_documents(documents=list(batch)))

            failures = [r for r in results if not r.succeeded]
            if failures:
                first = failures[0]
                raise PartialUploadError(
                    f"{len(failures)} of {len(results)} documents failed to upload",
                    error_id="AZURE_AI_SEARCH_UPSERT_PARTIAL_FAILURE",
                    index_name=index_name,
                    total_documents=len(results),
                    failed_count=len(failures),
                    first_failed_key=getattr(first, "key", None) or "unknown",
                    first_failed_error=getattr(first, "error_message", None) or "No error message",
                )

            self.logger.message(f"Upserted {len(documents)} documents into '{index_name}'.")
            return vector_ids
        except AISearchVectorError:
            raise
        except Exception as e:
            raise self._service_error("UPSERT", e, index_name=index_name, vector_count=len(vectors)) from e

    def query(
        self,
        index_name: str,
        query_vector: Sequence[float],
        top_k: int = 10,
        filter: Optional[FilterInput] = None,
        include_vector: bool = False,
        **kwargs: Any,
    ) -> List[QueryResult]:
        """Vector similarity search.

        `include_vector` is accepted for interface compatibility and ignored:
        Azure AI Search does not return vector fields.
        """
        return self.advanced_query(
            index_name=index_name,
            query_vector=query_vector,
            top_k=top_k,
            filter=filter,
            include_vector=include_vector,
            **kwargs,
        )

    def advanced_query(
        self,
        index_name: str,
        query_vector: Sequence[float],
        top_k: Optional[int] = None,
        filter: Optional[FilterInput] = None,
        include_vector: bool = False,
        use_semantic_search: bool = False,
        semantic_options: Union[SemanticOptions, Dict[str, Any], None] = None,
        exhaustive_search: bool = False,
        oversampling: Optional[float] = None,
        weight: float = 1.0,
        query_type: QueryType = "simple",
        text_vectorization: Union[TextVectorization, Dict[str, Any], None] = None,
        additional_vector_queries: Optional[Sequence[Union[AdditionalVectorQuery, Dict[str, Any]]]] = None,
        filter_mode: FilterMode = "preFilter",
    ) -> List[QueryResult]:
        """Vector search with the full set of Azure AI Search options.

        Args:
            index_name: Index to search
            query_vector: Primary query vector
            top_k: Maximum number of results (default VECTOR_SEARCH_LIMIT)
            filter: FilterExpression, dict or raw OData string
            include_vector: Ignored; vectors are never returned
            use_semantic_search: Enable semantic ranking
            semantic_options: Configuration name, semantic query, answers, captions, max wait
            exhaustive_search: Exact k-NN instead of HNSW
            oversampling: Oversampling factor for compressed vectors
            weight: Relative weight of the primary vector query
            query_type: 'simple', 'full' or 'semantic'
            text_vectorization: Text to vectorize server-side and search
            additional_vector_queries: Further vector queries for multi-vector search
            filter_mode: 'preFilter' or 'postFilter'

        Returns:
            QueryResult list in service order

        Raises:
            TypeError: If `filter` is not a FilterExpression, dict or str
            pydantic.ValidationError: If a filter dict or an options dict is malformed
            VectorStoreError: If the search fails
        """
        if top_k is None:
            top_k = api_settings.VECTOR_SEARCH_LIMIT
        # Caller input errors propagate unwrapped
        odata_filter = self.where_compiler.to_where(filter)
        text_query = _coerce(TextVectorization, text_vectorization)
        extra_queries = [_coerce(AdditionalVectorQuery, raw) for raw in additional_vector_queries or []]
        options = _coerce(SemanticOptions, semantic_options) or SemanticOptions()

        try:
            client = self.get_search_client(index_name)
            vector_field = self._get_vector_field_name(index_name)

            primary_kwargs: Dict[str, Any] = {
                "vector": list(query_vector),
                "k_nearest_neighbors": top_k,
                "fields": vector_field,
                "exhaustive": exhaustive_search,
                "weight": weight,
            }
            if oversampling:
                primary_kwargs["oversampling"] = oversampling
            vector_queries: List[Any] = [VectorizedQuery(**primary_kwargs)]

            if text_query is not None:
                vector_queries.append(
                    VectorizableTextQuery(
                        text=text_query.text,
                        k_nearest_neighbors=top_k,
                        fields=",".join(text_query.fields or [vector_field]),
                        exhaustive=exhaustive_search,
                        weight=weight,
                    )
                )

            for extra in extra_queries:
                vector_queries.append(
                    VectorizedQuery(
                        vector=extra.vector,
                        k_nearest_neighbors=extra.k_nearest_neighbors_count or top_k,
                        fields=",".join(extra.fields or [vector_field]),
                        weight=extra.weight or 1.0,
                        exhaustive=exhaustive_search,
                    )
                )

            search_kwargs: Dict[str, Any] = {
                "search_text": "*",
                "vector_queries": vector_queries,
                "vector_filter_mode": filter_mode,
                "filter": odata_filter,
                "top": top_k,
                "select": list(SELECT_FIELDS),
            }

            if use_semantic_search or query_type == "semantic":
                search_kwargs["query_type"] = "semantic"
                search_kwargs["semantic_configuration_name"] = (
                    options.configuration_name or api_settings.AZURE_AI_SEARCH_SEMANTIC_CONFIG
                )
                if options.semantic_query:
                    search_kwargs["semantic_query"] = options.semantic_query
                if options.answers:
                    search_kwargs.update(query_answer="extractive", query_answer_count=3, query_answer_threshold=0.7)
                if options.captions:
                    search_kwargs.update(query_caption="extractive", query_caption_highlight_enabled=True)
                if options.max_wait_time:
                    search_kwargs["semantic_max_wait_in_milliseconds"] = options.max_wait_time
            else:
                search_kwargs["query_type"] = "full" if query_type == "full" else "simple"

            self.logger.debug("Azure AI Search query index=%s top=%s filter=%s", index_name, top_k, odata_filter)
            results = [self._to_query_result(item) for item in client.search(**search_kwargs)]
            self.logger.message(f"Vector search returned {len(results)} results.")
            return [r for r in results if r is not None]
        except AISearchVectorError:
            raise
        except Exception as e:
            raise self._service_error("QUERY", e, index_name=index_name, top_k=top_k) from e

    @staticmethod
    def _to_query_result(item: Dict[str, Any]) -> Optional[QueryResult]:
        if not item or item.get("id") is None:
            return None
        metadata = load_metadata(item.get("metadata"))
        reranker_score = item.get("@search.reranker_score")
        if reranker_score:
            metadata["@search.rerankerScore"] = reranker_score
        captions = item.get("@search.captions")
        if captions:
            metadata["@search.captions"] = captions
        highlights = item.get("@search.highlights")
        if highlights:
            metadata["@search.highlights"] = highlights
        return QueryResult(
            id=item["id"],
            score=item.get("@search.score") or 0.0,
            metadata=metadata,
            document=item.get("content"),
        )

    def semantic_query(
        self,
        index_name: str,
        query_vector: Sequence[float],
        semantic_config: Optional[str] = None,
        semantic_query: Optional[str] = None,
        enable_answers: bool = False,
        enable_captions: bool = False,
        **kwargs: Any,
    ) -> List[QueryResult]:
        """Vector search with semantic ranking enabled."""
        return self.advanced_query(
            index_name=index_name,
            query_vector=query_vector,
            use_semantic_search=True,
            query_type="semantic",
            semantic_options=SemanticOptions(
                configuration_name=semantic_config,
                semantic_query=semantic_query,
                answers=enable_answers,
                captions=enable_captions,
            ),
            **kwargs,
        )

    def hybrid_query(
        self,
        index_name: str,
        query_vector: Sequence[float],
        text_query: str,
        vector_fields: Optional[List[str]] = None,
        **kwargs: Any,
    ) -> List[QueryResult]:
        """Vector search combined with a server-side vectorized text query."""
        return self.advanced_query(
            index_name=index_name,
            query_vector=query_vector,
            text_vectorization=TextVectorization(text=text_query, fields=vector_fields),
            **kwargs,
        )

    def multi_vector_query(
        self,
        index_name: str,
        query_vector: Sequence[float],
        vectors: Sequence[Union[AdditionalVectorQuery, Dict[str, Any]]],
        top_k: Optional[int] = None,
        **kwargs: Any,
    ) -> List[QueryResult]:
        """Search with several weighted vector queries at once."""
        extra = []
        for raw in vectors:
            item = _coerce(AdditionalVectorQuery, raw)
            extra.append(item.model_copy(update={"k_nearest_neighbors_count": top_k}))
        return self.advanced_query(
            index_name=index_name,
            query_vector=query_vector,
            top_k=top_k,
            additional_vector_queries=extra,
            **kwargs,
        )

    def exact_query(self, index_name: str, query_vector: Sequence[float], **kwargs: Any) -> List[QueryResult]:
        """Exhaustive k-NN search."""
        return self.advanced_query(index_name=index_name, query_vector=query_vector, exhaustive_search=True, **kwargs)

    def update_vector(
        self,
        index_name: str,
        id: str,
        vector: Optional[Sequence[float]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Update the vector and/or metadata of an existing document.

        Raises:
            MissingFieldError: If neither vector nor metadata is given
            DocumentNotFoundError: If no document has this id
            DimensionMismatchError: If the new vector has the wrong length
            VectorStoreError: If the service call fails
        """
        if vector is None and metadata is None:
            raise MissingFieldError(
                "No updates provided", field="vector or metadata", operation="update_vector", document_id=id
            )
        try:
            if vector is not None:
                self._validate_vector_dimensions([vector], self._index_dimension(index_name))

            client = self.get_search_client(index_name)
            vector_field = self._get_vector_field_name(index_name)
            try:
                existing = client.get_document(key=id)
            except ResourceNotFoundError as e:
                raise DocumentNotFoundError(
                    f"Document with ID {id} not found", document_id=id, index_name=index_name
                ) from e
            if not existing:
                raise DocumentNotFoundError(f"Document with ID {id} not found", document_id=id, index_name=index_name)

            updated: Dict[str, Any] = {
                "id": id,
                "metadata": dump_metadata(metadata) if metadata is not None else existing.get("metadata"),
                "content": (metadata or {}).get("content") or existing.get("content") or "",
            }
            new_vector = list(vector) if vector is not None else existing.get(vector_field)
            if new_vector:
                updated[vector_field] = new_vector

            client.merge_documents(documents=[updated])
            self.logger.message(f"Updated document with id '{id}'.")
        except AISearchVectorError:
            raise
        except Exception as e:
            raise self._service_error("UPDATE_VECTOR", e, index_name=index_name, id=id) from e

    def delete_vector(self, index_name: str, id: str) -> None:
        """Delete a vector by id; deleting a missing id is a no-op."""
        try:
            self.get_search_client(index_name).delete_documents(documents=[{"id": id}])
            self.logger.message(f"Deleted document with id '{id}'.")
        except AISearchVectorError:
            raise
        except Exception as e:
            if isinstance(e, ResourceNotFoundError) or _status_code(e) == 404:
                return
            raise self._service_error("DELETE_VECTOR", e, index_name=index_name, id=id) from e
