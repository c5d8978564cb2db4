"""Abstract interface for vector store adapters.

Concrete adapters translate these calls into a specific search service's
SDK calls and reshape the responses into the shared schemas.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from .logger import Logger, get_logger
from .schema import IndexStats, QueryResult
from .types import DocId, FilterInput, Metadata, Vector


class VectorStoreAdapter(ABC):
    """Uniform vector-store surface.

    Attributes:
        logger: Logger used for lifecycle and failure messages
        supports_vector_retrieval: Whether query results can include stored vectors
    """

    supports_vector_retrieval: bool = True

    def __init__(self, logger: Optional[Logger] = None, **kwargs: Any) -> None:
        self.logger = logger if isinstance(logger, Logger) else get_logger(self.__class__.__name__)

    # ------------------------------------------------------------------
    # Index Management
    # ------------------------------------------------------------------

    @abstractmethod
    def create_index(self, index_name: str, dimension: int, metric: str = "cosine", **kwargs: Any) -> None:
        """Create an index; an already existing index is not an error."""
        raise NotImplementedError

    @abstractmethod
    def list_indexes(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def describe_index(self, index_name: str) -> IndexStats:
        raise NotImplementedError

    @abstractmethod
    def delete_index(self, index_name: str) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Vector Operations
    # ------------------------------------------------------------------

    @abstractmethod
    def upsert(
        self,
        index_name: str,
        vectors: Sequence[Vector],
        metadata: Optional[Sequence[Optional[Metadata]]] = None,
        ids: Optional[Sequence[DocId]] = None,
    ) -> List[DocId]:
        """Insert or replace vectors, returning their ids."""
        raise NotImplementedError

    @abstractmethod
    def query(
        self,
        index_name: str,
        query_vector: Vector,
        top_k: int = 10,
        filter: Optional[FilterInput] = None,
        include_vector: bool = False,
        **kwargs: Any,
    ) -> List[QueryResult]:
        """Return the nearest vectors ordered by score."""
        raise NotImplementedError

    @abstractmethod
    def update_vector(
        self,
        index_name: str,
        id: DocId,
        vector: Optional[Vector] = None,
        metadata: Optional[Metadata] = None,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_vector(self, index_name: str, id: DocId) -> None:
        """Delete a vector by id; a missing id is not an error."""
        raise NotImplementedError
