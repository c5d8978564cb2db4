"""Custom exceptions for the aisearchvector library.

This module defines all custom exceptions used throughout the library for
consistent error handling and clear error messaging.
"""

from typing import Any, Dict, Optional


# Base exception
class AISearchVectorError(Exception):
    """Base exception for all aisearchvector errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., index_name, document_id, dimension)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class ErrorCategory:
    USER = "USER"
    THIRD_PARTY = "THIRD_PARTY"


# Document operation exceptions
class DocumentNotFoundError(AISearchVectorError):
    """Raised when a document is not found by ID.

    Example:
        >>> raise DocumentNotFoundError("Document not found", document_id="doc123")
    """


# Validation exceptions
class ValidationError(AISearchVectorError):
    """Raised when request validation fails.

    Example:
        >>> raise ValidationError("Invalid request", field="vectors")
    """


class MissingFieldError(ValidationError):
    """Raised when a required field is missing.

    Example:
        >>> raise MissingFieldError("No updates provided", field="vector or metadata", operation="update_vector")
    """


class InvalidFieldError(ValidationError):
    """Raised when a field has an invalid value or type.

    Example:
        >>> raise InvalidFieldError("Dimension must be a positive integer", field="dimension", value=-1)
    """


class DimensionMismatchError(ValidationError):
    """Raised when a vector's length differs from the index dimension.

    Example:
        >>> raise DimensionMismatchError("Invalid vector dimension", position=0, actual=3, expected=1536)
    """


# Configuration exceptions
class ConfigurationError(AISearchVectorError):
    """Raised when configuration is invalid or missing."""


class MissingConfigError(ConfigurationError):
    """Raised when required configuration values are not set.

    Example:
        >>> raise MissingConfigError("Configuration not set", config_key="AZURE_AI_SEARCH_ENDPOINT")
    """


# Service exceptions
class VectorStoreError(AISearchVectorError):
    """Raised when a call to the search service fails.

    Carries the operation identifier and category alongside the offending
    parameters. The underlying exception is chained as ``__cause__``.

    Example:
        >>> raise VectorStoreError(
        ...     "Query failed",
        ...     error_id="AZURE_AI_SEARCH_QUERY_FAILED",
        ...     category=ErrorCategory.THIRD_PARTY,
        ...     index_name="products",
        ... )
    """

    def __init__(
        self,
        message: str = "",
        error_id: str = "AZURE_AI_SEARCH_ERROR",
        category: str = ErrorCategory.THIRD_PARTY,
        **kwargs: Any,
    ) -> None:
        self.error_id = error_id
        self.category = category
        super().__init__(message, **kwargs)

    def _format_message(self) -> str:
        return f"[{self.error_id}] {super()._format_message()}"

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class PartialUploadError(VectorStoreError):
    """Raised when some documents of an upload batch fail.

    Documents that succeeded stay committed.

    Example:
        >>> raise PartialUploadError(
        ...     "2 of 10 documents failed to upload",
        ...     error_id="AZURE_AI_SEARCH_UPSERT_PARTIAL_FAILURE",
        ...     failed_count=2,
        ...     first_failed_key="doc3",
        ... )
    """
