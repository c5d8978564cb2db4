"""Type aliases for aisearchvector package.

This module provides reusable type definitions to ensure consistency
across the codebase and improve code readability.
"""

from typing import Any, Dict, List, Union

from .querydsl.filter import FilterExpression

Vector = List[float]
Metadata = Dict[str, Any]

# Filter input - structured expression, plain dict, or raw OData string
FilterInput = Union[FilterExpression, Dict[str, Any], str]

DocId = str
