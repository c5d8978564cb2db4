"""Query DSL module.

Exports `FilterExpression` for building structured filters and `translate`
for compiling them into Azure AI Search OData filter strings.
"""

from .compilers.odata import translate
from .filter import CollectionPredicate, FilterExpression

__all__ = ("CollectionPredicate", "FilterExpression", "translate")
