"""
This __init__.py file makes aisearchvector a Python package and exposes
the Azure AI Search adapter, the filter model and the translator.
"""

from .abc import VectorStoreAdapter
from .dbs.aisearch import AzureAISearchAdapter
from .querydsl import CollectionPredicate, FilterExpression, translate
from .schema import IndexStats, QueryResult

__version__ = "0.1.0"

__all__ = [
    "AzureAISearchAdapter",
    "VectorStoreAdapter",
    "FilterExpression",
    "CollectionPredicate",
    "translate",
    "IndexStats",
    "QueryResult",
]
