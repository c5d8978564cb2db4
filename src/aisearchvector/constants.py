"""
Vector metric and index layout constants for the Azure AI Search adapter.
"""


class VectorMetric:
    COSINE = "cosine"
    EUCLIDEAN = "euclidean"
    DOT_PRODUCT = "dotproduct"


# Library metric name -> Azure AI Search HNSW similarity function
VECTOR_METRIC_MAP = {
    "cosine": "cosine",
    "euclidean": "euclidean",
    "dotproduct": "dotProduct",
}

# Azure field type for float32 vector collections
VECTOR_FIELD_TYPE = "Collection(Edm.Single)"

# Used when an index has no detectable vector field
DEFAULT_VECTOR_FIELD = "vector"

VECTOR_PROFILE_NAME = "vector-profile"
VECTOR_ALGORITHM_NAME = "vector-algorithm"

HNSW_DEFAULTS = {"m": 4, "ef_construction": 400, "ef_search": 500}

# Fields projected back from every search
SELECT_FIELDS = ["id", "metadata", "content"]
