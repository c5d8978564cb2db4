"""Utility functions for aisearchvector.

Shared helpers used by the search adapter.
"""

import hashlib
import json
import uuid
from typing import Any, Dict, Iterator, List, Optional, Sequence
from urllib.parse import parse_qs, urlsplit

from .settings import settings


def chunk_iter(seq: Sequence[Any], size: int) -> Iterator[Sequence[Any]]:
    """Yield successive chunks from a sequence."""
    if size <= 0:
        yield seq
        return
    for i in range(0, len(seq), size):
        yield seq[i : i + size]


# ===========================================================================
# Primary key generation
# ===========================================================================


def _hash_vector(vector: Sequence[float]) -> str:
    vec_bytes = ("|".join(f"{x:.8f}" for x in vector)).encode("utf-8")
    return hashlib.sha256(vec_bytes).hexdigest()


def generate_pk(vector: Optional[Sequence[float]] = None) -> str:
    """Generate a document key based on PRIMARY_KEY_MODE setting.

    Modes:
        - uuid: Random UUID (default)
        - hash_vector: SHA256 hash of vector
        - auto: Hash vector if available, else UUID
    """
    mode = (getattr(settings, "PRIMARY_KEY_MODE", "uuid") or "uuid").lower()
    if mode in ("hash_vector", "auto") and vector:
        return _hash_vector(vector)
    return str(uuid.uuid4())


# ===========================================================================
# Input normalization helpers
# ===========================================================================


def normalize_metadatas(metadatas: Optional[Sequence[Optional[Dict[str, Any]]]], count: int) -> List[Dict[str, Any]]:
    """Pad or fill metadata input to a list of dicts matching vector count."""
    items = list(metadatas or [])
    result = [m or {} for m in items[:count]]
    result.extend({} for _ in range(count - len(result)))
    return result


def normalize_ids(ids: Optional[Sequence[str]], vectors: Sequence[Sequence[float]]) -> List[str]:
    """Return given ids, or generate one per vector when none were supplied."""
    if ids:
        return [str(i) for i in ids]
    return [generate_pk(v) for v in vectors]


def dump_metadata(metadata: Optional[Dict[str, Any]]) -> str:
    """Serialize metadata for the string `metadata` field of an index."""
    return json.dumps(metadata or {}, default=str)


def load_metadata(raw: Any) -> Dict[str, Any]:
    """Parse the stored `metadata` field back into a dict."""
    if not raw:
        return {}
    if isinstance(raw, dict):
        return dict(raw)
    return json.loads(raw)


def parse_connection_string(connection_string: str) -> Dict[str, Optional[str]]:
    """Split ``https://svc.search.windows.net?api-key=...`` into endpoint and key.

    The key is read from the ``api-key`` or ``key`` query parameter.
    """
    parts = urlsplit(connection_string)
    query = parse_qs(parts.query)
    api_key = (query.get("api-key") or query.get("key") or [None])[0]
    return {"endpoint": f"{parts.scheme}://{parts.netloc}", "api_key": api_key}
