"""Structured filter expressions for Azure AI Search.

A `FilterExpression` node holds one or more populated fields. Logical
fields (`and`, `or`, `not`) nest child expressions, leaf fields map field
names to operands, and `raw` carries an already-formatted OData string.

Typical usage:

- Build filters: `FilterExpression(eq={"category": "books"})`
- From JSON-like dicts: `FilterExpression.model_validate({"and": [...]})`
- Compose: `FilterExpression(eq={...}) & FilterExpression(gt={"price": 10})`
- Negate: `~FilterExpression(eq={"in_stock": False})`
- Compile: `translate(expr)` from `aisearchvector.querydsl`

Several populated fields on one node are the conjunction of those fields;
`populated_fields()` lists them in the order they are rendered.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

__all__ = (
    "CollectionPredicate",
    "FilterExpression",
    "FIELD_ORDER",
)

Scalar = Union[bool, int, float, datetime, date, str, None]

# (attribute, key) pairs in rendering order
FIELD_ORDER: Tuple[Tuple[str, str], ...] = (
    ("and_", "and"),
    ("or_", "or"),
    ("not_", "not"),
    ("eq", "eq"),
    ("ne", "ne"),
    ("gt", "gt"),
    ("ge", "ge"),
    ("lt", "lt"),
    ("le", "le"),
    ("contains", "contains"),
    ("starts_with", "startsWith"),
    ("ends_with", "endsWith"),
    ("any_", "any"),
    ("all_", "all"),
)


def _alias(key: str, attr: str) -> Dict[str, Any]:
    return {"validation_alias": AliasChoices(key, attr), "serialization_alias": key}


class CollectionPredicate(BaseModel):
    """Lambda predicate over a collection field, e.g. ``stores/any(s: s/name eq 'X')``.

    `predicate` is inserted verbatim and must already reference the lambda
    variable it declares.
    """

    model_config = ConfigDict(frozen=True)

    collection: str = Field(validation_alias=AliasChoices("collection", "collectionField"))
    predicate: str


class FilterExpression(BaseModel):
    """Immutable filter node.

    When `raw` is set no other field is consulted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    raw: Optional[str] = Field(None, validation_alias=AliasChoices("raw", "$filter"), serialization_alias="raw")

    and_: Optional[Tuple[FilterExpression, ...]] = Field(None, **_alias("and", "and_"))
    or_: Optional[Tuple[FilterExpression, ...]] = Field(None, **_alias("or", "or_"))
    not_: Optional[FilterExpression] = Field(None, **_alias("not", "not_"))

    eq: Optional[Dict[str, Scalar]] = None
    ne: Optional[Dict[str, Scalar]] = None
    gt: Optional[Dict[str, Scalar]] = None
    ge: Optional[Dict[str, Scalar]] = None
    lt: Optional[Dict[str, Scalar]] = None
    le: Optional[Dict[str, Scalar]] = None

    contains: Optional[Dict[str, str]] = None
    starts_with: Optional[Dict[str, str]] = Field(None, **_alias("startsWith", "starts_with"))
    ends_with: Optional[Dict[str, str]] = Field(None, **_alias("endsWith", "ends_with"))

    any_: Optional[CollectionPredicate] = Field(None, **_alias("any", "any_"))
    all_: Optional[CollectionPredicate] = Field(None, **_alias("all", "all_"))

    @classmethod
    def from_raw(cls, text: str) -> FilterExpression:
        """Wrap an already-formatted OData filter string."""
        return cls(raw=text)

    def populated_fields(self) -> List[str]:
        """Return keys of populated fields in rendering order (excluding `raw`)."""
        return [key for attr, key in FIELD_ORDER if getattr(self, attr) is not None]

    def is_empty(self) -> bool:
        return self.raw is None and not self.populated_fields()

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-like dict form using the public keys."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def __and__(self, other: FilterExpression) -> FilterExpression:
        """Return a new node representing logical AND of two nodes."""
        return FilterExpression(and_=(self, other))

    def __or__(self, other: FilterExpression) -> FilterExpression:
        """Return a new node representing logical OR of two nodes."""
        return FilterExpression(or_=(self, other))

    def __invert__(self) -> FilterExpression:
        """Return a node negating this one."""
        return FilterExpression(not_=self)

    def __str__(self) -> str:
        return str(self.to_dict())

    def __repr__(self) -> str:
        return f"<FilterExpression: {self.to_dict()}>"


FilterExpression.model_rebuild()
