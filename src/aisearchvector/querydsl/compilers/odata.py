"""Azure AI Search OData filter compiler.

Transforms `FilterExpression` trees into OData `$filter` strings.

Azure AI Search supports:
- Comparison: eq, ne, gt, ge, lt, le
- Logical: and, or, not
- Collection lambdas: any, all
- String functions: startswith, endswith
- Full-text: search.ismatch

Limitations:
- No filter-time substring `contains()`; `contains` compiles to
  `search.ismatch(value, 'field')`, which requires a searchable field
- Field paths are emitted unquoted and are not validated
- `raw` strings and `any`/`all` predicates are inserted verbatim
"""

from typing import Any, Callable, Dict, List, Optional

from ..filter import CollectionPredicate, FilterExpression
from .base import BaseWhere
from .utils import escape_field_name, format_value, normalize_filter_input

__all__ = (
    "ODataWhereCompiler",
    "odata_where",
    "translate",
)


class ODataWhereCompiler(BaseWhere):
    """Compile filter expressions into OData filter strings.

    Capabilities:
    - SUPPORTS_NESTED: True (slash-separated paths, e.g. ``Address/City``)
    - SUPPORTS_RAW: True (`raw` bypasses compilation)
    """

    # Capability flags
    SUPPORTS_NESTED = True
    SUPPORTS_RAW = True

    # Comparison keywords match the model's field names
    _COMPARISON_OPS = ("eq", "ne", "gt", "ge", "lt", "le")

    _STRING_FUNCTIONS = {
        "starts_with": "startswith",
        "ends_with": "endswith",
    }

    def __init__(self) -> None:
        self._renderers: List[Callable[[FilterExpression], List[str]]] = [
            lambda n: self._logical(n.and_, " and "),
            lambda n: self._logical(n.or_, " or "),
            lambda n: self._negation(n.not_),
            *(self._comparison_renderer(op) for op in self._COMPARISON_OPS),
            lambda n: self._full_text(n.contains),
            *(self._function_renderer(attr, fn) for attr, fn in self._STRING_FUNCTIONS.items()),
            lambda n: self._lambda(n.any_, "any"),
            lambda n: self._lambda(n.all_, "all"),
        ]

    def translate(self, where: Any) -> Optional[str]:
        """Convert a filter to an OData filter string.

        Args:
            where: FilterExpression, JSON-like dict, raw OData string or None

        A `raw` string on any node, nested or not, is emitted verbatim in
        place of that node.

        Returns:
            OData filter string, or None when there is nothing to filter on

        Raises:
            TypeError: If `where` is not a FilterExpression, dict, str or None
            pydantic.ValidationError: If a dict does not fit the FilterExpression
                model (e.g. a list operand under `eq`). Rendering itself never
                raises; validation happens when the model is built.
        """
        node = normalize_filter_input(where)
        if node is None:
            return None
        if node.raw:
            return node.raw
        rendered = self._node_to_expr(node).strip()
        return rendered or None

    def to_where(self, where: Any) -> Optional[str]:
        """Same as `translate`."""
        return self.translate(where)

    def to_expr(self, where: Any) -> str:
        """Rendered filter string, empty when there is nothing to filter on."""
        return self.translate(where) or ""

    def _node_to_expr(self, node: FilterExpression) -> str:
        """Recursively render a node; populated fields are joined with `and`."""
        if node.raw:
            return node.raw
        conditions: List[str] = []
        for render in self._renderers:
            conditions.extend(render(node))
        return " and ".join(conditions)

    def _logical(self, children: Optional[tuple], connector: str) -> List[str]:
        if children is None:
            return []
        parts = [p for p in (self._node_to_expr(child) for child in children) if p]
        if not parts:
            return []
        return ["(" + connector.join(parts) + ")"]

    def _negation(self, child: Optional[FilterExpression]) -> List[str]:
        if child is None:
            return []
        inner = self._node_to_expr(child)
        return [f"not ({inner})"] if inner else []

    def _comparison_renderer(self, op: str) -> Callable[[FilterExpression], List[str]]:
        def render(node: FilterExpression) -> List[str]:
            return self._comparison(getattr(node, op), op)

        return render

    def _comparison(self, mapping: Optional[Dict[str, Any]], op: str) -> List[str]:
        if not mapping:
            return []
        return [f"{escape_field_name(field)} {op} {format_value(val)}" for field, val in mapping.items()]

    def _function_renderer(self, attr: str, function: str) -> Callable[[FilterExpression], List[str]]:
        def render(node: FilterExpression) -> List[str]:
            mapping = getattr(node, attr)
            if not mapping:
                return []
            return [f"{function}({escape_field_name(field)}, {format_value(val)})" for field, val in mapping.items()]

        return render

    def _full_text(self, mapping: Optional[Dict[str, str]]) -> List[str]:
        # search.ismatch takes the field list as a quoted string argument
        if not mapping:
            return []
        return [f"search.ismatch({format_value(val)}, '{field}')" for field, val in mapping.items()]

    def _lambda(self, quantifier: Optional[CollectionPredicate], kind: str) -> List[str]:
        if quantifier is None:
            return []
        return [f"{quantifier.collection}/{kind}({quantifier.predicate})"]


odata_where = ODataWhereCompiler()


def translate(where: Any = None) -> Optional[str]:
    """Translate a filter into an OData filter string using the shared compiler."""
    return odata_where.translate(where)
