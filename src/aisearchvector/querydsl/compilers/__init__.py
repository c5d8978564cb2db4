from .base import BaseWhere
from .odata import ODataWhereCompiler, odata_where, translate

__all__ = (
    "BaseWhere",
    "ODataWhereCompiler",
    "odata_where",
    "translate",
)
