"""Base compiler interface.

Defines the abstract contract filter compilers follow.
"""

from abc import ABC, abstractmethod
from typing import Any

__all__ = ("BaseWhere",)


class BaseWhere(ABC):
    """Abstract base class for filter compilers.

    Subclasses implement `to_where` and `to_expr` to produce the
    service-native filter.
    """

    @abstractmethod
    def to_where(self, where: Any) -> Any:
        """Convert a filter expression into the native filter representation.

        Returns None when the expression renders to nothing.
        """
        raise NotImplementedError

    @abstractmethod
    def to_expr(self, where: Any) -> str:
        """Convert a filter expression into a string for debugging/logging."""
        raise NotImplementedError
