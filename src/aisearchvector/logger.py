"""Logging for aisearchvector.

Every logger lives under the ``aisearchvector`` namespace, so applications can
tune the library with ``logging.getLogger("aisearchvector")``. The namespace
gets one stream handler at LOG_LEVEL the first time a logger is created;
the root logger is left alone.
"""

import logging
from typing import Optional

from aisearchvector.settings import settings as api_settings

LOGGER_NAMESPACE = "aisearchvector"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_configured = False


def resolve_level(name: Optional[str]) -> int:
    """Map a level name to its numeric value; unknown or empty names give INFO."""
    return _LEVELS.get((name or "").upper(), logging.INFO)


def setup_global_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the ``aisearchvector`` logger once.

    Args:
        level: Level name (e.g. "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(resolve_level(level))
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a Logger inside the ``aisearchvector`` namespace.

    ``get_logger("AzureAISearchAdapter")`` logs as
    ``aisearchvector.AzureAISearchAdapter``; names already in the namespace
    are kept as they are.
    """
    if not name or name == LOGGER_NAMESPACE:
        return Logger(LOGGER_NAMESPACE)
    if name.startswith(LOGGER_NAMESPACE + "."):
        return Logger(name)
    return Logger(f"{LOGGER_NAMESPACE}.{name}")


class Logger:
    """Adapter-facing wrapper over a standard logger.

    `message()` is the lifecycle channel (client created, index created,
    documents uploaded): it logs at LOG_LEVEL, so lifecycle lines stay visible
    at whatever level the library is configured for.
    """

    def __init__(self, name: str = LOGGER_NAMESPACE) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        self._logger.log(resolve_level(api_settings.LOG_LEVEL), msg, *args, **kwargs)
