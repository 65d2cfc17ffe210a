"""Object-composition helpers: an event notifier mixin plus extend/bind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .events import ChannelTable, ErrorPolicy, EventNotifier, Notifier
from .exceptions import (
    ConfigValidationError,
    HandlerFailuresError,
    HandlerNotCallableError,
    InvalidEventNameError,
    OOHelpersError,
)
from .helpers import bind, extend

if TYPE_CHECKING:
    from .config import apply_config, load_config
    from .logging_utils import configure_logging

__version__ = "0.1.0"

__all__ = [
    "ChannelTable",
    "ConfigValidationError",
    "ErrorPolicy",
    "EventNotifier",
    "HandlerFailuresError",
    "HandlerNotCallableError",
    "InvalidEventNameError",
    "Notifier",
    "OOHelpersError",
    "__version__",
    "apply_config",
    "bind",
    "configure_logging",
    "extend",
    "load_config",
]


def __getattr__(name: str) -> Any:
    """Lazily import config and logging so pydantic/structlog load on demand."""
    if name in {"apply_config", "load_config"}:
        from .config import apply_config, load_config

        return {"apply_config": apply_config, "load_config": load_config}[name]
    if name == "configure_logging":
        from .logging_utils import configure_logging

        return configure_logging
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
