"""Domain exception hierarchy for the oohelpers package."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class OOHelpersError(RuntimeError):
    """Base class for all errors raised by oohelpers itself."""


class InvalidEventNameError(OOHelpersError, ValueError):
    """Raised when an event name is not a non-empty string."""


class HandlerNotCallableError(OOHelpersError, TypeError):
    """Raised when a subscriber handler cannot be called."""


class HandlerFailuresError(OOHelpersError):
    """Raised after a collecting publish pass in which handlers failed."""

    def __init__(
        self,
        event_name: str,
        failures: list[tuple[Callable[..., Any], Exception]],
    ) -> None:
        self.event_name = event_name
        self.failures = failures
        super().__init__(
            f"{len(failures)} handler(s) failed while publishing {event_name!r}"
        )


class ConfigValidationError(OOHelpersError):
    """Raised when configuration cannot be validated safely."""
