"""Per-subject table of named event channels."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

LOGGER = logging.getLogger(__name__)

Handler = Callable[..., Any]


class ChannelTable:
    """Ordered handler lists keyed by event name.

    Handlers keep registration order and duplicates are allowed. A channel
    whose last handler goes away is dropped from the table.
    """

    def __init__(self) -> None:
        self._channels: dict[str, list[Handler]] = {}

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._channels

    def add(self, event_name: str, handler: Handler) -> None:
        """Append a handler to the end of a channel, creating it if needed."""
        if event_name not in self._channels:
            self._channels[event_name] = []
        self._channels[event_name].append(handler)
        LOGGER.debug(
            "channel.subscribed",
            extra={
                "event": "channel.subscribed",
                "event_name": event_name,
                "handler_count": len(self._channels[event_name]),
            },
        )

    def remove(self, event_name: str, handler: Handler) -> bool:
        """Remove the first occurrence of ``handler`` from a channel.

        Returns True when something was removed. Missing channels and
        handlers are ignored.
        """
        handlers = self._channels.get(event_name)
        if handlers is None:
            return False
        try:
            handlers.remove(handler)
        except ValueError:
            return False
        if not handlers:
            del self._channels[event_name]
        LOGGER.debug(
            "channel.unsubscribed",
            extra={"event": "channel.unsubscribed", "event_name": event_name},
        )
        return True

    def remove_everywhere(self, handler: Handler) -> int:
        """Remove the first occurrence of ``handler`` from every channel."""
        return sum(1 for name in list(self._channels) if self.remove(name, handler))

    def discard(self, event_name: str) -> None:
        """Drop a whole channel if present."""
        if self._channels.pop(event_name, None) is not None:
            LOGGER.debug(
                "channel.discarded",
                extra={"event": "channel.discarded", "event_name": event_name},
            )

    def handlers(self, event_name: str) -> tuple[Handler, ...]:
        """Return a snapshot of a channel's handlers in registration order."""
        return tuple(self._channels.get(event_name, ()))

    def names(self) -> list[str]:
        """Return event names that currently have handlers."""
        return list(self._channels)
