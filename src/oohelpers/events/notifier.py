"""Event notifier capability for arbitrary objects.

Usage:
    class Counter(Notifier):
        def __init__(self):
            self.value = 0

    def on_changed(counter, value):
        counter.value = value

    counter = Counter()
    counter.subscribe("changed", on_changed).publish("changed", 42)
    assert counter.value == 42

Objects that cannot take the mixin can hold an ``EventNotifier`` instead:

    events = EventNotifier(subject)
    events.subscribe("changed", on_changed)
    events.publish("changed", 42)

Handlers are called as ``handler(subject, *args, **kwargs)``.
"""

from __future__ import annotations

import copy
from enum import Enum
import logging
from typing import Any, ClassVar

from ..exceptions import (
    HandlerFailuresError,
    HandlerNotCallableError,
    InvalidEventNameError,
)
from .channels import ChannelTable, Handler

LOGGER = logging.getLogger(__name__)


class ErrorPolicy(str, Enum):
    """What a publish pass does when a handler raises."""

    PROPAGATE = "propagate"
    COLLECT = "collect"


# Instance attribute holding a Notifier subject's EventNotifier.
NOTIFIER_ATTRIBUTE = "_notifier"

_default_error_policy = ErrorPolicy.PROPAGATE
_default_log_publish = False


def set_defaults(
    error_policy: ErrorPolicy | str | None = None,
    log_publish: bool | None = None,
) -> None:
    """Set process-wide defaults for notifiers that do not override them."""
    global _default_error_policy, _default_log_publish
    if error_policy is not None:
        _default_error_policy = ErrorPolicy(error_policy)
    if log_publish is not None:
        _default_log_publish = bool(log_publish)


def get_defaults() -> tuple[ErrorPolicy, bool]:
    """Return the current ``(error_policy, log_publish)`` defaults."""
    return _default_error_policy, _default_log_publish


def _validate_event_name(event_name: Any) -> str:
    if not isinstance(event_name, str):
        raise InvalidEventNameError(
            f"Event name must be a string, got {type(event_name).__name__}."
        )
    if not event_name.strip():
        raise InvalidEventNameError("Event name must not be empty.")
    return event_name


class EventNotifier:
    """Subscribe, unsubscribe and publish named events on behalf of a subject.

    The channel table is created on first subscription and discarded again
    by a bare ``unsubscribe()``. Every operation returns the notifier so
    calls can be chained.
    """

    def __init__(
        self,
        subject: Any,
        error_policy: ErrorPolicy | str | None = None,
        log_publish: bool | None = None,
    ) -> None:
        self.subject = subject
        self._error_policy = None if error_policy is None else ErrorPolicy(error_policy)
        self._log_publish = log_publish
        self._table: ChannelTable | None = None

    @property
    def error_policy(self) -> ErrorPolicy:
        if self._error_policy is not None:
            return self._error_policy
        return _default_error_policy

    @property
    def log_publish(self) -> bool:
        if self._log_publish is not None:
            return self._log_publish
        return _default_log_publish

    @property
    def table(self) -> ChannelTable | None:
        """The live channel table, or ``None`` before any subscription."""
        return self._table

    def subscribe(self, event_name: str, handler: Handler) -> EventNotifier:
        """Register ``handler`` for future publishes of ``event_name``.

        Args:
            event_name: Non-empty event name (e.g. "changed")
            handler: Callable invoked as ``handler(subject, *args, **kwargs)``
        """
        _validate_event_name(event_name)
        if not callable(handler):
            raise HandlerNotCallableError(
                f"Handler for {event_name!r} must be callable, "
                f"got {type(handler).__name__}."
            )
        if self._table is None:
            self._table = ChannelTable()
        self._table.add(event_name, handler)
        return self

    def unsubscribe(
        self, event_name: str | None = None, handler: Handler | None = None
    ) -> EventNotifier:
        """Remove subscriptions.

        With no arguments every channel is dropped. With only an event name
        that channel is dropped. With a handler, its first registration is
        removed from the named channel, or from every channel when no name
        is given. Anything missing is ignored.
        """
        if self._table is None:
            return self
        if event_name is None and handler is None:
            self._table = None
            LOGGER.debug("notifier.cleared", extra={"event": "notifier.cleared"})
        elif handler is None:
            self._table.discard(event_name)
        elif event_name is None:
            self._table.remove_everywhere(handler)
        else:
            self._table.remove(event_name, handler)
        return self

    def publish(self, event_name: str, *args: Any, **kwargs: Any) -> EventNotifier:
        """Call every handler registered for ``event_name`` in order.

        Handlers subscribed or removed while the pass is running only take
        effect from the next publish.
        """
        handlers = self._table.handlers(event_name) if self._table is not None else ()
        if self.log_publish:
            LOGGER.debug(
                "notifier.publish",
                extra={
                    "event": "notifier.publish",
                    "event_name": event_name,
                    "handler_count": len(handlers),
                },
            )
        if not handlers:
            return self

        if self.error_policy is ErrorPolicy.PROPAGATE:
            for handler in handlers:
                handler(self.subject, *args, **kwargs)
            return self

        failures: list[tuple[Handler, Exception]] = []
        for handler in handlers:
            try:
                handler(self.subject, *args, **kwargs)
            except Exception as exc:
                LOGGER.warning(
                    "notifier.handler.failed",
                    extra={
                        "event": "notifier.handler.failed",
                        "event_name": event_name,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    },
                )
                failures.append((handler, exc))
        if failures:
            raise HandlerFailuresError(event_name, failures)
        return self

    def has_subscribers(self, event_name: str | None = None) -> bool:
        """Return True when the event (or any event) has handlers."""
        if self._table is None:
            return False
        if event_name is None:
            return len(self._table) > 0
        return event_name in self._table

    def subscribers(self, event_name: str) -> list[Handler]:
        """Return a copy of the handlers registered for ``event_name``."""
        if self._table is None:
            return []
        return list(self._table.handlers(event_name))

    def event_names(self) -> list[str]:
        if self._table is None:
            return []
        return self._table.names()


class Notifier:
    """Mixin adding ``subscribe``/``unsubscribe``/``publish`` to a class.

    Needs no ``__init__`` cooperation: the backing ``EventNotifier`` is
    attached on first subscription. Set ``notifier_error_policy`` on a
    subclass to override the process-wide error policy. Copies of a subject
    start without subscriptions.
    """

    notifier_error_policy: ClassVar[ErrorPolicy | None] = None

    def _event_notifier(self, create: bool = False) -> EventNotifier | None:
        notifier = self.__dict__.get(NOTIFIER_ATTRIBUTE)
        if notifier is None and create:
            notifier = EventNotifier(self, error_policy=self.notifier_error_policy)
            self.__dict__[NOTIFIER_ATTRIBUTE] = notifier
        return notifier

    def _state_without_notifier(self) -> dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if k != NOTIFIER_ATTRIBUTE}

    def __copy__(self) -> Any:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self._state_without_notifier())
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        clone.__dict__.update(copy.deepcopy(self._state_without_notifier(), memo))
        return clone

    def subscribe(self, event_name: str, handler: Handler) -> Any:
        """Register a handler and return self."""
        self._event_notifier(create=True).subscribe(event_name, handler)
        return self

    def unsubscribe(
        self, event_name: str | None = None, handler: Handler | None = None
    ) -> Any:
        """Remove subscriptions (see ``EventNotifier.unsubscribe``) and return self."""
        notifier = self._event_notifier()
        if notifier is not None:
            notifier.unsubscribe(event_name, handler)
        return self

    def publish(self, event_name: str, *args: Any, **kwargs: Any) -> Any:
        """Call the event's handlers with self as receiver and return self."""
        notifier = self._event_notifier()
        if notifier is not None:
            notifier.publish(event_name, *args, **kwargs)
        return self

    def has_subscribers(self, event_name: str | None = None) -> bool:
        notifier = self._event_notifier()
        return notifier is not None and notifier.has_subscribers(event_name)

    def subscribers(self, event_name: str) -> list[Handler]:
        notifier = self._event_notifier()
        return [] if notifier is None else notifier.subscribers(event_name)

    def event_names(self) -> list[str]:
        notifier = self._event_notifier()
        return [] if notifier is None else notifier.event_names()
