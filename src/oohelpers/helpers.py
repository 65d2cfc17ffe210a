"""Small object-composition helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
import functools
from typing import Any, TypeVar

from .events.notifier import NOTIFIER_ATTRIBUTE

T = TypeVar("T")


def _slot_names(obj: Any) -> list[str]:
    names: list[str] = []
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _own_attributes(guest: Any) -> dict[str, Any]:
    if isinstance(guest, Mapping):
        return dict(guest)
    if isinstance(guest, type):
        # Class bodies carry dunders such as __module__ and __dict__.
        return {
            key: value
            for key, value in vars(guest).items()
            if not (key.startswith("__") and key.endswith("__"))
        }
    attributes = {
        name: getattr(guest, name) for name in _slot_names(guest) if hasattr(guest, name)
    }
    attributes.update(getattr(guest, "__dict__", {}))
    # A subject's event subscriptions stay with the subject.
    attributes.pop(NOTIFIER_ATTRIBUTE, None)
    return attributes


def extend(host: T, guest: Any) -> T:
    """Copy the guest's own attributes onto the host and return the host.

    Mapping guests contribute their items; other objects contribute their
    ``__slots__`` values and instance ``__dict__`` (attributes inherited from
    the class are not copied, nor is a subject's event notifier). Classes
    contribute their own non-dunder class attributes, which is how a plain
    "module" class of methods gets mixed into another class.
    Existing host values are overwritten.
    """
    attributes = _own_attributes(guest)
    if isinstance(host, MutableMapping):
        host.update(attributes)
    else:
        for key, value in attributes.items():
            setattr(host, key, value)
    return host


def bind(context: Any, fn: Callable[..., T]) -> Callable[..., T]:
    """Return a callable that always runs ``fn`` with ``context`` as receiver.

    Example:
        speak = bind(obj, lambda self: self.name)
        speak()  # => obj.name
    """

    @functools.wraps(fn)
    def bound(*args: Any, **kwargs: Any) -> T:
        return fn(context, *args, **kwargs)

    return bound
