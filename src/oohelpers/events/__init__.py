"""Observer-pattern components: channel tables and the event notifier."""

from .channels import ChannelTable
from .notifier import ErrorPolicy, EventNotifier, Notifier, get_defaults, set_defaults

__all__ = [
    "ChannelTable",
    "ErrorPolicy",
    "EventNotifier",
    "Notifier",
    "get_defaults",
    "set_defaults",
]
