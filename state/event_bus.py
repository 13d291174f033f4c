"""Simple publish/subscribe event bus used by the runtime and its plugins."""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List, Union
from weakref import WeakMethod

EventCallback = Callable[..., None]
Subscriber = Union[EventCallback, WeakMethod]


class EventBus:
    """Minimalistic event dispatcher.

    Subscribers register callbacks for string based event identifiers.  When an
    event is published all callbacks for that name are invoked with the supplied
    positional and keyword arguments.  The implementation is intentionally
    lightweight – no error handling is performed and callbacks are executed
    synchronously.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event: str, callback: EventCallback) -> None:
        """Register ``callback`` to be invoked when ``event`` is published."""

        if hasattr(callback, "__self__") and getattr(callback, "__self__") is not None:
            self._subscribers[event].append(WeakMethod(callback))
        else:
            self._subscribers[event].append(callback)

    def publish(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Invoke all callbacks subscribed to ``event``."""

        subs = self._subscribers.get(event, [])
        for cb in list(subs):
            if isinstance(cb, WeakMethod):
                func = cb()
                if func is None:
                    subs.remove(cb)
                    continue
                func(*args, **kwargs)
            else:
                cb(*args, **kwargs)

    def reset(self) -> None:
        """Drop every subscription."""

        self._subscribers.clear()


# Global bus instance used by modules -----------------------------------
EVENT_BUS = EventBus()

# Event name constants ---------------------------------------------------
# Published with the new map id before a map's data is loaded
ON_MAP_SETUP = "on_map_setup"
# Published with the list of spawn records after a spawn command
ON_EVENTS_SPAWNED = "on_events_spawned"
