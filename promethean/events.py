"""Global publish/subscribe event bus."""

from __future__ import annotations

import threading
from typing import Any, Callable, ClassVar, NamedTuple, Optional

from promethean.log import LogSystem

Handler = Callable[[Any], None]


class _Subscription(NamedTuple):
    id: int
    handler: Handler


class EventBus:
    """Thread-safe, synchronous event bus keyed on the exact event type."""

    _instance: ClassVar[Optional["EventBus"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._subs: dict[type, list[_Subscription]] = {}
        self._lock = threading.Lock()
        self._next_id = 0

    @classmethod
    def instance(cls) -> "EventBus":
        """Return the shared bus, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def subscribe(self, event_type: type, handler: Handler) -> int:
        """Register ``handler`` for events of ``event_type``; return its id."""
        with self._lock:
            sub_id = self._next_id
            self._next_id += 1
            self._subs.setdefault(event_type, []).append(_Subscription(sub_id, handler))
        LogSystem.instance().debug(
            "Subscribed handler {} for {}", sub_id, event_type.__name__
        )
        return sub_id

    def unsubscribe(self, subscription_id: int) -> None:
        """Remove the subscription with the given id, if any."""
        with self._lock:
            for subs in self._subs.values():
                for position, sub in enumerate(subs):
                    if sub.id == subscription_id:
                        del subs[position]
                        found = True
                        break
                else:
                    continue
                break
            else:
                found = False
        if found:
            LogSystem.instance().debug("Unsubscribed handler {}", subscription_id)
        else:
            LogSystem.instance().warn(
                "Attempted to unsubscribe unknown id {}", subscription_id
            )

    def publish(self, event: Any) -> None:
        """Deliver ``event`` synchronously to every subscriber of its type."""
        with self._lock:
            subs = list(self._subs.get(type(event), ()))
        log = LogSystem.instance()
        log.debug("Publishing {} to {} subscriber(s)", type(event).__name__, len(subs))
        for sub in subs:
            try:
                sub.handler(event)
            except Exception:
                log.error("Exception in event handler {}", sub.id)