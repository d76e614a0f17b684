"""A small event dispatcher that objects can inherit from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

Listener = Callable[["Event"], Any]


@dataclass(frozen=True)
class Event:
    """An event delivered to listeners: its type name and the object that sent it."""

    type_name: str
    target: Any


class EventDispatcher:
    """Keeps listeners per event type and calls them when an event is dispatched."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def add_listener(self, type_name: str, listener: Listener) -> None:
        """Register a listener for an event type; a listener is added only once."""
        if not self.has_event_listener(type_name, listener):
            self._listeners.setdefault(type_name, []).append(listener)

    def has_event_listener(self, type_name: str, listener: Listener) -> bool:
        """Tell whether the listener is registered for the event type."""
        return listener in self._listeners.get(type_name, ())

    def remove_listener(self, type_name: str, listener: Listener) -> None:
        """Unregister a listener; unknown listeners are ignored."""
        listeners = self._listeners.get(type_name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, type_name: str) -> None:
        """Call every listener of the event type with an event targeting this object."""
        listeners = self._listeners.get(type_name)
        if not listeners:
            return
        event = Event(type_name, self)
        # Iterate over a snapshot, in case listeners are removed while running.
        for listener in list(listeners):
            listener(event)