# event_dispatcher.py

from collections import defaultdict
import re
from typing import Any, Callable, Dict, List, Optional
from loggers import EventLogger

class Event:
    """
    Represents an event with type, data, and metadata.
    """

    def __init__(self, event_type: str, data: Any = None, metadata: Optional[Dict[str, Any]] = None):
        """
        Initializes an Event instance.

        Args:
            event_type (str): The type of the event, using colon-separated namespacing (e.g. 'pet:died').
            data (Any, optional): The data associated with the event.
            metadata (Dict[str, Any], optional): Additional metadata for the event.
        """
        self.event_type = event_type
        self.data = data
        self.metadata = metadata or {}

    def __repr__(self):
        return f"Event({self.event_type!r}, {self.data!r})"

class EventDispatcher:
    """
    Synchronous publish/subscribe hub with listener priorities and wildcard patterns.
    """

    def __init__(self):
        self.listeners: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.wildcard_listeners: List[Dict[str, Any]] = []
        # ticks are too frequent to log by default
        self.event_filter: List[str] = ['pet:tick']

    def add_listener(self, event_type: str, callback: Callable, priority: int = 0) -> None:
        """
        Adds a listener for a specific event type.

        Args:
            event_type (str): The event type to listen for. Can include wildcards (*), e.g. 'pet:*'.
            callback (Callable): Called with the Event when it is dispatched.
            priority (int, optional): Higher priority listeners are called first.
        """
        listener = {"callback": callback, "priority": priority}
        if '*' in event_type:
            pattern = re.escape(event_type).replace(r'\*', '.*')
            self.wildcard_listeners.append({
                "pattern": re.compile(f"^{pattern}$"),
                **listener
            })
        else:
            self.listeners[event_type].append(listener)
            self.listeners[event_type].sort(key=lambda x: x["priority"], reverse=True)

    def remove_listener(self, event_type: str, callback: Callable) -> None:
        """
        Removes a listener for a specific event type.
        """
        if '*' in event_type:
            self.wildcard_listeners = [l for l in self.wildcard_listeners if l["callback"] != callback]
        else:
            self.listeners[event_type] = [l for l in self.listeners[event_type] if l["callback"] != callback]

    def _get_listeners(self, event: Event) -> List[Dict[str, Any]]:
        """
        Returns the listeners matching the event, wildcards included, highest priority first.
        """
        listeners_to_call = self.listeners.get(event.event_type, []).copy()
        listeners_to_call.extend(
            [l for l in self.wildcard_listeners if l["pattern"].match(event.event_type)]
        )
        listeners_to_call.sort(key=lambda x: x["priority"], reverse=True)
        return listeners_to_call

    def dispatch_event(self, event: Event) -> None:
        """
        Dispatches an event to all registered listeners.

        A failing listener is logged and skipped; it never reaches the dispatching code.
        """
        if event.event_type not in self.event_filter:
            EventLogger.log_event_dispatch(event.event_type, event.data, event.metadata)
        for listener in self._get_listeners(event):
            try:
                listener["callback"](event)
            except Exception as e:
                EventLogger.error(
                    f"Listener {getattr(listener['callback'], '__qualname__', listener['callback'])} "
                    f"failed on {event.event_type}: {type(e).__name__}: {e}"
                )

# Global event dispatcher instance
global_event_dispatcher = EventDispatcher()
