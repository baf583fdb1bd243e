"""Event dispatcher that sprinkle initializers subscribe to."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Events dispatched while the application boots.
SPRINKLES_INITIALIZED = "sprinkles.initialized"
SPRINKLES_ADD_RESOURCES = "sprinkles.add_resources"
SPRINKLES_REGISTER_SERVICES = "sprinkles.register_services"


@dataclass
class Event:
    """Message passed to every listener of an event."""

    name: str = ""
    payload: Dict[str, Any] = field(default_factory=dict)
    propagation_stopped: bool = False

    def stop_propagation(self):
        """Prevent listeners with lower priority from being called."""
        self.propagation_stopped = True


class EventDispatcher:
    """Priority ordered listener registry."""

    def __init__(self):
        # event name -> list of (priority, order, listener)
        self._listeners: Dict[str, List[Tuple[int, int, Callable]]] = {}
        self._order = 0

    def add_listener(self, event_name: str, listener: Callable, priority: int = 0):
        """
        Register a listener.

        Args:
            event_name: Name of the event to listen to
            listener: Callable receiving the event, the event name and the
                dispatcher
            priority: Listeners with higher priority run first; equal
                priorities run in registration order
        """
        self._order += 1
        self._listeners.setdefault(event_name, []).append((priority, self._order, listener))

    def remove_listener(self, event_name: str, listener: Callable):
        entries = self._listeners.get(event_name, [])
        self._listeners[event_name] = [e for e in entries if e[2] != listener]
        if not self._listeners[event_name]:
            del self._listeners[event_name]

    def add_subscriber(self, subscriber: Any):
        """
        Register every listener declared by a subscriber.

        ``subscriber.get_subscribed_events()`` maps event names to a method
        name, a ``(method_name, priority)`` tuple, or a list of those.
        """
        for event_name, params in self._subscriptions(subscriber):
            method, priority = params
            self.add_listener(event_name, getattr(subscriber, method), priority)
        logger.debug(f"Subscribed {type(subscriber).__name__} to event dispatcher")

    def remove_subscriber(self, subscriber: Any):
        for event_name, params in self._subscriptions(subscriber):
            self.remove_listener(event_name, getattr(subscriber, params[0]))

    def dispatch(self, event_name: str, event: Optional[Event] = None) -> Event:
        """
        Call the listeners of an event, highest priority first.

        Returns:
            The event object, after every listener has seen it
        """
        if event is None:
            event = Event()
        event.name = event_name

        for listener in self.get_listeners(event_name):
            if event.propagation_stopped:
                break
            listener(event, event_name, self)

        return event

    def get_listeners(self, event_name: str) -> List[Callable]:
        entries = sorted(self._listeners.get(event_name, []), key=lambda e: (-e[0], e[1]))
        return [entry[2] for entry in entries]

    def has_listeners(self, event_name: str = None) -> bool:
        if event_name is None:
            return bool(self._listeners)
        return bool(self._listeners.get(event_name))

    @staticmethod
    def _subscriptions(subscriber: Any):
        for event_name, params in subscriber.get_subscribed_events().items():
            if isinstance(params, str):
                yield event_name, (params, 0)
            elif isinstance(params, tuple):
                yield event_name, (params[0], params[1] if len(params) > 1 else 0)
            else:
                for entry in params:
                    if isinstance(entry, str):
                        yield event_name, (entry, 0)
                    else:
                        yield event_name, (entry[0], entry[1] if len(entry) > 1 else 0)
