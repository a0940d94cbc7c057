"""
Event bus connecting the battle engine to its consumers.

The engine publishes every battle event here as it is emitted; the log manager,
a renderer or a recorder subscribe without the engine knowing about any of
them.
"""

import threading
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


@dataclass
class QueuedEvent:
    """An event waiting in (or already delivered from) the queue."""
    event: "GameEvent"
    timestamp: datetime = field(default_factory=datetime.now)
    source: Optional[str] = None  # For debugging


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Publisher-subscriber bus for battle and log events."""

    def __init__(self, enable_debug_logging: bool = False, history_size: int = 1000):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Whether to report bus activity to the debug callback
            history_size: Number of delivered events kept for inspection
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []

        self._event_queue: deque[QueuedEvent] = deque()

        self._events_published = 0
        self._events_processed = 0
        self._subscriber_errors = 0
        self._event_history: deque[QueuedEvent] = deque(maxlen=history_size)

        self._lock = threading.RLock()

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Optional name for debugging
        """
        with self._lock:
            self._subscribers[event_type].append(subscriber)

            subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
            self._debug_log(f"Subscribed {subscriber_display} to {event_type.name} events")

    def subscribe_all(
        self,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to every event published on the bus."""
        with self._lock:
            self._universal_subscribers.append(subscriber)

            subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
            self._debug_log(f"Subscribed {subscriber_display} to ALL events")

    def unsubscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> bool:
        """Unsubscribe from events of a specific type.

        Returns:
            True if subscriber was found and removed
        """
        with self._lock:
            try:
                self._subscribers[event_type].remove(subscriber)
            except ValueError:
                return False
            self._debug_log(f"Unsubscribed from {event_type.name} events")
            return True

    def unsubscribe_all(self, subscriber: EventSubscriber) -> bool:
        """Remove a universal subscriber.

        Returns:
            True if subscriber was found and removed
        """
        with self._lock:
            try:
                self._universal_subscribers.remove(subscriber)
            except ValueError:
                return False
            self._debug_log("Unsubscribed from ALL events")
            return True

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event; it is delivered by the next process_events() call."""
        with self._lock:
            queued_event = QueuedEvent(event=event, source=source or "unknown")
            self._event_queue.append(queued_event)
            self._events_published += 1

            self._debug_log(f"Published {event.__class__.__name__} (source: {queued_event.source})")

    def publish_immediate(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Deliver an event to its subscribers before returning."""
        with self._lock:
            self._events_published += 1
        self._process_event(QueuedEvent(event=event, source=source or "immediate"))

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events in publication order.

        Args:
            max_events: Maximum number of events to process (None for all)

        Returns:
            Number of events processed
        """
        processed_count = 0

        while max_events is None or processed_count < max_events:
            with self._lock:
                if not self._event_queue:
                    break
                queued_event = self._event_queue.popleft()

            self._process_event(queued_event)
            processed_count += 1

        return processed_count

    def _process_event(self, queued_event: QueuedEvent) -> None:
        """Notify the type subscribers, then the universal subscribers."""
        event = queued_event.event

        with self._lock:
            self._event_history.append(queued_event)
            self._events_processed += 1
            subscribers = list(self._subscribers.get(event.event_type, []))
            universal = list(self._universal_subscribers)

        self._debug_log(
            f"Processing {event.__class__.__name__} from {queued_event.source} "
            f"(round: {event.round_number})"
        )

        for subscriber in subscribers + universal:
            try:
                subscriber(event)
            except Exception as e:
                with self._lock:
                    self._subscriber_errors += 1
                self._debug_log(
                    f"Error in subscriber {getattr(subscriber, '__name__', 'anonymous')}: {e}"
                )

    def clear_queue(self) -> int:
        """Drop all queued events.

        Returns:
            Number of events that were cleared
        """
        with self._lock:
            count = len(self._event_queue)
            self._event_queue.clear()
            self._debug_log(f"Cleared {count} queued events")
            return count

    def get_statistics(self) -> dict[str, Any]:
        with self._lock:
            return {
                'events_published': self._events_published,
                'events_processed': self._events_processed,
                'events_queued': len(self._event_queue),
                'subscriber_errors': self._subscriber_errors,
                'subscribers_count': sum(len(subs) for subs in self._subscribers.values()),
                'universal_subscribers_count': len(self._universal_subscribers),
                'event_history_size': len(self._event_history)
            }

    def get_recent_events(self, count: int = 10) -> list[dict[str, Any]]:
        """Describe the most recently delivered events, oldest first."""
        with self._lock:
            recent = list(self._event_history)[-count:]

            return [
                {
                    'event_type': queued.event.event_type.name,
                    'round_number': queued.event.round_number,
                    'source': queued.source,
                    'timestamp': queued.timestamp.isoformat()
                }
                for queued in recent
            ]

    def has_queued_events(self) -> bool:
        with self._lock:
            return len(self._event_queue) > 0

    def shutdown(self) -> None:
        """Drop all subscribers, queued events and history."""
        with self._lock:
            self._subscribers.clear()
            self._universal_subscribers.clear()
            self._event_queue.clear()
            self._event_history.clear()
            self._debug_log("Event manager shutdown complete")
