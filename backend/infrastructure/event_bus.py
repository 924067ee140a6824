"""
Event Bus abstraction for publishing domain events.

Request lifecycle events (created, status_changed, deleted, synced) go out on a
RabbitMQ topic exchange; nothing in-process subscribes to them.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List
import json
import logging
import threading
import time

logger = logging.getLogger(__name__)


class EventBus(ABC):
    """Abstract event bus interface (publish only)."""

    @abstractmethod
    def publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        """
        Publish event to the bus.

        Args:
            event_type: Event type (e.g., 'request.created', 'request.synced')
            payload: Event data (includes 'timestamp' as Unix timestamp)
        """
        pass


class RabbitMQEventBus(EventBus):
    """
    RabbitMQ implementation of event bus.

    The connection is opened lazily on first publish and re-opened after any
    failure. Each publish is retried with exponential backoff and raises only
    after the last attempt.
    """

    MAX_RETRIES = 3
    INITIAL_RETRY_DELAY = 0.5  # seconds
    MAX_RETRY_DELAY = 4.0  # seconds

    def __init__(self, rabbitmq_url: str, exchange: str = 'textbook_events'):
        self._url = rabbitmq_url
        self._exchange = exchange
        self._connection = None
        self._channel = None
        self._lock = threading.Lock()

    def _connect(self) -> None:
        """Open connection and declare the exchange (caller must hold lock)."""
        import pika

        if self._channel is not None and self._channel.is_open:
            return

        self._disconnect()

        params = pika.URLParameters(self._url)
        params.heartbeat = 120
        params.blocked_connection_timeout = 60
        params.socket_timeout = 10

        self._connection = pika.BlockingConnection(params)
        self._channel = self._connection.channel()
        self._channel.exchange_declare(
            exchange=self._exchange,
            exchange_type='topic',
            durable=True
        )
        logger.info("RabbitMQ connection established", extra={'exchange': self._exchange})

    def _disconnect(self) -> None:
        """Drop connection without raising (caller must hold lock)."""
        if self._connection is not None:
            try:
                if not self._connection.is_closed:
                    self._connection.close()
            except Exception as e:
                logger.debug(f"Ignoring error while closing RabbitMQ connection: {e}")
        self._connection = None
        self._channel = None

    def publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        import pika

        body = json.dumps(
            {'event_type': event_type, 'payload': payload},
            ensure_ascii=False,
            default=str
        ).encode('utf-8')

        last_error = None
        delay = self.INITIAL_RETRY_DELAY

        for attempt in range(1, self.MAX_RETRIES + 1):
            with self._lock:
                try:
                    self._connect()
                    self._channel.basic_publish(
                        exchange=self._exchange,
                        routing_key=event_type,
                        body=body,
                        properties=pika.BasicProperties(
                            delivery_mode=2,  # Persistent
                            content_type='application/json'
                        )
                    )
                    logger.info(f"Published event: {event_type}")
                    return
                except Exception as e:
                    last_error = e
                    logger.warning(
                        f"Publish attempt {attempt}/{self.MAX_RETRIES} failed for {event_type}: {e}"
                    )
                    self._disconnect()

            if attempt < self.MAX_RETRIES:
                time.sleep(delay)
                delay = min(delay * 2, self.MAX_RETRY_DELAY)

        raise last_error

    def close(self) -> None:
        with self._lock:
            self._disconnect()


class FakeEventBus(EventBus):
    """
    In-memory event bus for testing.
    Stores all published events for assertions.
    """

    def __init__(self):
        self._events: List[Dict[str, Any]] = []

    def publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        self._events.append({
            'event_type': event_type,
            'payload': payload
        })

    @property
    def events(self) -> List[Dict[str, Any]]:
        """Get all published events."""
        return self._events.copy()

    def get_events_by_type(self, event_type: str) -> List[Dict[str, Any]]:
        return [e for e in self._events if e['event_type'] == event_type]

    def clear(self) -> None:
        self._events.clear()

    def assert_event_published(self, event_type: str) -> Dict[str, Any]:
        """Assert that an event of given type was published. Returns the event."""
        events = self.get_events_by_type(event_type)
        if not events:
            raise AssertionError(f"No event of type '{event_type}' was published")
        return events[-1]

    def assert_no_events(self) -> None:
        if self._events:
            types = [e['event_type'] for e in self._events]
            raise AssertionError(f"Expected no events, but found: {types}")
