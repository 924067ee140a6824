"""
Base Command class for CQRS write operations.

Every write to a textbook request goes through a command. Commands never
raise for expected failures (missing request, duplicate id, bad input): they
return a result object with `success=False` and a stable `error_code` that
the viewsets map to an HTTP status.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import logging

from infrastructure.event_bus import EventBus
from infrastructure.clock import Clock
from infrastructure.cache import Cache
from services.exceptions import ServiceError
from services.store import RequestStore

T = TypeVar('T')
R = TypeVar('R')


class BaseCommand(ABC, Generic[T]):
    """
    Base class for all Commands (write operations).

    Commands:
    - Read the time only through the injected Clock
    - Write request records only through the RequestStore
    - Announce what they changed on the event bus, best effort
    """

    def __init__(
        self,
        event_bus: EventBus,
        clock: Clock,
        cache: Optional[Cache] = None,
        store: Optional[RequestStore] = None,
        logger: Optional[logging.Logger] = None
    ):
        self._event_bus = event_bus
        self._clock = clock
        self._cache = cache
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._store = store or RequestStore(logger=self._logger)

    @abstractmethod
    def execute(self, **kwargs) -> T:
        pass

    def failure(self, result_cls: Type[R], error: ServiceError, **fields) -> R:
        """Failed result of `result_cls` carrying the error's message and code."""
        return result_cls(
            success=False,
            error=error.message,
            error_code=error.code,
            **fields
        )

    def publish_event(self, event_type: str, payload: Dict[str, Any]) -> None:
        """
        Publish a request event, stamped with the command clock.

        The record is already written when this runs, so a broker outage is
        logged and the command still succeeds.
        """
        payload['timestamp'] = self._clock.now_unix()
        try:
            self._event_bus.publish(event_type, payload)
        except Exception as e:
            self._logger.error(
                f"Dropped event {event_type}: {e}",
                extra={'event_type': event_type, 'event_payload': payload}
            )

    def log_info(self, message: str, **extra) -> None:
        self._logger.info(message, extra=extra)

    def log_warning(self, message: str, **extra) -> None:
        self._logger.warning(message, extra=extra)

    def log_error(self, message: str, **extra) -> None:
        self._logger.error(message, extra=extra)
