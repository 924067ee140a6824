"""
Dependency Injection container and application bootstrap.

One container per process. It owns the shared pieces (clock, cache, event
bus, request store) and builds commands, queries and services on demand
with those pieces injected. USE_FAKES=true swaps the clock, cache and
event bus for in-memory fakes; the request store always talks to the
configured database.
"""
from typing import TypeVar, Type, Dict, Any, Callable, Optional
import os
import logging

from django.conf import settings

from infrastructure.clock import Clock, SystemClock, FakeClock
from infrastructure.cache import Cache, RedisCache, FakeCache
from infrastructure.event_bus import EventBus, RabbitMQEventBus, FakeEventBus
from services.store import RequestStore

T = TypeVar('T')

logger = logging.getLogger(__name__)


class Container:
    """Resolves infrastructure singletons and builds everything else."""

    _instance: Optional['Container'] = None

    def __init__(self, use_fakes: bool = False):
        self._use_fakes = use_fakes
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[['Container'], Any]] = {}

        self._register_infrastructure()
        self._register_services()

    @property
    def use_fakes(self) -> bool:
        return self._use_fakes

    def _register_infrastructure(self):
        if self._use_fakes:
            self._singletons[Clock] = FakeClock()
            self._singletons[Cache] = FakeCache()
            self._singletons[EventBus] = FakeEventBus()
        else:
            self._singletons[Clock] = SystemClock()
            self._singletons[Cache] = RedisCache(settings.REDIS_URL)
            self._singletons[EventBus] = RabbitMQEventBus(
                settings.RABBITMQ_URL,
                exchange=getattr(settings, 'EVENT_EXCHANGE', 'textbook_events')
            )

        self._singletons[RequestStore] = RequestStore()

    def _register_services(self):
        """Services that take their own arguments instead of the command kwargs."""
        from services.admin_gate import AdminGateService
        from services.messaging import ParentMessageService

        self._factories[AdminGateService] = lambda c: AdminGateService(cache=c.get(Cache))
        self._factories[ParentMessageService] = lambda c: ParentMessageService()

    def get(self, cls: Type[T]) -> T:
        """
        Resolve `cls`.

        Singletons are shared; registered factories run on every call;
        any other class is treated as a command or query and built with
        the shared infrastructure injected.
        """
        if cls in self._singletons:
            return self._singletons[cls]

        if cls in self._factories:
            return self._factories[cls](self)

        return cls(
            clock=self._singletons[Clock],
            cache=self._singletons[Cache],
            event_bus=self._singletons[EventBus],
            store=self._singletons[RequestStore],
            logger=logging.getLogger(cls.__name__)
        )

    def register_singleton(self, cls: Type[T], instance: T) -> None:
        self._singletons[cls] = instance

    def register_factory(self, cls: Type[T], factory: Callable[['Container'], T]) -> None:
        self._factories[cls] = factory

    @classmethod
    def instance(cls) -> 'Container':
        """Get or create the process-wide container."""
        if cls._instance is None:
            use_fakes = os.environ.get('USE_FAKES', '').lower() in ('true', '1', 'yes')
            cls._instance = cls(use_fakes=use_fakes)
            logger.info("Container initialized", extra={'use_fakes': use_fakes})
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide container (tests)."""
        cls._instance = None


def get_container() -> Container:
    """Get the global container instance."""
    return Container.instance()
