"""
Base Query class for CQRS read operations.

Queries read request records through the RequestStore and never write.
Listings are computed from the database on every call; nothing is cached
here, so a status change is visible on the very next read.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional
import logging

from infrastructure.cache import Cache
from infrastructure.clock import Clock
from services.store import RequestStore

T = TypeVar('T')


class BaseQuery(ABC, Generic[T]):
    """
    Base class for all Queries (read operations).

    The container passes the same keyword arguments it gives commands;
    the ones a query has no use for (event_bus) are ignored.
    """

    def __init__(
        self,
        store: Optional[RequestStore] = None,
        cache: Optional[Cache] = None,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
        **kwargs
    ):
        self._cache = cache
        self._clock = clock
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._store = store or RequestStore(logger=self._logger)

    @abstractmethod
    def execute(self, **kwargs) -> T:
        pass
