from .service import (
    RequestStore,
    RequestPage,
    StatusCounts,
    FILTER_COMPLETE,
    FILTER_INCOMPLETE,
    FULLY_COMPLETE_Q,
    to_dict,
)

__all__ = [
    'RequestStore',
    'RequestPage',
    'StatusCounts',
    'FILTER_COMPLETE',
    'FILTER_INCOMPLETE',
    'FULLY_COMPLETE_Q',
    'to_dict',
]
