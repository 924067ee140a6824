from .service import ParentMessageService, ParentMessageResult, FALLBACK_MESSAGE, EMPTY_MESSAGE

__all__ = ['ParentMessageService', 'ParentMessageResult', 'FALLBACK_MESSAGE', 'EMPTY_MESSAGE']
