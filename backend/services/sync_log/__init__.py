from .service import SyncLog, SyncLogEntry, SYNC_LOG_KEY

__all__ = ['SyncLog', 'SyncLogEntry', 'SYNC_LOG_KEY']
