from .board import PIECES, current_date, generate_daily_board, pack_date
from .rwlock import RWLock
from .store import DailyRecord, DailyRecordStore, Submission

__all__ = [
    'PIECES',
    'current_date',
    'generate_daily_board',
    'pack_date',
    'RWLock',
    'DailyRecord',
    'DailyRecordStore',
    'Submission',
]
