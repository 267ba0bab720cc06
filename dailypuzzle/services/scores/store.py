import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from .board import COLS, ROWS, current_date, generate_daily_board
from .rwlock import RWLock


@dataclass(frozen=True)
class DailyRecord:
    """Best result for one calendar day.

    ``moves`` and ``pieces`` are None until the first submission of the day,
    so a submitted 0 is a real value and not "unset".
    """

    date: int
    score: int = 0
    moves: Optional[int] = None
    pieces: Optional[int] = None
    board: Tuple[str, ...] = ()

    def to_dict(self, include_board: bool = False) -> dict:
        data = {
            'date': self.date,
            'score': self.score,
            'moves': self.moves,
            'pieces': self.pieces,
        }
        if include_board:
            data['daily_board'] = list(self.board)
        return data


@dataclass(frozen=True)
class Submission:
    score: int
    moves: int
    pieces: int
    date: Optional[int] = None


class DailyRecordStore:
    """Process-wide holder of today's best result.

    Records are immutable; every change swaps in a new DailyRecord under the
    exclusive lock, so the object handed back to callers is already a
    consistent snapshot.
    """

    def __init__(self, today: Callable[[], int] = current_date, rows: int = ROWS, cols: int = COLS,
                 logger: Optional[logging.Logger] = None):
        self._today = today
        self._rows = rows
        self._cols = cols
        self._logger = logger or logging.getLogger(__name__)
        self._lock = RWLock()
        self._record = self._fresh_record(self._today())

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    def read(self) -> DailyRecord:
        """Return today's record, rolling over first if the day changed."""
        with self._lock.read_locked():
            record = self._record
            if record.date == self._today():
                return record
        with self._lock.write_locked():
            # Another thread may have rolled over while we waited.
            self._rollover_locked(self._today())
            return self._record

    def maybe_rollover(self) -> bool:
        with self._lock.write_locked():
            return self._rollover_locked(self._today())

    def merge(self, submission: Submission) -> DailyRecord:
        """Fold a submission into today's record and return the result.

        A submission stamped with any day other than today is ignored.
        """
        with self._lock.write_locked():
            today = self._today()
            rolled_over = self._rollover_locked(today)
            record = self._record

            if submission.date is not None and submission.date != today:
                self._logger.info(
                    f"[merge-ignored] submitted_date={submission.date} today={today}"
                )
                return record

            if rolled_over or record.moves is None:
                # First result of the day is taken as is.
                record = replace(
                    record,
                    score=submission.score,
                    moves=submission.moves,
                    pieces=submission.pieces,
                )
            else:
                record = replace(
                    record,
                    score=max(record.score, submission.score),
                    moves=min(record.moves, submission.moves),
                    pieces=min(record.pieces, submission.pieces),
                )
            self._record = record
            return record

    def _rollover_locked(self, today: int) -> bool:
        if self._record.date == today:
            return False
        previous = self._record
        self._record = self._fresh_record(today)
        self._logger.info(
            f"[rollover] {previous.date} -> {today} final score={previous.score} moves={previous.moves} pieces={previous.pieces}"
        )
        return True

    def _fresh_record(self, today: int) -> DailyRecord:
        return DailyRecord(date=today, board=generate_daily_board(today, self.size))
