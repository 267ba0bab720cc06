import random
from datetime import date
from typing import Optional, Sequence, Tuple

ROWS = 12
COLS = 12
PIECES: Tuple[str, ...] = ('🟣', '🔵', '🟢', '🔴', '🟡')


def pack_date(day: date) -> int:
    """Encode a calendar day as YYYYMMDD, e.g. 2026-10-18 -> 20261018."""
    return day.year * 10000 + day.month * 100 + day.day


def current_date(today: Optional[date] = None) -> int:
    return pack_date(today or date.today())


def generate_daily_board(seed: int, size: int = ROWS * COLS, pieces: Sequence[str] = PIECES) -> Tuple[str, ...]:
    """Build the puzzle layout for a day.

    The same seed always yields the same sequence, so every caller sees the
    same board for the whole day. Pieces are drawn with replacement.
    """
    if size <= 0:
        raise ValueError(f'board size must be positive, got {size}')
    if not pieces:
        raise ValueError('pieces alphabet must not be empty')
    rnd = random.Random(seed)
    return tuple(rnd.choice(pieces) for _ in range(size))
