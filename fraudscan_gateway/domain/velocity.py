"""Rolling submission history used by the velocity rule"""

from collections import deque
from datetime import datetime, timedelta
from typing import Deque


class SubmissionHistory:
    """
    Time-ordered submission instants kept within a retention window.

    Instants normally arrive in real time, so the deque stays sorted and
    eviction only pops from the left. When the wall clock steps backwards
    the late instant is merged into place so the ordering still holds.
    """

    def __init__(self, retention_seconds: float = 30.0):
        self.retention = timedelta(seconds=retention_seconds)
        self._instants: Deque[datetime] = deque()

    def record(self, now: datetime) -> None:
        """Add `now`, then evict every instant older than the retention window"""
        if self._instants and now < self._instants[-1]:
            # Clock stepped back: re-sort so left-side eviction stays valid
            self._instants = deque(sorted([*self._instants, now]))
        else:
            self._instants.append(now)

        cutoff = now - self.retention
        while self._instants and self._instants[0] < cutoff:
            self._instants.popleft()

    def count_within(self, now: datetime, seconds: float) -> int:
        """Number of recorded instants whose age relative to `now` is at most `seconds`"""
        window = timedelta(seconds=seconds)
        return sum(1 for ts in self._instants if now - ts <= window)

    def __len__(self) -> int:
        return len(self._instants)
