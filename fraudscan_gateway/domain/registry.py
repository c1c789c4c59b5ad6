"""Per-session scorer registry"""

import threading
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from fraudscan_gateway.domain.models import RuleThresholds
from fraudscan_gateway.domain.scoring import RiskScorer


class ScorerRegistry:
    """
    Holds one RiskScorer per session key.

    Each user's velocity history survives between requests. A scorer whose
    session has been idle longer than its retention window holds nothing but
    expired instants, so it is dropped on the next lookup and the map only
    grows with the number of recently active sessions.
    """

    def __init__(self):
        # session key -> (scorer, last lookup instant)
        self._scorers: Dict[str, Tuple[RiskScorer, Optional[datetime]]] = {}
        self._lock = threading.Lock()

    def get(
        self,
        session_key: str,
        thresholds: Optional[RuleThresholds] = None,
        now: Optional[datetime] = None,
    ) -> RiskScorer:
        """
        Return the session's scorer, applying `thresholds` when they changed.

        Passing `now` marks the session active at that instant and evicts
        every other session idle for longer than its scorer's retention.
        """
        with self._lock:
            if now is not None:
                self._evict_idle(now)

            entry = self._scorers.get(session_key)
            if entry is None:
                scorer = RiskScorer(thresholds=thresholds)
                self._scorers[session_key] = (scorer, now)
                return scorer

            scorer = entry[0]
            self._scorers[session_key] = (scorer, now or entry[1])

        if thresholds is not None and thresholds != scorer.thresholds:
            scorer.update_thresholds(thresholds)
        return scorer

    def _evict_idle(self, now: datetime) -> None:
        idle = [
            key
            for key, (scorer, last_seen) in self._scorers.items()
            if last_seen is not None
            and now - last_seen > timedelta(seconds=scorer.thresholds.retention_seconds)
        ]
        for key in idle:
            del self._scorers[key]

    def __len__(self) -> int:
        return len(self._scorers)
