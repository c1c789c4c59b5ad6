"""Heuristic risk scoring engine - local fallback when remote prediction is unavailable"""

import random
import threading
from datetime import datetime, timedelta
from typing import Optional

from fraudscan_gateway.domain.models import (
    RiskStatus,
    RuleThresholds,
    ScoreResult,
    TransactionCandidate,
)
from fraudscan_gateway.domain.velocity import SubmissionHistory

# Fixed rule outcomes, highest priority first
HIGH_FREQUENCY = ScoreResult(0.92, RiskStatus.FRAUD, "High Frequency Alert")
MANUAL_REVIEW = ScoreResult(0.75, RiskStatus.REVIEW, "Manual Review Required")
UNUSUAL_TIME = ScoreResult(0.68, RiskStatus.REVIEW, "Unusual Time Pattern")
OFF_HOURS_TRANSFER = ScoreResult(0.55, RiskStatus.REVIEW, "Off-Hours Transfer")
MICRO_TRANSACTION = ScoreResult(0.45, RiskStatus.REVIEW, "Micro-Transaction Test")

# Geo/time rule
WATCHED_LOCATION = "TX"
WATCHED_HOURS = (2, 5)  # inclusive

# Off-hours transfer rule
TRANSFER_AMOUNT_LIMIT = 1000
BUSINESS_HOURS = (6, 22)

# Micro-transaction rule
MICRO_AMOUNT_LIMIT = 5

# Default path
AMOUNT_SCALE = 10_000
BASE_SCORE_CAP = 0.4
RANDOM_SPREAD = 0.3
SAFE_SCORE_CEILING = 0.35


class RiskScorer:
    """
    Rule-based fraud scorer with per-instance velocity tracking.

    One instance belongs to one session. Every call to `score` records the
    submission instant before any rule runs, so rapid repeated submissions
    trip the velocity rule no matter what the individual transactions look
    like.
    """

    def __init__(
        self,
        thresholds: Optional[RuleThresholds] = None,
        rng: Optional[random.Random] = None,
    ):
        self.thresholds = thresholds or RuleThresholds()
        self.rng = rng or random.Random()
        self.history = SubmissionHistory(self.thresholds.retention_seconds)
        self._lock = threading.Lock()

    def update_thresholds(self, thresholds: RuleThresholds) -> None:
        """Swap rule thresholds while keeping the recorded history"""
        with self._lock:
            self.thresholds = thresholds
            self.history.retention = timedelta(seconds=thresholds.retention_seconds)

    def score(self, candidate: TransactionCandidate, now: datetime) -> ScoreResult:
        """
        Record the submission at `now` and classify the candidate.

        Rules are evaluated in strict priority order and the first match wins:
        1. Velocity: >= 3 submissions within the last 10s -> Fraud 0.92
        2. Whale: amount > 5000 -> Review 0.75
        3. Geo/time: TX between 02:00 and 05:00 -> Review 0.68
        4. Off-hours transfer: transfer > 1000 before 06:00 or after 22:00 -> Review 0.55
        5. Micro-transaction: purchase under 5 -> Review 0.45
        6. Default: Safe, score capped at 0.35

        Never raises. Input is not validated here; the API schemas reject
        negative amounts and out-of-range hours.
        """
        with self._lock:
            self.history.record(now)
            recent_count = self.history.count_within(
                now, self.thresholds.velocity_window_seconds
            )
            return self._evaluate(candidate, recent_count)

    def _evaluate(self, candidate: TransactionCandidate, recent_count: int) -> ScoreResult:
        if recent_count >= self.thresholds.velocity_max_submissions:
            return HIGH_FREQUENCY

        if candidate.amount > self.thresholds.whale_amount:
            return MANUAL_REVIEW

        hour = candidate.time_of_day
        if candidate.location == WATCHED_LOCATION and WATCHED_HOURS[0] <= hour <= WATCHED_HOURS[1]:
            return UNUSUAL_TIME

        off_hours = hour < BUSINESS_HOURS[0] or hour > BUSINESS_HOURS[1]
        if candidate.type == "transfer" and candidate.amount > TRANSFER_AMOUNT_LIMIT and off_hours:
            return OFF_HOURS_TRANSFER

        if candidate.amount < MICRO_AMOUNT_LIMIT and candidate.type == "purchase":
            return MICRO_TRANSACTION

        return ScoreResult(self.default_score(candidate.amount), RiskStatus.SAFE, "")

    def default_score(self, amount: float) -> float:
        """
        Score for transactions that match no rule.

        The base is capped at 0.4 and the final score at 0.35, keeping every
        Safe result numerically below the lowest Review outcome (0.45).
        """
        base_score = min(amount / AMOUNT_SCALE, BASE_SCORE_CAP)
        random_factor = self.rng.random() * RANDOM_SPREAD
        return min(base_score + random_factor, SAFE_SCORE_CEILING)
