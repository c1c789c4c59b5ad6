"""Domain models - pure Python dataclasses representing scan entities"""

from dataclasses import dataclass
from enum import Enum


class RiskStatus(str, Enum):
    """Status tier assigned to a scanned transaction"""

    SAFE = "Safe"
    REVIEW = "Review"
    FRAUD = "Fraud"


@dataclass(frozen=True)
class TransactionCandidate:
    """Transaction submitted for scoring"""

    amount: float
    time_of_day: float  # hour of day, 0 <= h < 24
    location: str  # region code, e.g. "TX"
    type: str  # purchase | transfer | withdrawal | deposit | refund


@dataclass(frozen=True)
class ScoreResult:
    """Output of a single scoring call"""

    score: float
    status: RiskStatus
    reason: str = ""


@dataclass(frozen=True)
class RuleThresholds:
    """Tunable limits for the velocity and whale rules"""

    velocity_max_submissions: int = 3
    velocity_window_seconds: float = 10.0
    retention_seconds: float = 30.0
    whale_amount: float = 5000.0

    @classmethod
    def from_settings(
        cls,
        max_transactions: int,
        time_window_seconds: float,
        whale_amount: float,
    ) -> "RuleThresholds":
        """Build thresholds from admin settings; retention never drops below the velocity window"""
        return cls(
            velocity_max_submissions=max_transactions,
            velocity_window_seconds=time_window_seconds,
            retention_seconds=max(cls.retention_seconds, time_window_seconds),
            whale_amount=whale_amount,
        )
