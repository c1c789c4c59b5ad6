"""Log filtering and dashboard aggregations over scanned transactions

Functions accept any sequence of rows exposing `id`, `amount`, `location`,
`type`, `status`, `risk_score` and `created_at` attributes (ORM rows in the
API, simple stand-ins in tests).
"""

from collections import Counter
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from fraudscan_gateway.domain.models import RiskStatus
from fraudscan_gateway.utils.date_utils import last_n_days

TRANSACTION_TYPES = ["purchase", "transfer", "withdrawal", "deposit", "refund"]

# (label, lower bound exclusive, upper bound inclusive)
AMOUNT_BUCKETS = [
    ("$0-100", None, 100),
    ("$100-500", 100, 500),
    ("$500-1000", 500, 1000),
    ("$1000-5000", 1000, 5000),
    ("$5000+", 5000, None),
]


def _status(row: Any) -> str:
    status = row.status
    return status.value if isinstance(status, RiskStatus) else str(status)


def _fraud_rate(fraud: int, total: int) -> float:
    return fraud / total * 100 if total > 0 else 0.0


def filter_transactions(
    rows: Sequence[Any],
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Any]:
    """
    Filter rows for the transaction log.

    - status: exact match on the status tier, ignored when empty
    - search: case-insensitive substring of location, type or id
    """
    needle = (search or "").lower()
    matched = []
    for row in rows:
        if status and _status(row) != status:
            continue
        haystacks = (str(row.location), str(row.type), str(row.id))
        if needle and not any(needle in h.lower() for h in haystacks):
            continue
        matched.append(row)
    return matched


def summarize_statuses(rows: Sequence[Any]) -> Dict[str, Any]:
    """Totals per status tier plus fraud rate as a percentage"""
    counts = Counter(_status(row) for row in rows)
    total = len(rows)
    fraud = counts[RiskStatus.FRAUD.value]
    return {
        "total": total,
        "fraud": fraud,
        "safe": counts[RiskStatus.SAFE.value],
        "review": counts[RiskStatus.REVIEW.value],
        "fraud_rate": _fraud_rate(fraud, total),
    }


def status_distribution(rows: Sequence[Any]) -> List[Dict[str, Any]]:
    """Count per status tier, omitting tiers with no rows"""
    counts = Counter(_status(row) for row in rows)
    return [
        {"name": status.value, "value": counts[status.value]}
        for status in (RiskStatus.SAFE, RiskStatus.FRAUD, RiskStatus.REVIEW)
        if counts[status.value] > 0
    ]


def type_breakdown(rows: Sequence[Any]) -> List[Dict[str, Any]]:
    """Total and fraud count for each known transaction type present in rows"""
    breakdown = []
    for txn_type in TRANSACTION_TYPES:
        of_type = [row for row in rows if row.type == txn_type]
        if not of_type:
            continue
        breakdown.append(
            {
                "name": txn_type.capitalize(),
                "total": len(of_type),
                "fraud": sum(1 for row in of_type if _status(row) == RiskStatus.FRAUD.value),
            }
        )
    return breakdown


def location_breakdown(rows: Sequence[Any], limit: int = 6) -> List[Dict[str, Any]]:
    """Busiest locations first, each with its fraud rate (%)"""
    totals: Counter = Counter()
    frauds: Counter = Counter()
    for row in rows:
        totals[row.location] += 1
        if _status(row) == RiskStatus.FRAUD.value:
            frauds[row.location] += 1

    # Counter.most_common keeps first-seen order for ties
    return [
        {
            "name": location,
            "transactions": count,
            "fraud_rate": _fraud_rate(frauds[location], count),
        }
        for location, count in totals.most_common(limit)
    ]


def daily_trend(rows: Sequence[Any], today: date, days: int = 7) -> List[Dict[str, Any]]:
    """Transactions and frauds per calendar day, oldest day first"""
    per_day: Dict[date, List[Any]] = {}
    for row in rows:
        per_day.setdefault(row.created_at.date(), []).append(row)

    trend = []
    for day in last_n_days(today, days):
        day_rows = per_day.get(day, [])
        trend.append(
            {
                "date": day,
                "day": day.strftime("%a"),
                "transactions": len(day_rows),
                "fraud": sum(1 for row in day_rows if _status(row) == RiskStatus.FRAUD.value),
            }
        )
    return trend


def amount_distribution(rows: Sequence[Any]) -> List[Dict[str, Any]]:
    """Row counts per amount bucket"""
    distribution = []
    for label, lower, upper in AMOUNT_BUCKETS:
        count = sum(
            1
            for row in rows
            if (lower is None or float(row.amount) > lower)
            and (upper is None or float(row.amount) <= upper)
        )
        distribution.append({"range": label, "count": count})
    return distribution


def count_by(rows: Sequence[Any], attribute: str) -> Dict[str, int]:
    """Row counts keyed by the given attribute"""
    return dict(Counter(getattr(row, attribute) for row in rows))


def average_risk_score(rows: Sequence[Any]) -> float:
    if not rows:
        return 0.0
    return sum(row.risk_score or 0 for row in rows) / len(rows)
