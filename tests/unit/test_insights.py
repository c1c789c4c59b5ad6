"""Unit tests for transaction log filtering and dashboard aggregations"""

import pytest
from dataclasses import dataclass, field
from datetime import date, datetime
from fraudscan_gateway.domain import insights


@dataclass
class Row:
    id: str
    amount: float
    location: str
    type: str
    status: str
    risk_score: float
    created_at: datetime = field(default_factory=lambda: datetime(2024, 6, 14, 9, 30))


@pytest.fixture
def rows() -> list[Row]:
    return [
        Row("a1f0", 50, "NY", "purchase", "Safe", 0.1, datetime(2024, 6, 14, 9)),
        Row("b2e1", 6000, "TX", "transfer", "Review", 0.75, datetime(2024, 6, 14, 10)),
        Row("c3d2", 80, "TX", "purchase", "Fraud", 0.92, datetime(2024, 6, 13, 23)),
        Row("d4c3", 2, "CA", "purchase", "Review", 0.45, datetime(2024, 6, 10, 8)),
        Row("e5b4", 700, "TX", "withdrawal", "Fraud", 0.92, datetime(2024, 6, 1, 8)),
        Row("f6a5", 100, "NY", "refund", "Safe", 0.2, datetime(2024, 6, 12, 18)),
    ]


def test_filter_by_status(rows):
    result = insights.filter_transactions(rows, status="Fraud")
    assert [r.id for r in result] == ["c3d2", "e5b4"]


def test_search_is_case_insensitive_over_location_type_and_id(rows):
    assert [r.id for r in insights.filter_transactions(rows, search="tx")] == ["b2e1", "c3d2", "e5b4"]
    assert [r.id for r in insights.filter_transactions(rows, search="TRANS")] == ["b2e1"]
    assert [r.id for r in insights.filter_transactions(rows, search="F6A")] == ["f6a5"]


def test_status_and_search_combine(rows):
    result = insights.filter_transactions(rows, status="Safe", search="ny")
    assert [r.id for r in result] == ["a1f0", "f6a5"]


def test_no_filters_returns_everything(rows):
    assert insights.filter_transactions(rows) == rows


def test_summarize_statuses(rows):
    summary = insights.summarize_statuses(rows)

    assert summary["total"] == 6
    assert summary["fraud"] == 2
    assert summary["safe"] == 2
    assert summary["review"] == 2
    assert summary["fraud_rate"] == pytest.approx(100 * 2 / 6)


def test_summarize_empty():
    assert insights.summarize_statuses([]) == {"total": 0, "fraud": 0, "safe": 0, "review": 0, "fraud_rate": 0.0}


def test_status_distribution_omits_empty_tiers(rows):
    safe_only = [r for r in rows if r.status == "Safe"]
    assert insights.status_distribution(safe_only) == [{"name": "Safe", "value": 2}]


def test_type_breakdown(rows):
    breakdown = insights.type_breakdown(rows)

    assert breakdown == [
        {"name": "Purchase", "total": 3, "fraud": 1},
        {"name": "Transfer", "total": 1, "fraud": 0},
        {"name": "Withdrawal", "total": 1, "fraud": 1},
        {"name": "Refund", "total": 1, "fraud": 0},
    ]


def test_location_breakdown_sorted_by_volume(rows):
    breakdown = insights.location_breakdown(rows)

    assert [b["name"] for b in breakdown] == ["TX", "NY", "CA"]
    assert breakdown[0]["transactions"] == 3
    assert breakdown[0]["fraud_rate"] == pytest.approx(100 * 2 / 3)
    assert breakdown[1]["fraud_rate"] == 0.0


def test_location_breakdown_limit(rows):
    assert len(insights.location_breakdown(rows, limit=2)) == 2


def test_daily_trend_covers_last_seven_days(rows):
    trend = insights.daily_trend(rows, today=date(2024, 6, 14))

    assert [p["date"] for p in trend] == [date(2024, 6, d) for d in range(8, 15)]
    assert trend[-1]["day"] == "Fri"
    assert trend[-1]["transactions"] == 2
    assert trend[-2]["fraud"] == 1
    # 2024-06-01 falls outside the window
    assert sum(p["transactions"] for p in trend) == 5


def test_amount_distribution_bucket_edges(rows):
    distribution = {b["range"]: b["count"] for b in insights.amount_distribution(rows)}

    assert distribution == {
        "$0-100": 4,  # upper bound inclusive, so 100 lands here
        "$100-500": 0,
        "$500-1000": 1,
        "$1000-5000": 0,
        "$5000+": 1,
    }


def test_count_by(rows):
    assert insights.count_by(rows, "location") == {"NY": 2, "TX": 3, "CA": 1}


def test_average_risk_score(rows):
    assert insights.average_risk_score(rows) == pytest.approx((0.1 + 0.75 + 0.92 + 0.45 + 0.92 + 0.2) / 6)
    assert insights.average_risk_score([]) == 0.0
