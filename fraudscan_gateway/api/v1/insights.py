"""GET /v1/insights - risk insights for one user's scans"""

from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fraudscan_gateway.api.dependencies import get_clock
from fraudscan_gateway.api.v1.schemas import InsightsResponse
from fraudscan_gateway.domain import insights
from fraudscan_gateway.infrastructure.database.session import get_db
from fraudscan_gateway.infrastructure.database.repositories import TransactionRepository

router = APIRouter()


@router.get("/insights", response_model=InsightsResponse)
def get_insights(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """
    Aggregate a user's scans for the insights dashboard.

    Returns:
        Status mix, per-type and per-location breakdowns, and a 7-day trend
    """
    rows = TransactionRepository(db).get_transactions_by_user(user_id, newest_first=False)
    summary = insights.summarize_statuses(rows)

    return InsightsResponse(
        user_id=user_id,
        total=summary["total"],
        fraud_rate=summary["fraud_rate"],
        average_risk_score=insights.average_risk_score(rows),
        status_distribution=insights.status_distribution(rows),
        by_type=insights.type_breakdown(rows),
        by_location=insights.location_breakdown(rows),
        trend=insights.daily_trend(rows, today=clock().date()),
    )
