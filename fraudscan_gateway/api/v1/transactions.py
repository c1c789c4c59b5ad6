"""GET /v1/transactions - a user's scan log and summary counts"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fraudscan_gateway.api.v1.schemas import StatusSummary, TransactionItem, TransactionListResponse
from fraudscan_gateway.domain.insights import filter_transactions, summarize_statuses
from fraudscan_gateway.domain.models import RiskStatus
from fraudscan_gateway.infrastructure.database.session import get_db
from fraudscan_gateway.infrastructure.database.repositories import TransactionRepository

router = APIRouter()


def to_item(txn) -> TransactionItem:
    return TransactionItem(
        transaction_id=str(txn.id),
        amount=float(txn.amount),
        location=txn.location,
        type=txn.type,
        time_of_day=txn.time_of_day,
        risk_score=txn.risk_score,
        status=txn.status,
        risk_reason=txn.risk_reason,
        source=txn.source,
        created_at=txn.created_at.isoformat(),
    )


@router.get("/transactions", response_model=TransactionListResponse)
def list_transactions(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    status: Optional[RiskStatus] = Query(None, description="Only this status tier"),
    search: Optional[str] = Query(None, description="Substring of location, type or transaction id"),
    db: Session = Depends(get_db),
):
    """
    Retrieve a user's scanned transactions, newest first.

    Status narrows in the query; search matches location, type or id
    case-insensitively.
    """
    txn_repo = TransactionRepository(db)
    rows = txn_repo.get_transactions_by_user(user_id, status=status.value if status else None)
    rows = filter_transactions(rows, search=search)

    return TransactionListResponse(user_id=user_id, transactions=[to_item(t) for t in rows])


@router.get("/transactions/stats", response_model=StatusSummary)
def transaction_stats(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Totals per status tier and fraud rate for the user's dashboard overview"""
    rows = TransactionRepository(db).get_transactions_by_user(user_id)
    return StatusSummary(**summarize_statuses(rows))
