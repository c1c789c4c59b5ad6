"""Admin endpoints - global overview, analytics, and system settings"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from fraudscan_gateway.api.dependencies import get_request_id
from fraudscan_gateway.api.v1.schemas import (
    AdminAnalyticsResponse,
    AdminOverviewResponse,
    SettingsResponse,
    StatusSummary,
    SystemStatus,
    VelocitySettings,
    WhaleThreshold,
)
from fraudscan_gateway.domain import insights
from fraudscan_gateway.infrastructure.database.session import get_db
from fraudscan_gateway.infrastructure.database.repositories import SystemConfigRepository, TransactionRepository

router = APIRouter(prefix="/admin")

SETTING_SCHEMAS: Dict[str, type[BaseModel]] = {
    "velocity_settings": VelocitySettings,
    "whale_threshold": WhaleThreshold,
    "system_status": SystemStatus,
}


@router.get("/overview", response_model=AdminOverviewResponse)
def admin_overview(db: Session = Depends(get_db)):
    """User count and status totals across every user"""
    txn_repo = TransactionRepository(db)
    rows = txn_repo.get_all_transactions()
    return AdminOverviewResponse(
        total_users=txn_repo.count_users(),
        transactions=StatusSummary(**insights.summarize_statuses(rows)),
    )


@router.get("/analytics", response_model=AdminAnalyticsResponse)
def admin_analytics(db: Session = Depends(get_db)):
    """Platform-wide distributions by status, location, type and amount"""
    rows = TransactionRepository(db).get_all_transactions()
    summary = insights.summarize_statuses(rows)
    total_amount = sum(float(t.amount) for t in rows)
    return AdminAnalyticsResponse(
        total_transactions=summary["total"],
        total_amount=total_amount,
        average_amount=total_amount / len(rows) if rows else 0.0,
        fraud_rate=summary["fraud_rate"],
        status_distribution=insights.status_distribution(rows),
        by_location=insights.count_by(rows, "location"),
        by_type=insights.count_by(rows, "type"),
        amount_distribution=insights.amount_distribution(rows),
    )


@router.get("/settings", response_model=SettingsResponse)
def get_settings(db: Session = Depends(get_db)):
    """Current system settings with defaults for keys never saved"""
    return SettingsResponse(**SystemConfigRepository(db).get_all_settings())


@router.put("/settings/{key}")
def update_setting(
    key: str,
    value: Dict[str, Any],
    request: Request,
    updated_by: str | None = Query(None, description="Admin making the change"),
    db: Session = Depends(get_db),
):
    """
    Replace one system setting.

    Keys: velocity_settings, whale_threshold, system_status. The body is
    validated against the key's schema; scans pick the change up on their
    next request.
    """
    schema = SETTING_SCHEMAS.get(key)
    if schema is None:
        raise HTTPException(status_code=404, detail=f"Unknown setting: {key}")

    try:
        validated = schema.model_validate(value).model_dump()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))

    SystemConfigRepository(db).update_setting(key, validated, updated_by=updated_by)
    db.commit()

    logging.info(
        "Setting updated",
        extra={"request_id": get_request_id(request), "setting": key, "updated_by": updated_by},
    )
    return {"key": key, "value": validated}
