"""Pydantic schemas for API request/response validation"""

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from fraudscan_gateway.domain.models import RiskStatus


class ScanRequest(BaseModel):
    """Request body for POST /v1/scan"""

    user_id: str = Field(..., min_length=1, description="Acting user identifier")
    amount: float = Field(..., ge=0, description="Transaction amount in currency units")
    time_of_day: float = Field(..., ge=0, lt=24, description="Hour of day, 0 <= h < 24")
    location: str = Field(..., min_length=1, max_length=16, description="Region code, e.g. TX")
    type: str = Field(..., min_length=1, max_length=32, description="purchase, transfer, withdrawal, deposit or refund")


class ScanResponse(BaseModel):
    """Response for POST /v1/scan"""

    transaction_id: str
    score: float
    status: RiskStatus
    reason: str = ""
    source: str  # remote | heuristic
    created_at: str


class TransactionItem(BaseModel):
    """Single row of the transaction log"""

    transaction_id: str
    amount: float
    location: str
    type: str
    time_of_day: float
    risk_score: float
    status: str
    risk_reason: Optional[str] = None
    source: str
    created_at: str


class TransactionListResponse(BaseModel):
    """Response for GET /v1/transactions"""

    user_id: str
    transactions: List[TransactionItem]


class StatusSummary(BaseModel):
    """Counts per status tier"""

    total: int
    fraud: int
    safe: int
    review: int
    fraud_rate: float


class NamedCount(BaseModel):
    name: str
    value: int


class TypeBreakdownItem(BaseModel):
    name: str
    total: int
    fraud: int


class LocationBreakdownItem(BaseModel):
    name: str
    transactions: int
    fraud_rate: float


class TrendPoint(BaseModel):
    date: dt.date
    day: str
    transactions: int
    fraud: int


class AmountBucket(BaseModel):
    range: str
    count: int


class InsightsResponse(BaseModel):
    """Response for GET /v1/insights"""

    user_id: str
    total: int
    fraud_rate: float
    average_risk_score: float
    status_distribution: List[NamedCount]
    by_type: List[TypeBreakdownItem]
    by_location: List[LocationBreakdownItem]
    trend: List[TrendPoint]


class AdminOverviewResponse(BaseModel):
    """Response for GET /v1/admin/overview"""

    total_users: int
    transactions: StatusSummary


class AdminAnalyticsResponse(BaseModel):
    """Response for GET /v1/admin/analytics"""

    total_transactions: int
    total_amount: float
    average_amount: float
    fraud_rate: float
    status_distribution: List[NamedCount]
    by_location: Dict[str, int]
    by_type: Dict[str, int]
    amount_distribution: List[AmountBucket]


class VelocitySettings(BaseModel):
    max_transactions: int = Field(..., gt=0, le=1000)
    time_window_seconds: int = Field(..., gt=0, le=3600)


class WhaleThreshold(BaseModel):
    amount: float = Field(..., gt=0)


class SystemStatus(BaseModel):
    online: bool
    model_version: str = Field(..., min_length=1)


class SettingsResponse(BaseModel):
    """Response for GET /v1/admin/settings"""

    velocity_settings: VelocitySettings
    whale_threshold: WhaleThreshold
    system_status: SystemStatus
