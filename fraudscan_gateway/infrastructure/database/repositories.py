"""Data access layer for scanned transactions and system settings"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from fraudscan_gateway.config import settings
from fraudscan_gateway.domain.exceptions import UnknownSettingError
from fraudscan_gateway.domain.models import RuleThresholds, ScoreResult, TransactionCandidate
from fraudscan_gateway.infrastructure.database.models import ScannedTransaction, SystemConfig

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "velocity_settings": {"max_transactions": 3, "time_window_seconds": 10},
    "whale_threshold": {"amount": 5000},
    "system_status": {"online": True, "model_version": settings.default_model_version},
}


class TransactionRepository:
    """Repository for scanned transactions"""

    def __init__(self, db: Session):
        self.db = db

    def create_transaction(
        self,
        user_id: str,
        candidate: TransactionCandidate,
        result: ScoreResult,
        source: str,
        model_version: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> ScannedTransaction:
        """Persist a scan verdict; empty reasons are stored as NULL"""
        db_txn = ScannedTransaction(
            user_id=user_id,
            amount=candidate.amount,
            location=candidate.location,
            type=candidate.type,
            time_of_day=candidate.time_of_day,
            risk_score=result.score,
            status=result.status.value,
            risk_reason=result.reason or None,
            source=source,
            model_version=model_version,
        )
        if created_at is not None:
            db_txn.created_at = created_at
        self.db.add(db_txn)
        self.db.flush()  # Get ID without committing
        return db_txn

    def get_transactions_by_user(
        self,
        user_id: str,
        status: Optional[str] = None,
        newest_first: bool = True,
    ) -> List[ScannedTransaction]:
        """Fetch a user's scans, optionally narrowed to one status tier"""
        query = self.db.query(ScannedTransaction).filter(ScannedTransaction.user_id == user_id)
        if status:
            query = query.filter(ScannedTransaction.status == status)
        order = ScannedTransaction.created_at.desc() if newest_first else ScannedTransaction.created_at.asc()
        return query.order_by(order).all()

    def get_all_transactions(self) -> List[ScannedTransaction]:
        """Fetch every scan across users (admin views)"""
        return self.db.query(ScannedTransaction).order_by(ScannedTransaction.created_at.desc()).all()

    def count_users(self) -> int:
        """Number of distinct users with at least one scan"""
        return self.db.query(func.count(func.distinct(ScannedTransaction.user_id))).scalar() or 0


class SystemConfigRepository:
    """Repository for admin-editable system settings"""

    def __init__(self, db: Session):
        self.db = db

    def get_setting(self, key: str) -> Dict[str, Any]:
        """Stored value for `key`, or its default when never saved"""
        if key not in DEFAULT_SETTINGS:
            raise UnknownSettingError(f"Unknown setting: {key}")
        row = self.db.get(SystemConfig, key)
        return dict(row.value) if row else dict(DEFAULT_SETTINGS[key])

    def get_all_settings(self) -> Dict[str, Dict[str, Any]]:
        return {key: self.get_setting(key) for key in DEFAULT_SETTINGS}

    def update_setting(self, key: str, value: Dict[str, Any], updated_by: Optional[str] = None) -> SystemConfig:
        """Insert or replace the value stored under `key`"""
        if key not in DEFAULT_SETTINGS:
            raise UnknownSettingError(f"Unknown setting: {key}")
        row = self.db.get(SystemConfig, key)
        if row is None:
            row = SystemConfig(key=key, value=value, updated_by=updated_by)
            self.db.add(row)
        else:
            row.value = value
            row.updated_by = updated_by
        self.db.flush()
        return row

    def get_rule_thresholds(self) -> RuleThresholds:
        """Scorer thresholds derived from the velocity and whale settings"""
        velocity = self.get_setting("velocity_settings")
        whale = self.get_setting("whale_threshold")
        return RuleThresholds.from_settings(
            max_transactions=int(velocity["max_transactions"]),
            time_window_seconds=float(velocity["time_window_seconds"]),
            whale_amount=float(whale["amount"]),
        )
