"""POST /v1/scan - transaction risk scan endpoint"""

import time
import logging
from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from fraudscan_gateway.api.v1.schemas import ScanRequest, ScanResponse
from fraudscan_gateway.api.dependencies import (
    get_clock,
    get_prediction_client,
    get_request_id,
    get_scorer_registry,
)
from fraudscan_gateway.domain.exceptions import PredictionServiceError
from fraudscan_gateway.domain.models import TransactionCandidate
from fraudscan_gateway.domain.registry import ScorerRegistry
from fraudscan_gateway.infrastructure.clients.prediction import PredictionClient
from fraudscan_gateway.infrastructure.database.session import get_db
from fraudscan_gateway.infrastructure.database.repositories import SystemConfigRepository, TransactionRepository
from fraudscan_gateway.infrastructure.observability.metrics import prediction_fallback_counter, record_scan
from fraudscan_gateway.infrastructure.observability.logging import log_fallback, log_scan

router = APIRouter()

SOURCE_REMOTE = "remote"
SOURCE_HEURISTIC = "heuristic"


@router.post("/scan", response_model=ScanResponse)
async def scan_transaction(
    request_body: ScanRequest,
    request: Request,
    db: Session = Depends(get_db),
    prediction_client: PredictionClient = Depends(get_prediction_client),
    registry: ScorerRegistry = Depends(get_scorer_registry),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """
    Score a transaction and record the verdict.

    Flow:
    1. Load system status and rule thresholds
    2. Ask the remote prediction service (when marked online)
    3. Fall back to the user's heuristic scorer on any remote failure
    4. Persist the verdict for the user
    5. Return score, status and reason
    """
    start_time = time.time()
    request_id = get_request_id(request)
    candidate = TransactionCandidate(
        amount=request_body.amount,
        time_of_day=request_body.time_of_day,
        location=request_body.location,
        type=request_body.type,
    )

    try:
        # 1. Settings
        config_repo = SystemConfigRepository(db)
        system_status = config_repo.get_setting("system_status")
        now = clock()

        # 2-3. Remote model first, heuristic rules as fallback
        result = None
        source = SOURCE_REMOTE
        if system_status.get("online", True):
            try:
                result = await prediction_client.predict(candidate)
            except PredictionServiceError as e:
                prediction_fallback_counter.labels(cause="error").inc()
                log_fallback(request_id, request_body.user_id, e)
        else:
            prediction_fallback_counter.labels(cause="offline").inc()

        if result is None:
            source = SOURCE_HEURISTIC
            scorer = registry.get(request_body.user_id, config_repo.get_rule_thresholds(), now=now)
            result = scorer.score(candidate, now)

        # 4. Persist verdict
        txn_repo = TransactionRepository(db)
        db_txn = txn_repo.create_transaction(
            user_id=request_body.user_id,
            candidate=candidate,
            result=result,
            source=source,
            model_version=system_status.get("model_version") if source == SOURCE_REMOTE else None,
            created_at=now,
        )
        db.commit()

        # Record metrics and logs
        duration_ms = (time.time() - start_time) * 1000
        record_scan(result.status.value, result.score, source)
        log_scan(request_id, request_body.user_id, result.status.value, result.score, source, duration_ms)

        return ScanResponse(
            transaction_id=str(db_txn.id),
            score=result.score,
            status=result.status,
            reason=result.reason,
            source=source,
            created_at=now.isoformat(),
        )

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
