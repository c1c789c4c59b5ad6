"""Dependency injection for FastAPI endpoints"""

from datetime import datetime, timezone
from typing import Callable

from fastapi import Request
from fraudscan_gateway.domain.registry import ScorerRegistry
from fraudscan_gateway.infrastructure.clients.prediction import PredictionClient

# One registry per process: scorer history must outlive individual requests
scorer_registry = ScorerRegistry()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_prediction_client() -> PredictionClient:
    """Provide remote prediction client instance"""
    return PredictionClient()


def get_scorer_registry() -> ScorerRegistry:
    """Provide the process-wide scorer registry"""
    return scorer_registry


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_clock() -> Callable[[], datetime]:
    """Provide the wall clock used to timestamp scans"""
    return utc_now
