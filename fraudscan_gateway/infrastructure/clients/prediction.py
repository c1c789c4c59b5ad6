"""Remote prediction service HTTP client"""

from typing import Any, Dict, Optional

import httpx

from fraudscan_gateway.config import settings
from fraudscan_gateway.domain.exceptions import PredictionServiceError
from fraudscan_gateway.domain.models import RiskStatus, ScoreResult, TransactionCandidate
from fraudscan_gateway.infrastructure.observability.metrics import prediction_latency_histogram

DEFAULT_SCORE = 0.5


class PredictionClient:
    """Client for the external fraud prediction model"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.prediction_api_base
        self.timeout = timeout or settings.prediction_timeout_seconds
        self.transport = transport

    async def predict(self, candidate: TransactionCandidate) -> ScoreResult:
        """
        Ask the remote model to score a transaction.

        Response contract:
        - score: `risk_score`, falling back to `probability`, then 0.5
        - status: Fraud when `prediction == "Fraud"` or `is_fraud` is truthy, else Safe
        - reason: optional free text

        Raises:
            PredictionServiceError: On timeout, network failure, non-2xx status, or malformed body
        """
        payload = {
            "amount": candidate.amount,
            "time": candidate.time_of_day,
            "location": candidate.location,
            "type": candidate.type,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with prediction_latency_histogram.time():
                    response = await client.post(f"{self.base_url}/predict", json=payload)
                response.raise_for_status()
                return parse_prediction(response.json())

            except httpx.TimeoutException as e:
                raise PredictionServiceError(f"Prediction service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise PredictionServiceError(f"Prediction service error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise PredictionServiceError(f"Prediction service unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise PredictionServiceError(f"Invalid prediction response: {e}") from e


def parse_prediction(data: Dict[str, Any]) -> ScoreResult:
    """Map a prediction response body onto a ScoreResult"""
    if not isinstance(data, dict):
        raise TypeError(f"expected JSON object, got {type(data).__name__}")

    score = data.get("risk_score")
    if score is None:
        score = data.get("probability")
    if score is None:
        score = DEFAULT_SCORE

    is_fraud = data.get("prediction") == RiskStatus.FRAUD.value or bool(data.get("is_fraud"))
    status = RiskStatus.FRAUD if is_fraud else RiskStatus.SAFE

    return ScoreResult(score=float(score), status=status, reason=data.get("reason") or "")
