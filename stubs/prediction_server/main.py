from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import os

app = FastAPI(title="Mock Prediction Server", version="1.0.0")
# PREDICTION_MODE=fail makes every prediction a 503 to exercise the gateway fallback
MODE = os.environ.get("PREDICTION_MODE", "ok")


class PredictRequest(BaseModel):
    amount: float
    time: float
    location: str
    type: str


@app.get("/health")
def health(): return {"status": "ok", "mode": MODE}

@app.post("/predict")
def predict(body: PredictRequest):
    if MODE == "fail":
        raise HTTPException(status_code=503, detail="model unavailable")
    probability = min(body.amount / 20000, 0.99)
    is_fraud = probability >= 0.5
    return {
        "risk_score": round(probability, 4),
        "prediction": "Fraud" if is_fraud else "Safe",
        "is_fraud": is_fraud,
        "reason": "Amount far above customer norm" if is_fraud else "",
    }
