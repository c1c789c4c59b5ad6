"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fraudscan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fraudscan_gateway.api.v1 import admin, insights, scan, transactions
from fraudscan_gateway.infrastructure.database.models import Base
from fraudscan_gateway.infrastructure.database.session import engine
from fraudscan_gateway.infrastructure.observability.logging import setup_logging
from fraudscan_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables before serving"""
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        lifespan=lifespan,
        title="FraudScan Gateway",
        description="Transaction risk scanning with heuristic fallback scoring",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(scan.router, prefix="/v1", tags=["scans"])
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(admin.router, prefix="/v1", tags=["admin"])

    return app


app = create_app()
