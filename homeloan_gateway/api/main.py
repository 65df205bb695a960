"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from homeloan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from homeloan_gateway.api.v1 import borrowing, repayment, stamp_duty
from homeloan_gateway.infrastructure.observability.logging import setup_logging
from homeloan_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Home Loan Calculators",
        description="Indicative repayment, borrowing capacity and stamp duty estimates",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(repayment.router, prefix="/v1", tags=["repayments"])
    app.include_router(borrowing.router, prefix="/v1", tags=["borrowing"])
    app.include_router(stamp_duty.router, prefix="/v1", tags=["stamp-duty"])

    return app


app = create_app()
