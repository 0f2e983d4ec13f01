"""FastAPI application factory"""

import logging
from typing import Optional
from fastapi import FastAPI

from inbank_gateway.api import service
from inbank_gateway.api.dependencies import get_decision_engine
from inbank_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from inbank_gateway.api.v1 import decision
from inbank_gateway.domain.decision_engine import DecisionEngine
from inbank_gateway.infrastructure.observability.logging import setup_logging
from inbank_gateway.config import settings

# Logging is configured once per process, not per app instance
setup_logging(settings.log_level)


def create_app(engine: Optional[DecisionEngine] = None) -> FastAPI:
    """
    Build the loan decision app.

    A given engine replaces the process-wide default for this app only,
    e.g. one with a pinned clock or custom rules.
    """
    app = FastAPI(
        title="Inbank Loan Decision Gateway",
        description="Loan amount and period decision service",
        version="0.1.0",
    )

    # Last added runs first, so request IDs exist before metrics are taken
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(service.router, tags=["service"])
    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    if engine is not None:
        app.dependency_overrides[get_decision_engine] = lambda: engine

    logging.info(
        "Application created",
        extra={"custom_engine": engine is not None, "minimum_loan_amount": settings.minimum_loan_amount},
    )
    return app


app = create_app()
