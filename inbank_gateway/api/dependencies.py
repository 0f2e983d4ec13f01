"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from inbank_gateway.domain.decision_engine import DecisionEngine

_engine = DecisionEngine()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine() -> DecisionEngine:
    """Provide the shared decision engine; it holds no per-call state"""
    return _engine
