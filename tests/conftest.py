"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from inbank_gateway.api.main import create_app
from inbank_gateway.config import Settings
from inbank_gateway.domain.decision_engine import DecisionEngine


# Valid Estonian personal codes, one per credit segment
DEBTOR_CODE = "37605030299"  # born 1976-05-03, digits 0299
SEGMENT_1_CODE = "50307172740"  # born 2003-07-17, digits 2740
SEGMENT_2_CODE = "38411266610"  # born 1984-11-26, digits 6610
SEGMENT_3_CODE = "35006069515"  # born 1950-06-06, digits 9515
MINOR_CODE = "51001012743"  # born 2010-01-01, digits 2743

TODAY = date(2024, 1, 15)


@pytest.fixture
def rules() -> Settings:
    """Default business constants, isolated from any local .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def engine(rules: Settings) -> DecisionEngine:
    """Decision engine with the clock pinned to TODAY"""
    return DecisionEngine(rules=rules, clock=lambda: TODAY)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client using the pinned-clock engine"""
    return TestClient(create_app(engine=engine))
