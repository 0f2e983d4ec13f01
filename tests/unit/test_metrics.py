"""Unit tests for decision metrics"""

from prometheus_client import REGISTRY
from inbank_gateway.config import Settings
from inbank_gateway.infrastructure.observability.metrics import amount_bucket, record_decision


def test_amount_bucket_boundaries():
    assert amount_bucket(1950) == "<2000"
    assert amount_bucket(2000) == "2000-4999"
    assert amount_bucket(5000) == "5000-7499"
    assert amount_bucket(10000) == "7500+"


def test_record_decision_counts_outcome_and_bucket():
    def sample(name, labels):
        return REGISTRY.get_sample_value(name, labels) or 0.0

    approved_before = sample("loan_decision_total", {"outcome": "approved"})
    bucket_before = sample("loan_approved_amount_bucket_total", {"bucket": "7500+"})

    record_decision("approved", 10000)

    assert sample("loan_decision_total", {"outcome": "approved"}) == approved_before + 1
    assert sample("loan_approved_amount_bucket_total", {"bucket": "7500+"}) == bucket_before + 1


def test_amount_bucket_follows_configured_edges():
    """Labels move with the configured minimum and edges"""
    rules = Settings(_env_file=None, minimum_loan_amount=1000, approved_amount_bucket_edges=[3000])

    assert amount_bucket(999, rules) == "<1000"
    assert amount_bucket(1000, rules) == "1000-2999"
    assert amount_bucket(3000, rules) == "3000+"
