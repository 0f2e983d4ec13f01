"""Prometheus metrics for monitoring decision outcomes and approved amounts"""

from typing import Optional
from prometheus_client import Counter, Histogram

from inbank_gateway.config import Settings, settings as default_settings

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected | age_ineligible | no_valid_loan | error
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # with defaults: <2000, 2000-4999, 5000-7499, 7500+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def amount_bucket(amount: int, rules: Optional[Settings] = None) -> str:
    """
    Bucket label for an approved amount.

    Edges start at the minimum loan amount, followed by the configured
    approved_amount_bucket_edges.
    """
    rules = rules or default_settings
    edges = [rules.minimum_loan_amount, *sorted(rules.approved_amount_bucket_edges)]

    if amount < edges[0]:
        return f"<{edges[0]}"

    for lower, upper in zip(edges, edges[1:]):
        if amount < upper:
            return f"{lower}-{upper - 1}"

    return f"{edges[-1]}+"


def record_decision(outcome: str, approved_amount: Optional[int] = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if approved_amount is not None:
        approved_amount_bucket_counter.labels(bucket=amount_bucket(approved_amount)).inc()
