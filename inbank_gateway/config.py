"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "inbank-gateway"
    log_level: str = "INFO"

    # Loan limits
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12  # months
    maximum_loan_period: int = 60  # months
    loan_amount_step: int = 100

    # Scoring
    minimum_credit_score_to_approve: float = 0.1
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    # Lower bounds of the last-four-digit segments, below segment 1 is debt
    segment_1_threshold: int = 2500
    segment_2_threshold: int = 5000
    segment_3_threshold: int = 7500

    # Age limits in years
    minimum_age: int = 18
    expected_lifeline: int = 76

    # Metrics: approved amount bucket edges above minimum_loan_amount
    approved_amount_bucket_edges: List[int] = [5000, 7500]


settings = Settings()
