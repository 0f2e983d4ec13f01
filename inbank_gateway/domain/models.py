"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Decision:
    """
    Outcome of a loan application.

    Either both approved_amount and approved_period are set, or only
    rejection_reason is. Use the approved/rejected constructors.
    """

    approved_amount: Optional[int] = None
    approved_period: Optional[int] = None  # months
    rejection_reason: Optional[str] = None

    def __post_init__(self) -> None:
        has_offer = self.approved_amount is not None and self.approved_period is not None
        has_partial_offer = (self.approved_amount is None) != (self.approved_period is None)
        has_reason = self.rejection_reason is not None

        if has_partial_offer or has_offer == has_reason:
            raise ValueError("Decision needs either amount and period, or a rejection reason")

    @classmethod
    def approved(cls, amount: int, period: int) -> "Decision":
        return cls(approved_amount=amount, approved_period=period)

    @classmethod
    def rejected(cls, reason: str) -> "Decision":
        return cls(rejection_reason=reason)

    @property
    def is_approved(self) -> bool:
        return self.approved_amount is not None
