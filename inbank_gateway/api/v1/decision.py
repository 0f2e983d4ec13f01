"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from inbank_gateway.api.v1.schemas import LoanDecisionRequest, LoanDecisionResponse
from inbank_gateway.api.dependencies import get_decision_engine, get_request_id
from inbank_gateway.domain.decision_engine import DecisionEngine
from inbank_gateway.domain.exceptions import AgeEligibilityError, NoValidLoanError
from inbank_gateway.infrastructure.observability.metrics import record_decision
from inbank_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = LoanDecisionResponse(error_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "/loan/decision",
    response_model=LoanDecisionResponse,
    responses={
        400: {"model": LoanDecisionResponse},
        404: {"model": LoanDecisionResponse},
        422: {"model": LoanDecisionResponse},
        500: {"model": LoanDecisionResponse},
    },
)
def create_loan_decision(
    request_body: LoanDecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide on a loan application.

    Status codes:
    - 200: approved amount and period
    - 400: invalid personal code, amount or period
    - 404: no valid loan for the customer's segment
    - 422: age constraints not met
    - 500: unexpected failure
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    def finish(outcome: str, amount: Optional[int] = None, period: Optional[int] = None) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        record_decision(outcome, amount)
        log_decision(request_id, outcome, amount, period, duration_ms)

    try:
        decision = engine.decide(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )

    except AgeEligibilityError as e:
        logging.warning(f"Age check failed: {e}", extra={"request_id": request_id})
        finish("age_ineligible")
        return _error_response(422, str(e))

    except NoValidLoanError as e:
        logging.warning(f"No valid loan: {e}", extra={"request_id": request_id})
        finish("no_valid_loan")
        return _error_response(404, str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        finish("error")
        return _error_response(500, "An unexpected error occurred")

    if not decision.is_approved:
        finish("rejected")
        return _error_response(400, decision.rejection_reason)

    finish("approved", decision.approved_amount, decision.approved_period)

    return LoanDecisionResponse(
        loan_amount=decision.approved_amount,
        loan_period=decision.approved_period,
    )
