"""POST /v1/repayment - loan repayment calculator endpoints"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from homeloan_gateway.api.v1.schemas import (
    RepaymentComparisonResponse,
    RepaymentRequest,
    RepaymentResponse,
)
from homeloan_gateway.api.dependencies import get_request_id
from homeloan_gateway.domain.amortization import (
    compare_repayment_types,
    compute_repayment,
    parse_frequency,
    parse_repayment_type,
)
from homeloan_gateway.domain.models import LoanInput, RepaymentResult, RepaymentType
from homeloan_gateway.infrastructure.observability.metrics import record_calculation
from homeloan_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


def _loan_from_request(request_body: RepaymentRequest) -> LoanInput:
    return LoanInput(
        principal=request_body.principal,
        annual_rate_percent=request_body.annual_rate_percent,
        term_years=request_body.term_years,
        repayment_type=parse_repayment_type(request_body.repayment_type),
        frequency=parse_frequency(request_body.frequency),
    )


def _to_response(loan: LoanInput, repayment_type: RepaymentType, result: RepaymentResult) -> RepaymentResponse:
    return RepaymentResponse(
        repayment_type=repayment_type.value,
        frequency=loan.frequency.value,
        periodic_payment=result.periodic_payment,
        total_paid=result.total_paid,
        total_interest=result.total_interest,
    )


@router.post("/repayment", response_model=RepaymentResponse)
def calculate_repayment(request_body: RepaymentRequest, request: Request):
    """
    Calculate the periodic repayment for a loan.

    Blank or invalid numeric fields count as zero; unknown frequencies are
    treated as monthly and unknown repayment types as principal-and-interest.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        loan = _loan_from_request(request_body)
        result = compute_repayment(loan)

        duration_ms = (time.time() - start_time) * 1000
        record_calculation("repayment")
        log_calculation(
            request_id,
            "repayment",
            duration_ms,
            repayment_type=loan.repayment_type.value,
            frequency=loan.frequency.value,
            periodic_payment=result.periodic_payment,
        )

        return _to_response(loan, loan.repayment_type, result)

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/repayment/comparison", response_model=RepaymentComparisonResponse)
def calculate_repayment_comparison(request_body: RepaymentRequest, request: Request):
    """
    Calculate principal-and-interest and interest-only repayments side by side.

    The repayment_type field of the request is ignored.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        loan = _loan_from_request(request_body)
        comparison = compare_repayment_types(loan)

        duration_ms = (time.time() - start_time) * 1000
        record_calculation("repayment_comparison")
        log_calculation(
            request_id,
            "repayment_comparison",
            duration_ms,
            frequency=loan.frequency.value,
            principal_and_interest_payment=comparison.principal_and_interest.periodic_payment,
            interest_only_payment=comparison.interest_only.periodic_payment,
        )

        return RepaymentComparisonResponse(
            principal_and_interest=_to_response(
                loan, RepaymentType.PRINCIPAL_AND_INTEREST, comparison.principal_and_interest
            ),
            interest_only=_to_response(loan, RepaymentType.INTEREST_ONLY, comparison.interest_only),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
