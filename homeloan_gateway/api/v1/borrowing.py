"""POST /v1/borrowing-capacity - maximum loan estimate endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from homeloan_gateway.api.v1.schemas import BorrowingCapacityRequest, BorrowingCapacityResponse
from homeloan_gateway.api.dependencies import (
    get_hem_table,
    get_request_id,
    get_serviceability_parameters,
)
from homeloan_gateway.domain.borrowing import compute_borrowing_capacity
from homeloan_gateway.domain.models import (
    BorrowingInput,
    HemTable,
    HouseholdProfile,
    ServiceabilityParameters,
)
from homeloan_gateway.infrastructure.observability.metrics import record_borrowing_capacity
from homeloan_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/borrowing-capacity", response_model=BorrowingCapacityResponse)
def calculate_borrowing_capacity(
    request_body: BorrowingCapacityRequest,
    request: Request,
    parameters: ServiceabilityParameters = Depends(get_serviceability_parameters),
    hem_table: HemTable = Depends(get_hem_table),
):
    """
    Estimate how much the household can borrow.

    Flow:
    1. Build household profile and income/commitment figures from the form
    2. Run the serviceability test with configured lender assumptions
    3. Return capacity together with the HEM figure that was applied
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        borrowing = BorrowingInput(
            primary_income=request_body.primary_income,
            other_income=request_body.other_income,
            household=HouseholdProfile(
                adult_count=request_body.adult_count,
                child_count=request_body.child_count,
            ),
            existing_monthly_debt_repayments=request_body.existing_monthly_debt_repayments,
            credit_card_total_limit=request_body.credit_card_total_limit,
        )
        result = compute_borrowing_capacity(borrowing, parameters, hem_table)

        duration_ms = (time.time() - start_time) * 1000
        record_borrowing_capacity(result.max_principal)
        log_calculation(
            request_id,
            "borrowing_capacity",
            duration_ms,
            max_principal=result.max_principal,
            applied_hem_amount=result.applied_hem_amount,
        )

        return BorrowingCapacityResponse(
            max_principal=result.max_principal,
            applied_hem_amount=result.applied_hem_amount,
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
