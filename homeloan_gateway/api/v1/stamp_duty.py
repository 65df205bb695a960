"""POST /v1/stamp-duty - property transfer duty endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from homeloan_gateway.api.v1.schemas import StampDutyRequest, StampDutyResponse
from homeloan_gateway.api.dependencies import get_first_home_exemption_threshold, get_request_id
from homeloan_gateway.domain.models import StampDutyInput
from homeloan_gateway.domain.stamp_duty import compute_stamp_duty
from homeloan_gateway.infrastructure.observability.metrics import record_stamp_duty
from homeloan_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/stamp-duty", response_model=StampDutyResponse)
def calculate_stamp_duty(
    request_body: StampDutyRequest,
    request: Request,
    exemption_threshold: float = Depends(get_first_home_exemption_threshold),
):
    """Calculate stamp duty using indicative Victorian general rates"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        purchase = StampDutyInput(
            property_value=request_body.property_value,
            is_first_home_buyer=request_body.is_first_home_buyer,
        )
        result = compute_stamp_duty(purchase, first_home_exemption_threshold=exemption_threshold)

        duration_ms = (time.time() - start_time) * 1000
        record_stamp_duty(result.exemption_applied)
        log_calculation(
            request_id,
            "stamp_duty",
            duration_ms,
            duty_payable=result.duty_payable,
            exemption_applied=result.exemption_applied,
        )

        return StampDutyResponse(
            duty_payable=result.duty_payable,
            exemption_applied=result.exemption_applied,
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
