"""POST /api/calculate - Loan repayment calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from mela_calculator.api.v1.schemas import CalculateRequest, CalculateResponse, result_to_schema
from mela_calculator.api.dependencies import get_catalog, get_request_id
from mela_calculator.config import settings
from mela_calculator.domain.engine import calculate
from mela_calculator.domain.exceptions import CalculationError
from mela_calculator.domain.models import CalculationRequest, CreditCatalog
from mela_calculator.infrastructure.observability.metrics import record_calculation, record_rejection
from mela_calculator.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/calculate", response_model=CalculateResponse)
def calculate_repayment(
    request_body: CalculateRequest,
    request: Request,
    catalog: CreditCatalog = Depends(get_catalog),
):
    """
    Simulate repayment of a loan over a date range.

    Flow:
    1. Validate credit type, amount and dates against the catalog
    2. Compute facilitation fee, daily fees and penalty
    3. Build the day-by-day schedule
    4. Record metrics and return the result
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate(
            CalculationRequest(
                credit_type=request_body.credit_type,
                loan_amount=request_body.loan_amount,
                start_date=request_body.start_date,
                end_date=request_body.end_date,
            ),
            catalog,
            max_loan_amount=settings.max_loan_amount,
        )

    except CalculationError as e:
        record_rejection(e)
        logging.warning(f"Calculation rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    response = result_to_schema(result)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(response.credit_type, response.loan_amount, response.loan_period_days, response.penalty_fee)
    log_calculation(
        request_id,
        response.credit_type,
        response.loan_amount,
        response.loan_period_days,
        response.total_repayment,
        duration_ms,
    )

    return response
