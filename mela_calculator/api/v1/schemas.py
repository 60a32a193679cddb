"""Pydantic schemas for API request/response validation"""

import datetime
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mela_calculator.domain.models import (
    CalculationResult,
    CreditProduct,
    RangeCreditProduct,
    TieredCreditProduct,
)


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CalculateRequest(CamelModel):
    """Request body for POST /api/calculate"""

    credit_type: str = Field(..., min_length=1, description="Credit product name")
    # The web front end posts `amount`
    loan_amount: float = Field(
        ...,
        validation_alias=AliasChoices("loanAmount", "amount", "loan_amount"),
        description="Requested loan amount (ETB)",
    )
    start_date: str = Field(..., description="First loan day, YYYY-MM-DD")
    end_date: str = Field(..., description="Last loan day, YYYY-MM-DD")


class TierSchema(CamelModel):
    amount: float
    facilitation_fee_percent: float
    daily_fee_percent: float
    penalty_percent: float


class RangeCreditSchema(CamelModel):
    """Range-priced credit product"""

    type: str
    min_loan: float
    max_loan: float
    payment_period_days: int
    facilitation_fee_percent: float
    daily_fee_percent: float
    daily_fee_max_percent: Optional[float] = None
    penalty_percent: float


class TieredCreditSchema(CamelModel):
    """Tiered-priced credit product"""

    type: str
    amounts: List[TierSchema]


CreditSchema = Union[RangeCreditSchema, TieredCreditSchema]


class ScheduleLineSchema(CamelModel):
    """Single day in the repayment schedule"""

    date: datetime.date
    outstanding_principal: float
    daily_fee: float
    penalty_fee: float
    subtotal: float


class CalculateResponse(CamelModel):
    """Response for POST /api/calculate"""

    credit_type: str
    loan_amount: float
    loan_period_days: int
    facilitation_fee: float
    daily_fee: float
    penalty_fee: float
    total_repayment: float
    schedule: List[ScheduleLineSchema]


def credit_to_schema(product: CreditProduct) -> CreditSchema:
    """Render a catalog product in its external record shape"""
    if isinstance(product, RangeCreditProduct):
        return RangeCreditSchema(
            type=product.type,
            min_loan=float(product.min_loan),
            max_loan=float(product.max_loan),
            payment_period_days=product.payment_period_days,
            facilitation_fee_percent=float(product.facilitation_fee_percent),
            daily_fee_percent=float(product.daily_fee_percent),
            daily_fee_max_percent=(
                float(product.daily_fee_max_percent) if product.daily_fee_max_percent is not None else None
            ),
            penalty_percent=float(product.penalty_percent),
        )

    if isinstance(product, TieredCreditProduct):
        return TieredCreditSchema(
            type=product.type,
            amounts=[
                TierSchema(
                    amount=float(t.amount),
                    facilitation_fee_percent=float(t.facilitation_fee_percent),
                    daily_fee_percent=float(t.daily_fee_percent),
                    penalty_percent=float(t.penalty_percent),
                )
                for t in product.amounts
            ],
        )

    raise TypeError(f"Unknown credit product shape: {type(product).__name__}")


def result_to_schema(result: CalculationResult) -> CalculateResponse:
    return CalculateResponse(
        credit_type=result.credit_type,
        loan_amount=float(result.loan_amount),
        loan_period_days=result.loan_period_days,
        facilitation_fee=float(result.facilitation_fee),
        daily_fee=float(result.daily_fee),
        penalty_fee=float(result.penalty_fee),
        total_repayment=float(result.total_repayment),
        schedule=[
            ScheduleLineSchema(
                date=line.date,
                outstanding_principal=float(line.outstanding_principal),
                daily_fee=float(line.daily_fee),
                penalty_fee=float(line.penalty_fee),
                subtotal=float(line.subtotal),
            )
            for line in result.schedule
        ],
    )
