"""Repayment calculation engine - core business logic for loan simulations"""

from datetime import date
from decimal import Decimal
from typing import Tuple

from mela_calculator.domain.exceptions import (
    AmountOutOfRange,
    AmountTooLarge,
    InvalidAmount,
    InvalidDate,
    InvalidDateRange,
    NoMatchingTier,
    UnsupportedCreditType,
)
from mela_calculator.domain.fees import (
    capped_daily_fees,
    facilitation_fee,
    flat_daily_fees,
    flat_total_daily_fee,
    total_daily_fee,
)
from mela_calculator.domain.models import (
    CalculationRequest,
    CalculationResult,
    CreditCatalog,
    CreditProduct,
    CreditTier,
    RangeCreditProduct,
    TieredCreditProduct,
)
from mela_calculator.domain.penalty import allowed_period_days, penalty_fee
from mela_calculator.domain.schedule import build_schedule
from mela_calculator.domain.tiers import resolve_tier
from mela_calculator.utils.date_utils import inclusive_day_count, parse_iso_date
from mela_calculator.utils.money import round_money, to_decimal

MAX_LOAN_AMOUNT = Decimal("6000000")


def list_products(catalog: CreditCatalog) -> Tuple[CreditProduct, ...]:
    """Return the catalog's products as loaded"""
    return catalog.products


def calculate(
    request: CalculationRequest,
    catalog: CreditCatalog,
    max_loan_amount: Decimal = MAX_LOAN_AMOUNT,
) -> CalculationResult:
    """
    Main entry point: validate the request and compute fees and schedule.

    Every check runs before any computation; a rejected request raises a
    CalculationError subclass and never yields a partial result.

    Raises:
        UnsupportedCreditType, InvalidAmount, AmountTooLarge, InvalidDate,
        InvalidDateRange, AmountOutOfRange, NoMatchingTier
    """
    product = catalog.find(request.credit_type)
    if product is None:
        raise UnsupportedCreditType("Unsupported credit type.")

    loan_amount = _parse_amount(request.loan_amount)
    if loan_amount > max_loan_amount:
        raise AmountTooLarge(f"Loan amount cannot exceed ETB {max_loan_amount:,.0f}.")

    try:
        start_date = parse_iso_date(request.start_date)
        end_date = parse_iso_date(request.end_date)
    except ValueError as e:
        raise InvalidDate("Invalid date format. Use ISO 8601 (YYYY-MM-DD).") from e

    if start_date > end_date:
        raise InvalidDateRange("Start date must be on or before the end date.")

    loan_period_days = inclusive_day_count(start_date, end_date)
    if loan_period_days <= 0:
        raise InvalidDateRange("Loan period must be at least one day.")

    if isinstance(product, RangeCreditProduct):
        if loan_amount < product.min_loan or loan_amount > product.max_loan:
            raise AmountOutOfRange("Loan amount is outside the allowed range for this credit type.")
        return _calculate_range(product, loan_amount, start_date, end_date, loan_period_days)

    if isinstance(product, TieredCreditProduct):
        tier = resolve_tier(product.amounts, loan_amount, max_loan_amount)
        if tier is None:
            raise NoMatchingTier(
                "Loan amount does not fall within available ranges for the selected credit type."
            )
        return _calculate_tiered(product, tier, loan_amount, start_date, end_date, loan_period_days)

    raise TypeError(f"Unknown credit product shape: {type(product).__name__}")


def _parse_amount(value) -> Decimal:
    try:
        amount = to_decimal(value)
    except ValueError as e:
        raise InvalidAmount("Loan amount must be a positive number.") from e

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount("Loan amount must be a positive number.")
    return amount


def _calculate_range(
    product: RangeCreditProduct,
    loan_amount: Decimal,
    start_date: date,
    end_date: date,
    loan_period_days: int,
) -> CalculationResult:
    daily_fees = capped_daily_fees(
        loan_amount,
        product.daily_fee_percent,
        loan_period_days,
        product.daily_fee_max_percent,
    )
    allowed_days = allowed_period_days(product, loan_period_days)

    return _assemble_result(
        credit_type=product.type,
        loan_amount=loan_amount,
        start_date=start_date,
        loan_period_days=loan_period_days,
        allowed_days=allowed_days,
        facilitation=facilitation_fee(loan_amount, product.facilitation_fee_percent),
        daily_fees=daily_fees,
        daily_fee_total=total_daily_fee(daily_fees),
        penalty=penalty_fee(loan_amount, product.penalty_percent, start_date, end_date, allowed_days),
    )


def _calculate_tiered(
    product: TieredCreditProduct,
    tier: CreditTier,
    loan_amount: Decimal,
    start_date: date,
    end_date: date,
    loan_period_days: int,
) -> CalculationResult:
    allowed_days = allowed_period_days(product, loan_period_days)

    return _assemble_result(
        credit_type=product.type,
        loan_amount=loan_amount,
        start_date=start_date,
        loan_period_days=loan_period_days,
        allowed_days=allowed_days,
        facilitation=facilitation_fee(loan_amount, tier.facilitation_fee_percent),
        daily_fees=flat_daily_fees(loan_amount, tier.daily_fee_percent, loan_period_days),
        daily_fee_total=flat_total_daily_fee(loan_amount, tier.daily_fee_percent, loan_period_days),
        penalty=penalty_fee(loan_amount, tier.penalty_percent, start_date, end_date, allowed_days),
    )


def _assemble_result(
    credit_type: str,
    loan_amount: Decimal,
    start_date: date,
    loan_period_days: int,
    allowed_days: int,
    facilitation: Decimal,
    daily_fees: list,
    daily_fee_total: Decimal,
    penalty: Decimal,
) -> CalculationResult:
    schedule = build_schedule(loan_amount, start_date, loan_period_days, allowed_days, daily_fees, penalty)

    return CalculationResult(
        credit_type=credit_type,
        loan_amount=loan_amount,
        loan_period_days=loan_period_days,
        facilitation_fee=facilitation,
        daily_fee=daily_fee_total,
        penalty_fee=penalty,
        total_repayment=round_money(loan_amount + facilitation + daily_fee_total + penalty),
        schedule=schedule,
    )
