"""Penalty calculation for repayment beyond the allowed payment period"""

import logging
from datetime import date
from decimal import Decimal
from typing import Dict

from mela_calculator.domain.models import CreditProduct, RangeCreditProduct, TieredCreditProduct
from mela_calculator.utils.date_utils import inclusive_day_count
from mela_calculator.utils.money import HUNDRED, ZERO, round_money

logger = logging.getLogger(__name__)

# Tiered products carry no payment period of their own.
# A tiered product missing from this table never incurs a penalty, because
# its allowed period falls back to the requested period length.
TIERED_PAYMENT_PERIODS: Dict[str, int] = {
    "Mela Monthly": 30,
    "50 Days Mela": 50,
    "Endekise": 30,
}


def allowed_period_days(product: CreditProduct, loan_period_days: int) -> int:
    """Number of days the loan may run before penalty accrues"""
    if isinstance(product, RangeCreditProduct):
        return product.payment_period_days

    if isinstance(product, TieredCreditProduct):
        period = TIERED_PAYMENT_PERIODS.get(product.type)
        if period is None:
            logger.debug("No payment period for tiered credit %r, penalty disabled", product.type)
            return loan_period_days
        return period

    raise TypeError(f"Unknown credit product shape: {type(product).__name__}")


def overdue_days(start_date: date, end_date: date, allowed_days: int) -> int:
    """
    Days between the last allowed day and end_date; 0 when not overdue.

    Counted from the period length so the last allowed day never has to be
    built as a date (it may lie past date.max).
    """
    return max(inclusive_day_count(start_date, end_date) - allowed_days, 0)


def penalty_fee(
    loan_amount: Decimal,
    penalty_percent: Decimal,
    start_date: date,
    end_date: date,
    allowed_days: int,
) -> Decimal:
    """
    Total penalty for the requested period, rounded once.

    penalty = loan_amount × penalty_percent × overdue_days / 100, or exactly
    zero when end_date is within the allowed window.
    """
    days = overdue_days(start_date, end_date, allowed_days)
    if days <= 0:
        return round_money(ZERO)
    return round_money(loan_amount * penalty_percent * days / HUNDRED)
