"""Facilitation and daily fee calculation"""

from decimal import Decimal
from typing import List, Optional

from mela_calculator.utils.money import ZERO, percent_of, round_money


def facilitation_fee(loan_amount: Decimal, facilitation_fee_percent: Decimal) -> Decimal:
    """One-time fee proportional to the loan amount, rounded once"""
    return round_money(percent_of(loan_amount, facilitation_fee_percent))


def capped_daily_fees(
    loan_amount: Decimal,
    daily_fee_percent: Decimal,
    loan_period_days: int,
    daily_fee_max_percent: Optional[Decimal] = None,
) -> List[Decimal]:
    """
    Per-day fees for a range-priced product, each rounded to cents.

    The optional cap limits the running total over the whole period, not
    each day: once the unrounded fees accumulated so far reach the cap,
    every remaining day contributes zero.
    """
    if daily_fee_percent <= 0:
        return [ZERO] * loan_period_days

    base_fee = percent_of(loan_amount, daily_fee_percent)
    # A zero cap percent counts as no cap
    cap = percent_of(loan_amount, daily_fee_max_percent) if daily_fee_max_percent else None

    fees = []
    accumulated = ZERO
    for _ in range(loan_period_days):
        fee = base_fee if cap is None else min(base_fee, max(cap - accumulated, ZERO))
        fees.append(round_money(fee))
        accumulated += fee

    return fees


def flat_daily_fees(loan_amount: Decimal, daily_fee_percent: Decimal, loan_period_days: int) -> List[Decimal]:
    """Per-day fees for a tiered product: the rounded base fee on every day"""
    return [round_money(percent_of(loan_amount, daily_fee_percent))] * loan_period_days


def total_daily_fee(daily_fees: List[Decimal]) -> Decimal:
    """Sum of already-rounded per-day fees, rounded again"""
    return round_money(sum(daily_fees, ZERO))


def flat_total_daily_fee(loan_amount: Decimal, daily_fee_percent: Decimal, loan_period_days: int) -> Decimal:
    """Tiered total: the unrounded base fee times the period, rounded once"""
    return round_money(percent_of(loan_amount, daily_fee_percent) * loan_period_days)
