"""Day-by-day repayment schedule assembly"""

from datetime import date
from decimal import Decimal
from typing import List, Sequence

from mela_calculator.domain.models import ScheduleLine
from mela_calculator.utils.date_utils import generate_date_range
from mela_calculator.utils.money import ZERO, round_money


def build_schedule(
    loan_amount: Decimal,
    start_date: date,
    loan_period_days: int,
    allowed_period_days: int,
    daily_fees: Sequence[Decimal],
    penalty_fee_total: Decimal,
) -> List[ScheduleLine]:
    """
    Build one schedule line per day of the loan period.

    Principal stays constant. The penalty total is spread evenly over the
    overdue days (index >= allowed_period_days). Subtotal is cumulative:
    principal plus all daily fees and penalties through that day.
    """
    overdue_days = max(loan_period_days - allowed_period_days, 0)
    penalty_per_day = penalty_fee_total / overdue_days if overdue_days > 0 else ZERO

    daily_fee_running_total = ZERO
    penalty_running_total = ZERO
    schedule = []

    for index, day in enumerate(generate_date_range(start_date, loan_period_days)):
        daily_fee = daily_fees[index] if index < len(daily_fees) else ZERO
        penalty = penalty_per_day if index >= allowed_period_days else ZERO

        daily_fee_running_total += daily_fee
        penalty_running_total += penalty

        schedule.append(
            ScheduleLine(
                date=day,
                outstanding_principal=round_money(loan_amount),
                daily_fee=round_money(daily_fee),
                penalty_fee=round_money(penalty),
                subtotal=round_money(loan_amount + daily_fee_running_total + penalty_running_total),
            )
        )

    return schedule
