"""Domain models - pure Python dataclasses representing credit products and calculations"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class RangeCreditProduct:
    """Credit priced over a continuous loan-amount interval with one fee schedule"""

    type: str
    min_loan: Decimal
    max_loan: Decimal
    payment_period_days: int
    facilitation_fee_percent: Decimal
    daily_fee_percent: Decimal
    penalty_percent: Decimal
    daily_fee_max_percent: Optional[Decimal] = None  # caps cumulative daily fee


@dataclass(frozen=True)
class CreditTier:
    """One pricing tier; applies from `amount` up to the next tier's amount"""

    amount: Decimal
    facilitation_fee_percent: Decimal
    daily_fee_percent: Decimal
    penalty_percent: Decimal


@dataclass(frozen=True)
class TieredCreditProduct:
    """Credit priced via discrete amount tiers"""

    type: str
    amounts: Tuple[CreditTier, ...]


CreditProduct = Union[RangeCreditProduct, TieredCreditProduct]


@dataclass(frozen=True)
class CreditCatalog:
    """Read-only set of credit products, loaded once at start-up"""

    products: Tuple[CreditProduct, ...] = ()

    def find(self, credit_type: str) -> Optional[CreditProduct]:
        for product in self.products:
            if product.type == credit_type:
                return product
        return None

    def __len__(self) -> int:
        return len(self.products)


@dataclass
class CalculationRequest:
    """Caller input for a repayment calculation"""

    credit_type: str
    loan_amount: Decimal | float | int | str
    start_date: date | str
    end_date: date | str


@dataclass
class ScheduleLine:
    """Single day of the repayment schedule"""

    date: date
    outstanding_principal: Decimal
    daily_fee: Decimal
    penalty_fee: Decimal
    subtotal: Decimal  # cumulative amount owed if settled through this day


@dataclass
class CalculationResult:
    """Output of a repayment calculation"""

    credit_type: str
    loan_amount: Decimal
    loan_period_days: int
    facilitation_fee: Decimal
    daily_fee: Decimal
    penalty_fee: Decimal
    total_repayment: Decimal
    schedule: List[ScheduleLine] = field(default_factory=list)
