"""Tier resolution for tiered-priced credit products"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from mela_calculator.domain.models import CreditTier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierRange:
    """Half-open amount interval [min_amount, max_exclusive) served by a tier"""

    tier: CreditTier
    min_amount: Decimal
    max_exclusive: Optional[Decimal] = None  # None: unbounded above

    def contains(self, amount: Decimal) -> bool:
        if amount < self.min_amount:
            return False
        return self.max_exclusive is None or amount < self.max_exclusive


def build_tier_ranges(tiers: Iterable[CreditTier]) -> List[TierRange]:
    """
    Partition the amount axis into half-open intervals, one per tier.

    Tiers are sorted ascending by amount. Duplicate amounts are bad catalog
    data: the first tier seen wins and later duplicates are dropped.
    """
    unique: List[CreditTier] = []
    seen = set()
    for tier in sorted(tiers, key=lambda t: t.amount):
        if tier.amount in seen:
            logger.warning("Duplicate tier amount %s ignored", tier.amount)
            continue
        seen.add(tier.amount)
        unique.append(tier)

    return [
        TierRange(
            tier=tier,
            min_amount=tier.amount,
            max_exclusive=unique[i + 1].amount if i + 1 < len(unique) else None,
        )
        for i, tier in enumerate(unique)
    ]


def resolve_tier(
    tiers: Iterable[CreditTier],
    amount: Decimal,
    max_loan_amount: Decimal,
) -> Optional[CreditTier]:
    """
    Find the tier whose interval contains amount.

    Returns None when amount is above the global ceiling or below the lowest
    tier. An amount equal to a tier boundary belongs to the upper tier.
    """
    if amount > max_loan_amount:
        return None

    for tier_range in build_tier_ranges(tiers):
        if tier_range.contains(amount):
            return tier_range.tier
    return None
