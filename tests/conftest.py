"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from mela_calculator.api.main import create_app
from mela_calculator.domain.models import (
    CreditCatalog,
    CreditTier,
    RangeCreditProduct,
    TieredCreditProduct,
)


@pytest.fixture
def range_product() -> RangeCreditProduct:
    """Range product without a daily fee cap"""
    return RangeCreditProduct(
        type="Test Range",
        min_loan=Decimal("100"),
        max_loan=Decimal("10000"),
        payment_period_days=30,
        facilitation_fee_percent=Decimal("5"),
        daily_fee_percent=Decimal("1"),
        penalty_percent=Decimal("2"),
    )


@pytest.fixture
def capped_product() -> RangeCreditProduct:
    """Same pricing with cumulative daily fee capped at 3% of the loan"""
    return RangeCreditProduct(
        type="Test Capped",
        min_loan=Decimal("100"),
        max_loan=Decimal("10000"),
        payment_period_days=30,
        facilitation_fee_percent=Decimal("5"),
        daily_fee_percent=Decimal("1"),
        penalty_percent=Decimal("2"),
        daily_fee_max_percent=Decimal("3"),
    )


@pytest.fixture
def tiers() -> tuple[CreditTier, ...]:
    return (
        CreditTier(
            amount=Decimal("500"),
            facilitation_fee_percent=Decimal("4"),
            daily_fee_percent=Decimal("0.5"),
            penalty_percent=Decimal("1"),
        ),
        CreditTier(
            amount=Decimal("2000"),
            facilitation_fee_percent=Decimal("3"),
            daily_fee_percent=Decimal("0.4"),
            penalty_percent=Decimal("1"),
        ),
    )


@pytest.fixture
def tiered_product(tiers) -> TieredCreditProduct:
    """Tiered product with a known 30-day payment period"""
    return TieredCreditProduct(type="Endekise", amounts=tiers)


@pytest.fixture
def unmapped_tiered_product(tiers) -> TieredCreditProduct:
    """Tiered product with no payment period entry"""
    return TieredCreditProduct(type="Unlisted Tiered", amounts=tiers)


@pytest.fixture
def catalog(range_product, capped_product, tiered_product, unmapped_tiered_product) -> CreditCatalog:
    return CreditCatalog(
        products=(range_product, capped_product, tiered_product, unmapped_tiered_product)
    )


@pytest.fixture
def start() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def client(catalog: CreditCatalog) -> TestClient:
    """Create FastAPI test client with the test catalog"""
    app = create_app(catalog=catalog)
    return TestClient(app)
