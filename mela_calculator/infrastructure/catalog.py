"""Credit catalog loading from the JSON product file"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from mela_calculator.domain.exceptions import CatalogError
from mela_calculator.domain.models import (
    CreditCatalog,
    CreditProduct,
    CreditTier,
    RangeCreditProduct,
    TieredCreditProduct,
)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "credits.json"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class RangeCreditRecord(_Record):
    """Range-priced product as stored in the catalog file"""

    type: str = Field(..., min_length=1)
    min_loan: Decimal = Field(..., gt=0)
    max_loan: Decimal = Field(..., gt=0)
    payment_period_days: int = Field(..., gt=0)
    facilitation_fee_percent: Decimal = Field(..., ge=0)
    daily_fee_percent: Decimal = Field(..., ge=0)
    daily_fee_max_percent: Optional[Decimal] = Field(None, ge=0)
    penalty_percent: Decimal = Field(..., ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "RangeCreditRecord":
        if self.min_loan > self.max_loan:
            raise ValueError(f"minLoan {self.min_loan} is above maxLoan {self.max_loan}")
        return self

    def to_product(self) -> RangeCreditProduct:
        return RangeCreditProduct(
            type=self.type,
            min_loan=self.min_loan,
            max_loan=self.max_loan,
            payment_period_days=self.payment_period_days,
            facilitation_fee_percent=self.facilitation_fee_percent,
            daily_fee_percent=self.daily_fee_percent,
            penalty_percent=self.penalty_percent,
            daily_fee_max_percent=self.daily_fee_max_percent,
        )


class TierRecord(_Record):
    amount: Decimal = Field(..., gt=0)
    facilitation_fee_percent: Decimal = Field(..., ge=0)
    daily_fee_percent: Decimal = Field(..., ge=0)
    penalty_percent: Decimal = Field(..., ge=0)


class TieredCreditRecord(_Record):
    """Tiered-priced product as stored in the catalog file"""

    type: str = Field(..., min_length=1)
    amounts: List[TierRecord] = Field(..., min_length=1)

    def to_product(self) -> TieredCreditProduct:
        return TieredCreditProduct(
            type=self.type,
            amounts=tuple(
                CreditTier(
                    amount=t.amount,
                    facilitation_fee_percent=t.facilitation_fee_percent,
                    daily_fee_percent=t.daily_fee_percent,
                    penalty_percent=t.penalty_percent,
                )
                for t in self.amounts
            ),
        )


def parse_product(raw: Dict[str, Any]) -> CreditProduct:
    """
    Convert one catalog record into a domain product.

    The shape is told apart by field presence: minLoan/maxLoan means
    range-priced, amounts means tiered.

    Raises:
        CatalogError: If the record matches neither shape or fails validation
    """
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog record must be an object, got {type(raw).__name__}")

    try:
        if "minLoan" in raw and "maxLoan" in raw:
            return RangeCreditRecord.model_validate(raw).to_product()
        if "amounts" in raw:
            return TieredCreditRecord.model_validate(raw).to_product()
    except ValidationError as e:
        raise CatalogError(f"Invalid credit record {raw.get('type')!r}: {e}") from e

    raise CatalogError(f"Credit record {raw.get('type')!r} is neither range nor tiered shaped")


def build_catalog(records: List[Dict[str, Any]]) -> CreditCatalog:
    """Build an immutable catalog, rejecting duplicate credit type names"""
    products = [parse_product(raw) for raw in records]

    names = [p.type for p in products]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate credit types in catalog: {', '.join(duplicates)}")

    return CreditCatalog(products=tuple(products))


def load_catalog(path: str | Path | None = None) -> CreditCatalog:
    """
    Load the credit catalog from a JSON file.

    Accepts either a bare list of records or {"credits": [...]}.

    Raises:
        CatalogError: On unreadable file, invalid JSON, or malformed records
    """
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH

    try:
        with catalog_path.open(encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except OSError as e:
        raise CatalogError(f"Cannot read credit catalog {catalog_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Credit catalog {catalog_path} is not valid JSON: {e}") from e

    records = data.get("credits") if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise CatalogError(f"Credit catalog {catalog_path} must hold a list of credits")

    catalog = build_catalog(records)
    logging.info(
        "Credit catalog loaded",
        extra={"catalog_path": str(catalog_path), "credit_count": len(catalog)},
    )
    return catalog
