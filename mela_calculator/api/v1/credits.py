"""GET /api/credits - List available credit products"""

from typing import List
from fastapi import APIRouter, Depends

from mela_calculator.api.v1.schemas import CreditSchema, credit_to_schema
from mela_calculator.api.dependencies import get_catalog
from mela_calculator.domain.engine import list_products
from mela_calculator.domain.models import CreditCatalog

router = APIRouter()


@router.get("/credits", response_model=List[CreditSchema], response_model_exclude_none=True)
def get_credits(catalog: CreditCatalog = Depends(get_catalog)):
    """
    Return every credit product in the catalog.

    Range products carry minLoan/maxLoan; tiered products carry amounts.
    """
    return [credit_to_schema(product) for product in list_products(catalog)]
