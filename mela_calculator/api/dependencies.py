"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from mela_calculator.domain.models import CreditCatalog


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_catalog(request: Request) -> CreditCatalog:
    """Provide the credit catalog loaded at application start-up"""
    return request.app.state.catalog
