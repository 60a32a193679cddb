"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from mela_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from mela_calculator.api.v1 import calculate, credits
from mela_calculator.domain.models import CreditCatalog
from mela_calculator.infrastructure.catalog import load_catalog
from mela_calculator.infrastructure.observability.logging import setup_logging
from mela_calculator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(catalog: CreditCatalog | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    The catalog is loaded once here and shared read-only by all requests.
    """
    app = FastAPI(
        title="Mela Microcredit Calculator",
        description="Loan repayment simulation for microcredit products",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.catalog = catalog if catalog is not None else load_catalog(settings.catalog_path)

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(credits.router, prefix=settings.api_prefix, tags=["credits"])
    app.include_router(calculate.router, prefix=settings.api_prefix, tags=["calculations"])

    return app


app = create_app()
