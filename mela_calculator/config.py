"""Configuration management using Pydantic Settings"""

from decimal import Decimal
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Credit catalog
    catalog_path: Optional[str] = None  # None: packaged data/credits.json
    max_loan_amount: Decimal = Decimal("6000000")

    # Service
    service_name: str = "mela-calculator"
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # CORS (local web front end)
    cors_origins: List[str] = [
        "https://localhost:5173",
        "http://localhost:5173",
        "https://127.0.0.1:5173",
        "http://127.0.0.1:5173",
    ]


settings = Settings()
