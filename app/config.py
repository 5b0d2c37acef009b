"""Application settings loaded from environment variables."""
from decimal import Decimal
from typing import List, Optional
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Caminho absoluto para o ficheiro .env
ENV_FILE = Path(__file__).parent.parent / ".env"

_DEV_SECRET_KEY = "dev-secret-key-change-me"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Imoveis-Classificados"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    # Database
    database_url: str = "sqlite+aiosqlite:///./imoveis.db"
    auto_create_schema: bool = True
    seed_demo_data: bool = True

    # Auth
    secret_key: str = _DEV_SECRET_KEY
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    # Listings
    listing_validity_days: int = 30
    default_listing_price: Decimal = Decimal("99.90")
    default_admin_contact_phone: Optional[str] = "5511999998888"

    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(('postgresql+asyncpg://', 'sqlite+aiosqlite://')):
            raise ValueError('database_url must use async driver')
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            import json
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        if not v or v == _DEV_SECRET_KEY:
            import warnings
            warnings.warn(
                "SECRET_KEY não configurada — tokens assinados com a chave de desenvolvimento.",
                stacklevel=2,
            )
        return v or _DEV_SECRET_KEY

    @field_validator("listing_validity_days")
    @classmethod
    def validate_listing_validity_days(cls, v: int) -> int:
        if v < 1:
            raise ValueError("listing_validity_days must be at least 1")
        return v


settings = Settings()
