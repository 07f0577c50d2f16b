import re
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_LIST_SEPARATORS = re.compile(r"[,;\s]+")


def _split_list(value: object) -> object:
    """Accept "a@x.com, b@y.com" style env values as well as real lists."""
    if isinstance(value, str):
        return [item for item in _LIST_SEPARATORS.split(value) if item]
    return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Storehub Access API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True
    log_user_emails: bool = False  # GDPR: keep emails out of logs unless enabled

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # Auth (hosted auth provider issues HS256 access tokens)
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_audience: str | None = "authenticated"
    access_token_expire_minutes: int = 60

    # Platform admins
    admin_emails: Annotated[list[str], NoDecode] = []
    admin_user_ids: Annotated[list[str], NoDecode] = []
    admin_email_domains: Annotated[list[str], NoDecode] = []
    admin_bypass: bool = False  # every authenticated user is an admin (local dev only)

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    @field_validator(
        "admin_emails",
        "admin_user_ids",
        "admin_email_domains",
        "cors_origins",
        mode="before",
    )
    @classmethod
    def split_list(cls, v: object) -> object:
        return _split_list(v)

    @field_validator("admin_emails", "admin_user_ids")
    @classmethod
    def normalize_lowercase(cls, v: list[str]) -> list[str]:
        return [item.strip().lower() for item in v if item.strip()]

    @field_validator("admin_email_domains")
    @classmethod
    def normalize_admin_domains(cls, v: list[str]) -> list[str]:
        return [domain.strip().lower().removeprefix("@") for domain in v if domain.strip()]

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Use the signing secret of your auth provider."
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if v != "HS256":
            raise ValueError(f"Unsupported JWT_ALGORITHM={v!r}. Allowed: HS256")
        return v

    @field_validator("jwt_audience")
    @classmethod
    def empty_audience_disables_check(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcards since credentials are allowed."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
