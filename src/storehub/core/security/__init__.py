"""Security utilities - access tokens and caller identity."""

from src.storehub.core.security.principal import (
    Principal,
    is_platform_admin,
    principal_from_claims,
)
from src.storehub.core.security.tokens import create_access_token, decode_token

__all__ = [
    # Tokens
    "create_access_token",
    "decode_token",
    # Identity
    "Principal",
    "is_platform_admin",
    "principal_from_claims",
]
