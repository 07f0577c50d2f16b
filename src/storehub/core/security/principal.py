"""The authenticated caller and platform admin detection."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.storehub.core.config import Settings


@dataclass(frozen=True)
class Principal:
    """Caller identity taken from a verified access token."""

    user_id: UUID
    email: str | None = None
    is_admin: bool = False


def _metadata_marks_admin(metadata: Any) -> bool:
    if not isinstance(metadata, Mapping):
        return False
    if metadata.get("is_admin") is True:
        return True
    role = metadata.get("role")
    return isinstance(role, str) and role.lower() == "admin"


def is_platform_admin(
    user_id: UUID,
    email: str | None,
    claims: Mapping[str, Any],
    settings: Settings,
) -> bool:
    """Whether the caller is a platform operator.

    Matches, in order: the bypass flag, configured user ids, configured
    emails, configured email domains, then an admin marker in the token's
    app_metadata or user_metadata.
    """
    if settings.admin_bypass:
        return True
    if str(user_id) in settings.admin_user_ids:
        return True

    normalized = (email or "").strip().lower()
    if normalized:
        if normalized in settings.admin_emails:
            return True
        _, _, domain = normalized.rpartition("@")
        if domain and domain in settings.admin_email_domains:
            return True

    return _metadata_marks_admin(claims.get("app_metadata")) or _metadata_marks_admin(
        claims.get("user_metadata")
    )


def principal_from_claims(claims: Mapping[str, Any], settings: Settings) -> Principal | None:
    """Build a Principal from decoded token claims. None if `sub` is not a UUID."""
    subject = claims.get("sub")
    if not subject:
        return None
    try:
        user_id = UUID(str(subject))
    except ValueError:
        return None

    email = claims.get("email")
    if not isinstance(email, str) or not email:
        email = None

    return Principal(
        user_id=user_id,
        email=email,
        is_admin=is_platform_admin(user_id, email, claims, settings),
    )
