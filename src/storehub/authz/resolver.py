"""Authorization resolver.

Decides whether a user may perform an action on a brand or branch using
direct membership first and, for branches without a direct membership,
authority inherited from the owning brand.
"""

from collections.abc import Awaitable, Collection
from typing import Any
from uuid import UUID

from src.storehub.authz.actions import Action, Scope, parse_action, scope_of
from src.storehub.authz.decision import (
    BranchResource,
    BrandResource,
    Decision,
    DenialReason,
    Denied,
    Granted,
    Resource,
)
from src.storehub.authz.inheritance import brand_to_effective_branch_role
from src.storehub.authz.policy import DEFAULT_POLICY, Policy
from src.storehub.authz.store import MembershipStore
from src.storehub.core.logging import get_logger
from src.storehub.models.enums import BranchRole, BrandRole, MemberStatus, is_active

logger = get_logger(__name__)


class _LookupFailed(Exception):
    pass


async def _fetch[T](lookup: Awaitable[T], table: str) -> T:
    try:
        return await lookup
    except Exception as e:
        logger.warning("membership_store_error", table=table, exc_info=e)
        raise _LookupFailed(table) from e


def normalize_id(value: Any) -> UUID | None:
    """Turn a loosely typed request value into a UUID, or None if unusable."""
    if isinstance(value, list | tuple):
        value = value[0] if value else None
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


def resource_for(
    action: Action | str,
    brand_id: UUID | None = None,
    branch_id: UUID | None = None,
) -> Resource | None:
    """Pick the resource matching the action's scope from loose request ids."""
    scope = scope_of(action)
    if scope is Scope.BRAND and brand_id is not None:
        return BrandResource(brand_id)
    if scope is Scope.BRANCH and branch_id is not None:
        return BranchResource(branch_id)
    return None


def _evaluate(
    status: MemberStatus,
    role: BrandRole | BranchRole,
    allowed: Collection[BrandRole | BranchRole],
    scope: Scope,
) -> Decision:
    if not is_active(status):
        return Denied(DenialReason.INACTIVE)
    if role not in allowed:
        return Denied(DenialReason.FORBIDDEN)
    return Granted(scope=scope, effective_role=role)


async def _authorize_brand(
    store: MembershipStore,
    policy: Policy,
    user_id: UUID,
    brand_id: UUID,
    action: Action,
) -> Decision:
    member = await _fetch(store.get_brand_member(brand_id, user_id), "brand_members")
    if member is None:
        return Denied(DenialReason.NOT_MEMBER)
    return _evaluate(member.status, member.role, policy.brand_roles(action), Scope.BRAND)


async def _authorize_branch(
    store: MembershipStore,
    policy: Policy,
    user_id: UUID,
    branch_id: UUID,
    action: Action,
) -> Decision:
    member = await _fetch(store.get_branch_member(branch_id, user_id), "branch_members")
    if member is not None:
        # Explicit branch assignment is final, even when inactive or forbidden.
        return _evaluate(member.status, member.role, policy.branch_roles(action), Scope.BRANCH)

    branch = await _fetch(store.get_branch(branch_id), "branches")
    if branch is None:
        return Denied(DenialReason.NOT_FOUND)

    brand_member = await _fetch(
        store.get_brand_member(branch.brand_id, user_id), "brand_members"
    )
    if brand_member is None:
        return Denied(DenialReason.NOT_MEMBER)
    if not is_active(brand_member.status):
        return Denied(DenialReason.INACTIVE)

    inherited = brand_to_effective_branch_role(brand_member.role)
    if inherited is None or inherited not in policy.branch_roles(action):
        return Denied(DenialReason.FORBIDDEN)

    return Granted(scope=Scope.BRANCH, effective_role=inherited, inherited_from=brand_member.role)


async def authorize(
    store: MembershipStore,
    user_id: UUID,
    resource: Resource | None,
    action: Action | str,
    *,
    policy: Policy = DEFAULT_POLICY,
) -> Decision:
    """Decide whether user_id may perform action on resource.

    Never raises for denials or store failures; those come back as Denied.
    """
    parsed = parse_action(action)
    scope = scope_of(action)
    if parsed is None or scope is None:
        logger.warning("authz_unknown_action", action=str(action))
        return Denied(DenialReason.FORBIDDEN)

    try:
        if scope is Scope.BRAND:
            if not isinstance(resource, BrandResource):
                decision: Decision = Denied(DenialReason.NOT_FOUND)
            else:
                decision = await _authorize_brand(
                    store, policy, user_id, resource.brand_id, parsed
                )
        elif not isinstance(resource, BranchResource):
            decision = Denied(DenialReason.NOT_FOUND)
        else:
            decision = await _authorize_branch(store, policy, user_id, resource.branch_id, parsed)
    except _LookupFailed:
        decision = Denied(DenialReason.DB_ERROR)

    logger.debug(
        "authz_decision",
        action=parsed.value,
        scope=scope.value,
        user_id=str(user_id),
        granted=decision.ok,
        reason=None if isinstance(decision, Granted) else decision.reason.value,
    )
    return decision
