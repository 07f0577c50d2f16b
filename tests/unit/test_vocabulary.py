"""Tests for roles, statuses and the action catalog."""

import pytest

from src.storehub.authz import (
    BRANCH_ACTIONS,
    BRAND_ACTIONS,
    Action,
    Scope,
    parse_action,
    scope_of,
)
from src.storehub.models import BranchRole, BrandRole, MemberStatus, is_active

pytestmark = pytest.mark.unit


class TestRoles:
    def test_brand_roles(self):
        assert [r.value for r in BrandRole] == ["OWNER", "ADMIN", "MANAGER", "MEMBER"]

    def test_branch_roles(self):
        assert [r.value for r in BranchRole] == [
            "BRANCH_OWNER",
            "BRANCH_ADMIN",
            "STAFF",
            "VIEWER",
        ]

    def test_statuses(self):
        assert [s.value for s in MemberStatus] == ["INVITED", "ACTIVE", "SUSPENDED", "LEFT"]

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (MemberStatus.ACTIVE, True),
            (MemberStatus.INVITED, False),
            (MemberStatus.SUSPENDED, False),
            (MemberStatus.LEFT, False),
        ],
    )
    def test_only_active_status_is_usable(self, status, expected):
        assert is_active(status) is expected

    def test_raw_status_strings_are_accepted(self):
        assert is_active("ACTIVE") is True
        assert is_active("active") is False


class TestActionCatalog:
    def test_catalog_is_partitioned(self):
        assert BRAND_ACTIONS.isdisjoint(BRANCH_ACTIONS)
        assert BRAND_ACTIONS | BRANCH_ACTIONS == frozenset(Action)

    def test_brand_actions(self):
        assert {a.value for a in BRAND_ACTIONS} == {
            "brand:read",
            "brand:update",
            "brand:branch_create",
            "brand:member_manage",
        }

    def test_branch_actions(self):
        assert {a.value for a in BRANCH_ACTIONS} == {
            "branch:read",
            "branch:update",
            "branch:member_manage",
            "branch:operate",
        }

    @pytest.mark.parametrize("action", sorted(BRAND_ACTIONS))
    def test_brand_actions_have_brand_scope(self, action):
        assert scope_of(action) is Scope.BRAND
        assert action.scope is Scope.BRAND

    @pytest.mark.parametrize("action", sorted(BRANCH_ACTIONS))
    def test_branch_actions_have_branch_scope(self, action):
        assert scope_of(action) is Scope.BRANCH

    def test_scope_of_accepts_raw_strings(self):
        assert scope_of("branch:operate") is Scope.BRANCH
        assert scope_of("brand:read") is Scope.BRAND

    @pytest.mark.parametrize("value", ["", "brand:delete", "BRAND:READ", "branch", "order:update"])
    def test_unknown_actions_are_unclassified(self, value):
        assert parse_action(value) is None
        assert scope_of(value) is None

    def test_parse_action_returns_catalog_member(self):
        assert parse_action("branch:member_manage") is Action.BRANCH_MEMBER_MANAGE
        assert parse_action(Action.BRAND_UPDATE) is Action.BRAND_UPDATE
