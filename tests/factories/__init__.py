"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import BrandFactory, BrandMemberFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.brand import BranchFactory, BrandFactory
from tests.factories.membership import BranchMemberFactory, BrandMemberFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Brand
    "BranchFactory",
    "BrandFactory",
    # Membership
    "BranchMemberFactory",
    "BrandMemberFactory",
]
