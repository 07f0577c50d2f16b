"""Repository layer - data access abstraction."""

from src.storehub.repositories.base import BaseRepository
from src.storehub.repositories.brand_repository import BranchRepository, BrandRepository
from src.storehub.repositories.membership_repository import (
    BranchMemberRepository,
    BrandMemberRepository,
)
from src.storehub.repositories.membership_store import SqlMembershipStore

__all__ = [
    "BaseRepository",
    "BranchMemberRepository",
    "BranchRepository",
    "BrandMemberRepository",
    "BrandRepository",
    "SqlMembershipStore",
]
