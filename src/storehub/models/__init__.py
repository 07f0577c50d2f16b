"""Model exports.

Import from here: `from src.storehub.models import Brand, BrandMember`
"""

from src.storehub.models.brand import Branch, Brand
from src.storehub.models.enums import BranchRole, BrandRole, MemberStatus, is_active
from src.storehub.models.membership import BranchMember, BrandMember

__all__ = [
    # Vocabulary
    "BranchRole",
    "BrandRole",
    "MemberStatus",
    "is_active",
    # Tables
    "Branch",
    "BranchMember",
    "Brand",
    "BrandMember",
]
