from src.storehub.services.brand_service import BrandService
from src.storehub.services.exceptions import ConflictError, EmptyUpdateError, NotFoundError
from src.storehub.services.member_service import MemberService

__all__ = ["BrandService", "ConflictError", "EmptyUpdateError", "MemberService", "NotFoundError"]
