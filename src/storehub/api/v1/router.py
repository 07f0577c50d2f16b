from fastapi import APIRouter

from src.storehub.api.v1 import access, brands, me, members

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(me.router)
api_router.include_router(access.router)
api_router.include_router(brands.router)
api_router.include_router(members.router)
