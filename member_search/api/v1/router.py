from fastapi import APIRouter

from member_search.api.v1.endpoints import members

api_router = APIRouter(prefix="/v1")

api_router.include_router(members.router)
