from fastapi import APIRouter

from member_search.api.v2.endpoints import members

api_router = APIRouter(prefix="/v2")

api_router.include_router(members.router)
