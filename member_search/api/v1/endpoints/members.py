from typing import Annotated

from fastapi import APIRouter, Depends

from member_search.api.dependencies import (
    get_member_search_condition,
    get_member_search_service,
    get_sort,
    handle_service_error,
)
from member_search.schemas import ErrorResponse
from member_search.schemas.member import MemberSearchCondition, MemberTeamDto
from member_search.schemas.page import Sort
from member_search.services.member_search_service import MemberSearchService

router = APIRouter(prefix="/members", tags=["Members"])


@router.get(
    "",
    response_model=list[MemberTeamDto],
    responses={400: {"model": ErrorResponse}},
)
async def search_member_v1(
    condition: Annotated[MemberSearchCondition, Depends(get_member_search_condition)],
    sort: Annotated[list[Sort], Depends(get_sort)],
    service: Annotated[MemberSearchService, Depends(get_member_search_service)],
) -> list[MemberTeamDto]:
    """회원 검색 (페이지네이션 없음)"""
    try:
        return await service.search_unpaged(condition, sort)
    except ValueError as e:
        handle_service_error(e)
