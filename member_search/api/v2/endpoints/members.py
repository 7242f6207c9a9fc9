from typing import Annotated

from fastapi import APIRouter, Depends

from member_search.api.dependencies import (
    get_member_search_condition,
    get_member_search_service,
    get_page_request,
    handle_service_error,
)
from member_search.schemas import ErrorResponse
from member_search.schemas.member import MemberSearchCondition, MemberTeamDto
from member_search.schemas.page import Page, PageRequest
from member_search.services.member_search_service import MemberSearchService

router = APIRouter(prefix="/members", tags=["Members"])


@router.get(
    "",
    response_model=Page[MemberTeamDto],
    responses={400: {"model": ErrorResponse}},
)
async def search_member_v2(
    condition: Annotated[MemberSearchCondition, Depends(get_member_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    service: Annotated[MemberSearchService, Depends(get_member_search_service)],
) -> Page[MemberTeamDto]:
    """회원 검색 (페이지네이션, 0부터 시작하는 page)"""
    try:
        return await service.search_paged(condition, page_request)
    except ValueError as e:
        handle_service_error(e)
