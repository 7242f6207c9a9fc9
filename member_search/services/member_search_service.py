import logging

from member_search.repositories.member.interface import IMemberQueryRepository
from member_search.schemas.member import MemberSearchCondition, MemberTeamDto
from member_search.schemas.page import Page, PageRequest, Sort

logger = logging.getLogger(__name__)


class MemberSearchService:
    """회원 검색 서비스 (읽기 전용)"""

    def __init__(self, repository: IMemberQueryRepository):
        self.repository = repository

    async def search_unpaged(
        self, condition: MemberSearchCondition, sort: list[Sort] | None = None
    ) -> list[MemberTeamDto]:
        """조건에 맞는 전체 결과 조회"""
        results = await self.repository.search(condition, sort)
        logger.debug("search_unpaged returned %d rows", len(results))
        return results

    async def search_paged(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """조건 검색 결과를 페이지 단위로 조회"""
        page = await self.repository.search_page_complex(condition, page_request)
        logger.debug(
            "search_paged page=%d size=%d total=%d",
            page.number,
            page.size,
            page.total_elements,
        )
        return page
