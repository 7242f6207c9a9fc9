"""Member Repository 인터페이스 정의

Protocol 기반 인터페이스로 구조적 서브타이핑 지원
"""

from typing import Protocol

from member_search.models.member import Member
from member_search.schemas.member import (
    MemberDto,
    MemberSearchCondition,
    MemberStatistics,
    MemberTeamDto,
    TeamAgeStatistics,
)
from member_search.schemas.page import Page, PageRequest, Sort


class IMemberQueryRepository(Protocol):
    """회원 동적 검색 인터페이스

    검색 엔드포인트가 의존하는 읽기 전용 연산.
    """

    async def search(
        self, condition: MemberSearchCondition, sort: list[Sort] | None = None
    ) -> list[MemberTeamDto]:
        """조건 검색 (페이지네이션 없음)"""
        ...

    async def search_page_simple(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """조건 검색 + 페이지네이션 (count 쿼리 항상 실행)"""
        ...

    async def search_page_complex(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """조건 검색 + 페이지네이션 (가능하면 count 쿼리 생략)"""
        ...


class IMemberRepository(IMemberQueryRepository, Protocol):
    """회원 Repository 인터페이스

    검색 연산에 더해 저장/단건 조회/벌크 연산/집계를 포함한다.
    """

    async def save(self, member: Member) -> Member:
        """회원 저장"""
        ...

    async def find_by_id(self, member_id: int) -> Member | None:
        """ID로 회원 조회"""
        ...

    async def find_all(self) -> list[Member]:
        """전체 회원 조회"""
        ...

    async def find_by_username(self, username: str) -> list[Member]:
        """이름으로 회원 조회"""
        ...

    async def find_member_dtos(self, condition: MemberSearchCondition) -> list[MemberDto]:
        """조건 검색 (이름/나이 projection)"""
        ...

    async def bulk_update_username(self, age_lt: int, username: str) -> int:
        """나이가 age_lt 미만인 회원의 이름 일괄 변경"""
        ...

    async def bulk_add_age(self, amount: int = 1) -> int:
        """전체 회원 나이 일괄 증가"""
        ...

    async def bulk_delete_older_than(self, age_gt: int) -> int:
        """나이가 age_gt 초과인 회원 일괄 삭제"""
        ...

    async def statistics(self) -> MemberStatistics:
        """회원 나이 집계"""
        ...

    async def team_age_statistics(self) -> list[TeamAgeStatistics]:
        """팀별 평균 나이"""
        ...
