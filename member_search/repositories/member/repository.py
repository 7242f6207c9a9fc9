"""Member Repository 구현체 (SQLAlchemy AsyncSession 기반)

검색 쿼리는 Member LEFT OUTER JOIN Team 위에 동적 조건을 AND로 붙여서 만든다.
결과는 엔티티가 아니라 MemberTeamDto projection으로 반환한다.
"""

import logging
from typing import Any

from sqlalchemy import Row, Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from member_search.core.telemetry import record_search, traced_function
from member_search.models.member import Member
from member_search.models.team import Team
from member_search.repositories.member.predicates import apply_condition
from member_search.repositories.pagination import count_rows, fetch_content, fetch_page
from member_search.schemas.member import (
    MemberDto,
    MemberSearchCondition,
    MemberStatistics,
    MemberTeamDto,
    TeamAgeStatistics,
)
from member_search.schemas.page import Page, PageRequest, Sort, SortDirection

logger = logging.getLogger(__name__)

# 정렬 가능한 projection 속성 (camelCase / snake_case 모두 허용)
SORT_COLUMNS: dict[str, Any] = {
    "memberId": Member.id,
    "member_id": Member.id,
    "username": Member.username,
    "age": Member.age,
    "teamId": Team.id,
    "team_id": Team.id,
    "teamName": Team.name,
    "team_name": Team.name,
}


def _to_member_team_dto(row: Row[Any]) -> MemberTeamDto:
    return MemberTeamDto(**row._mapping)


def order_by_clauses(sort: list[Sort] | None) -> list[ColumnElement[Any]]:
    """정렬 조건을 ORDER BY 절로 변환 (NULL은 항상 마지막)

    Raises:
        ValueError: INVALID_SORT_PROPERTY - 정렬할 수 없는 속성
    """
    clauses: list[ColumnElement[Any]] = []
    for order in sort or []:
        column = SORT_COLUMNS.get(order.property)
        if column is None:
            raise ValueError("INVALID_SORT_PROPERTY")
        ordered = column.desc() if order.direction == SortDirection.DESC else column.asc()
        clauses.append(ordered.nulls_last())
    return clauses


class MemberRepository:
    """회원 Repository"""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ===== 검색 =====

    def _search_query(self, condition: MemberSearchCondition) -> Select:
        """projection 조회 쿼리 (Member LEFT JOIN Team + 동적 조건)"""
        query = (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )
        return apply_condition(query, condition)

    def _count_query(self, condition: MemberSearchCondition) -> Select:
        """content 쿼리와 같은 조인/조건의 count 쿼리"""
        query = select(func.count(Member.id)).select_from(Member).outerjoin(Member.team)
        return apply_condition(query, condition)

    @traced_function("member.search")
    async def search(
        self, condition: MemberSearchCondition, sort: list[Sort] | None = None
    ) -> list[MemberTeamDto]:
        """조건 검색 (페이지네이션 없음)"""
        logger.debug("Member search: condition=%s, sort=%s", condition, sort)
        record_search("unpaged")

        query = self._search_query(condition).order_by(*order_by_clauses(sort))
        result = await self.db.execute(query)
        return [_to_member_team_dto(row) for row in result.all()]

    @traced_function("member.search_page_simple")
    async def search_page_simple(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """조건 검색 + 페이지네이션 (count 쿼리 항상 실행)"""
        logger.debug("Member page search (simple): condition=%s, page=%s", condition, page_request)
        record_search("paged")

        content_query = self._search_query(condition).order_by(
            *order_by_clauses(page_request.sort)
        )
        content = await fetch_content(self.db, content_query, page_request, _to_member_team_dto)
        total = await count_rows(self.db, self._count_query(condition))
        return Page.of(content, page_request, total)

    @traced_function("member.search_page_complex")
    async def search_page_complex(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """조건 검색 + 페이지네이션 (content로 total이 확정되면 count 쿼리 생략)"""
        logger.debug("Member page search: condition=%s, page=%s", condition, page_request)
        record_search("paged")

        content_query = self._search_query(condition).order_by(
            *order_by_clauses(page_request.sort)
        )
        return await fetch_page(
            self.db,
            content_query,
            self._count_query(condition),
            page_request,
            _to_member_team_dto,
        )

    async def find_member_dtos(self, condition: MemberSearchCondition) -> list[MemberDto]:
        """조건 검색 (이름/나이 projection)"""
        query = select(Member.username, Member.age).select_from(Member).outerjoin(Member.team)
        result = await self.db.execute(apply_condition(query, condition))
        return [MemberDto(username=row.username, age=row.age) for row in result.all()]

    # ===== 저장/단건 조회 =====

    async def save(self, member: Member) -> Member:
        """회원 저장 (flush까지만, commit은 세션 소유자 책임)"""
        self.db.add(member)
        await self.db.flush()
        return member

    async def find_by_id(self, member_id: int) -> Member | None:
        return await self.db.get(Member, member_id)

    async def find_all(self) -> list[Member]:
        result = await self.db.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> list[Member]:
        query = select(Member).where(Member.username == username).order_by(Member.id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    # ===== 벌크 연산 =====
    # 벌크 UPDATE/DELETE는 세션에 올라간 객체를 갱신하지 않는다.
    # 실행 후 expire_all()로 비워서 이후 조회가 DB 값을 다시 읽도록 한다.

    async def bulk_update_username(self, age_lt: int, username: str) -> int:
        """나이가 age_lt 미만인 회원의 이름 일괄 변경"""
        statement = (
            update(Member)
            .where(Member.age < age_lt)
            .values(username=username)
            .execution_options(synchronize_session=False)
        )
        return await self._execute_bulk(statement, "bulk_update_username")

    async def bulk_add_age(self, amount: int = 1) -> int:
        """전체 회원 나이 일괄 증가"""
        statement = (
            update(Member)
            .values(age=Member.age + amount)
            .execution_options(synchronize_session=False)
        )
        return await self._execute_bulk(statement, "bulk_add_age")

    async def bulk_delete_older_than(self, age_gt: int) -> int:
        """나이가 age_gt 초과인 회원 일괄 삭제"""
        statement = (
            delete(Member)
            .where(Member.age > age_gt)
            .execution_options(synchronize_session=False)
        )
        return await self._execute_bulk(statement, "bulk_delete_older_than")

    async def _execute_bulk(self, statement: Any, operation: str) -> int:
        await self.db.flush()
        result = await self.db.execute(statement)
        self.db.expire_all()

        affected = result.rowcount or 0
        logger.info("Bulk %s affected %d rows", operation, affected)
        return affected

    # ===== 집계 =====

    async def statistics(self) -> MemberStatistics:
        """회원 수와 나이 합계/평균/최대/최소"""
        query = select(
            func.count(Member.id),
            func.sum(Member.age),
            func.avg(Member.age),
            func.max(Member.age),
            func.min(Member.age),
        )
        count, age_sum, age_avg, age_max, age_min = (await self.db.execute(query)).one()
        return MemberStatistics(
            count=count,
            age_sum=age_sum,
            age_avg=float(age_avg) if age_avg is not None else None,
            age_max=age_max,
            age_min=age_min,
        )

    async def team_age_statistics(self) -> list[TeamAgeStatistics]:
        """팀별 평균 나이 (팀 없는 회원 제외, 팀 이름 순)"""
        query = (
            select(Team.name, func.avg(Member.age))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        result = await self.db.execute(query)
        return [
            TeamAgeStatistics(team_name=name, age_avg=float(age_avg))
            for name, age_avg in result.all()
        ]
