"""offset/limit 페이지네이션 실행

content 쿼리를 먼저 실행하고, 전체 개수는 별도의 count 쿼리로 구한다.
content만으로 전체 개수가 확정되는 경우 count 쿼리를 생략한다.

count 생략 규칙:
- 첫 페이지(offset == 0)이고 content가 page size보다 적으면 total = len(content)
- 그 외 페이지에서 content가 비어있지 않고 page size보다 적으면
  마지막 페이지이므로 total = offset + len(content)
- 나머지(꽉 찬 페이지, offset이 범위를 넘어 빈 페이지)는 count 쿼리 실행
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from sqlalchemy import Row, Select
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.core.telemetry import record_count_query_skipped
from member_search.schemas.page import Page, PageRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_total(content_size: int, page_request: PageRequest) -> int | None:
    """content만으로 total을 알 수 있으면 반환, count 쿼리가 필요하면 None"""
    if page_request.offset == 0:
        if page_request.size > content_size:
            return content_size
        return None

    if content_size != 0 and page_request.size > content_size:
        return page_request.offset + content_size

    return None


async def get_page(
    content: list[T],
    page_request: PageRequest,
    count_supplier: Callable[[], Awaitable[int]],
) -> Page[T]:
    """content와 count 공급자로 페이지 생성 (필요할 때만 count 호출)"""
    total = resolve_total(len(content), page_request)
    if total is None:
        total = await count_supplier()
    else:
        logger.debug(
            "Count query skipped: page=%d, size=%d, content=%d",
            page_request.page,
            page_request.size,
            len(content),
        )
        record_count_query_skipped()

    return Page.of(content, page_request, total)


async def count_rows(session: AsyncSession, count_query: Select) -> int:
    """count 쿼리 실행"""
    result = await session.execute(count_query)
    return result.scalar() or 0


async def fetch_content(
    session: AsyncSession,
    content_query: Select,
    page_request: PageRequest,
    row_mapper: Callable[[Row[Any]], T],
) -> list[T]:
    """offset/limit을 적용한 content 쿼리 실행"""
    paged_query = content_query.offset(page_request.offset).limit(page_request.size)
    result = await session.execute(paged_query)
    rows: Sequence[Row[Any]] = result.all()
    return [row_mapper(row) for row in rows]


async def fetch_page(
    session: AsyncSession,
    content_query: Select,
    count_query: Select,
    page_request: PageRequest,
    row_mapper: Callable[[Row[Any]], T],
) -> Page[T]:
    """content 쿼리 + (필요 시) count 쿼리로 페이지 조회"""
    content = await fetch_content(session, content_query, page_request, row_mapper)
    return await get_page(content, page_request, lambda: count_rows(session, count_query))
