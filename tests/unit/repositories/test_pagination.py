"""페이지네이션 실행기 단위 테스트 (Mock 기반, DB 불필요)

- resolve_total: count 생략 규칙
- get_page: count 공급자 호출 여부
- Page.of: 파생 필드
"""

from unittest.mock import AsyncMock

import pytest

from member_search.repositories.pagination import get_page, resolve_total
from member_search.schemas.page import Page, PageRequest


# ===== resolve_total =====


@pytest.mark.parametrize(
    ("page", "size", "content_size", "expected"),
    [
        # 첫 페이지, 한 페이지에 다 들어옴 -> count 생략
        (0, 10, 4, 4),
        (0, 10, 0, 0),
        # 첫 페이지가 꽉 참 -> count 필요
        (0, 2, 2, None),
        # 마지막 페이지 (일부만 채워짐) -> offset + content
        (1, 3, 1, 4),
        (2, 10, 5, 25),
        # 중간 페이지가 꽉 참 -> count 필요
        (1, 2, 2, None),
        # 범위를 넘은 offset (빈 content) -> count 필요
        (5, 2, 0, None),
    ],
)
def test_resolve_total(page, size, content_size, expected):
    assert resolve_total(content_size, PageRequest(page=page, size=size)) == expected


# ===== get_page =====


@pytest.mark.asyncio
async def test_get_page_skips_count_when_first_page_is_short():
    """첫 페이지가 page size보다 적으면 count 쿼리를 실행하지 않음"""
    count_supplier = AsyncMock(return_value=999)

    page = await get_page(["a", "b", "c"], PageRequest(page=0, size=10), count_supplier)

    count_supplier.assert_not_awaited()
    assert page.total_elements == 3
    assert page.total_pages == 1


@pytest.mark.asyncio
async def test_get_page_runs_count_when_page_is_full():
    count_supplier = AsyncMock(return_value=4)

    page = await get_page(["a", "b"], PageRequest(page=0, size=2), count_supplier)

    count_supplier.assert_awaited_once()
    assert page.total_elements == 4
    assert page.total_pages == 2
    assert page.first is True
    assert page.last is False


@pytest.mark.asyncio
async def test_get_page_runs_count_when_offset_beyond_total():
    """offset이 전체 범위를 넘으면 빈 content + 실제 total"""
    count_supplier = AsyncMock(return_value=4)

    page = await get_page([], PageRequest(page=10, size=2), count_supplier)

    count_supplier.assert_awaited_once()
    assert page.content == []
    assert page.empty is True
    assert page.total_elements == 4
    assert page.total_pages == 2


@pytest.mark.asyncio
async def test_get_page_last_page_derives_total():
    count_supplier = AsyncMock(return_value=999)

    page = await get_page(["e"], PageRequest(page=2, size=2), count_supplier)

    count_supplier.assert_not_awaited()
    assert page.total_elements == 5
    assert page.total_pages == 3
    assert page.last is True


# ===== Page.of =====


def test_page_of_empty_result():
    page = Page.of([], PageRequest(page=0, size=20), 0)

    assert page.total_elements == 0
    assert page.total_pages == 0
    assert page.number_of_elements == 0
    assert page.first is True
    assert page.last is True
    assert page.empty is True


def test_page_of_total_pages_rounds_up():
    page = Page.of([1, 2], PageRequest(page=0, size=2), 5)

    assert page.total_pages == 3
    assert page.size == 2
    assert page.number == 0
