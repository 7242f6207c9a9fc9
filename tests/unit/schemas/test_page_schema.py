"""페이지/정렬 스키마 단위 테스트"""

import pytest
from pydantic import ValidationError

from member_search.schemas.member import MemberSearchCondition, MemberTeamDto
from member_search.schemas.page import Page, PageRequest, Sort, SortDirection


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("age", Sort(property="age", direction=SortDirection.ASC)),
        ("age,desc", Sort(property="age", direction=SortDirection.DESC)),
        ("username,DESC", Sort(property="username", direction=SortDirection.DESC)),
        (" teamName , asc ", Sort(property="teamName", direction=SortDirection.ASC)),
        ("age,sideways", Sort(property="age", direction=SortDirection.ASC)),
    ],
)
def test_sort_parse(raw, expected):
    assert Sort.parse(raw) == expected


def test_page_request_offset():
    assert PageRequest(page=0, size=20).offset == 0
    assert PageRequest(page=3, size=5).offset == 15


@pytest.mark.parametrize("kwargs", [{"page": -1}, {"size": 0}])
def test_page_request_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        PageRequest(**kwargs)


def test_search_condition_accepts_camel_case_and_snake_case():
    by_alias = MemberSearchCondition.model_validate({"teamName": "teamA", "ageGoe": 10})
    by_name = MemberSearchCondition(team_name="teamA", age_goe=10)

    assert by_alias == by_name
    assert by_alias.age_loe is None


def test_page_serializes_camel_case():
    dto = MemberTeamDto(member_id=1, username="member1", age=10, team_id=None, team_name=None)
    page = Page.of([dto], PageRequest(page=0, size=2), 1)

    data = page.model_dump(by_alias=True)

    assert data["content"] == [
        {"memberId": 1, "username": "member1", "age": 10, "teamId": None, "teamName": None}
    ]
    assert data["totalElements"] == 1
    assert data["totalPages"] == 1
    assert data["numberOfElements"] == 1
