from member_search.schemas.common import ErrorResponse
from member_search.schemas.member import (
    MemberDto,
    MemberSearchCondition,
    MemberStatistics,
    MemberTeamDto,
    TeamAgeStatistics,
)
from member_search.schemas.page import Page, PageRequest, Sort, SortDirection

__all__ = [
    "ErrorResponse",
    "MemberDto",
    "MemberSearchCondition",
    "MemberStatistics",
    "MemberTeamDto",
    "Page",
    "PageRequest",
    "Sort",
    "SortDirection",
    "TeamAgeStatistics",
]
