"""Member Repository 패키지

Member/Team 동적 검색 쿼리와 페이지네이션 조회.
"""

from member_search.repositories.member.interface import IMemberQueryRepository, IMemberRepository
from member_search.repositories.member.repository import MemberRepository

__all__ = [
    "IMemberQueryRepository",
    "IMemberRepository",
    "MemberRepository",
]
