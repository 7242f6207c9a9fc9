"""Repository 패키지

Repository 패턴 구현체들을 모아둔 패키지.
"""

from member_search.repositories.member import (
    IMemberQueryRepository,
    IMemberRepository,
    MemberRepository,
)

__all__ = [
    "IMemberQueryRepository",
    "IMemberRepository",
    "MemberRepository",
]
