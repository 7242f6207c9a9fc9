"""공유 API dependencies - 엔드포인트 간 중복 제거"""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.core.config import get_settings
from member_search.core.database import get_db
from member_search.repositories.member.interface import IMemberQueryRepository
from member_search.repositories.member.repository import MemberRepository
from member_search.schemas.member import MemberSearchCondition
from member_search.schemas.page import PageRequest, Sort
from member_search.services.member_search_service import MemberSearchService

# members.age는 INTEGER(int32) 컬럼
AGE_MIN = -(2**31)
AGE_MAX = 2**31 - 1
# max_page_size도 int32 이하이므로 page * size(OFFSET)는 int64 안에 들어감
PAGE_MAX = 2**31 - 1

# ===== Repository / Service Dependencies =====


def get_member_repository(db: Annotated[AsyncSession, Depends(get_db)]) -> IMemberQueryRepository:
    """MemberRepository 의존성"""
    return MemberRepository(db)


def get_member_search_service(
    repository: Annotated[IMemberQueryRepository, Depends(get_member_repository)],
) -> MemberSearchService:
    """MemberSearchService 의존성"""
    return MemberSearchService(repository)


# ===== Query Parameter Binding =====


def get_member_search_condition(
    username: str | None = Query(default=None),
    team_name: str | None = Query(default=None, alias="teamName"),
    age_goe: int | None = Query(default=None, alias="ageGoe", ge=AGE_MIN, le=AGE_MAX),
    age_loe: int | None = Query(default=None, alias="ageLoe", ge=AGE_MIN, le=AGE_MAX),
) -> MemberSearchCondition:
    """쿼리 파라미터 -> 검색 조건"""
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


def get_sort(sort: list[str] = Query(default=[])) -> list[Sort]:
    """`sort=property[,asc|desc]` 파라미터 (여러 번 지정 가능)"""
    return [Sort.parse(value) for value in sort if value.strip()]


def get_page_request(
    sort: Annotated[list[Sort], Depends(get_sort)],
    page: int = Query(default=0, ge=0, le=PAGE_MAX),
    size: int | None = Query(default=None, ge=1),
) -> PageRequest:
    """page/size/sort 파라미터 -> PageRequest (size는 max_page_size로 제한)"""
    settings = get_settings()
    page_size = min(size or settings.default_page_size, settings.max_page_size)
    return PageRequest(page=page, size=page_size, sort=sort)


# ===== Service Error Handling =====

# 서비스/Repository에서 발생하는 에러 코드와 HTTP 응답 매핑
# (status_code, error_code, message)
SERVICE_ERROR_MAPPING: dict[str, tuple[int, str, str]] = {
    "INVALID_SORT_PROPERTY": (400, "BAD_REQUEST", "Unsupported sort property"),
}


def handle_service_error(error: ValueError, default_message: str = "Validation error") -> None:
    """서비스 레이어 에러를 HTTPException으로 변환

    Args:
        error: 서비스에서 발생한 ValueError (에러 코드가 str로 전달됨)
        default_message: 매핑되지 않은 에러의 기본 메시지

    Raises:
        HTTPException: 매핑된 HTTP 에러 응답
    """
    error_code = str(error)

    if error_code in SERVICE_ERROR_MAPPING:
        status_code, code, message = SERVICE_ERROR_MAPPING[error_code]
        raise HTTPException(
            status_code=status_code,
            detail={"error": code, "message": message},
        )

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": "VALIDATION_ERROR", "message": default_message},
    )
