import math
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class SortDirection(str, Enum):
    """정렬 방향"""

    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    """단일 정렬 조건"""

    model_config = ConfigDict(frozen=True)

    property: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: str) -> "Sort":
        """`property[,direction]` 형식 파싱 (예: "age,desc")

        방향이 없거나 알 수 없는 값이면 ASC.
        """
        prop, _, raw_direction = value.partition(",")
        raw_direction = raw_direction.strip().lower()
        direction = SortDirection.DESC if raw_direction == "desc" else SortDirection.ASC
        return cls(property=prop.strip(), direction=direction)


class PageRequest(BaseModel):
    """페이지 요청 (page는 0부터 시작)"""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: list[Sort] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """페이지 응답 (JSON 키는 camelCase)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[T]
    total_elements: int
    total_pages: int
    size: int
    number: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def of(cls, content: list[T], page_request: PageRequest, total: int) -> "Page[T]":
        """content와 전체 개수로 페이지 생성"""
        total_pages = math.ceil(total / page_request.size) if total > 0 else 0
        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            size=page_request.size,
            number=page_request.page,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=len(content) == 0,
        )
