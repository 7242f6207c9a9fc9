from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MemberSearchCondition(BaseModel):
    """회원 검색 조건

    모든 필드는 선택값이며, 값이 없으면 해당 필드로는 필터링하지 않는다.
    HTTP 파라미터는 camelCase(teamName, ageGoe, ageLoe)로 받는다.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None


class MemberTeamDto(BaseModel):
    """회원 + 팀 조회 결과 (flat projection)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    member_id: int
    username: str | None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberDto(BaseModel):
    """회원 이름/나이 projection"""

    model_config = ConfigDict(frozen=True)

    username: str | None
    age: int


class MemberStatistics(BaseModel):
    """회원 나이 집계"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    count: int
    age_sum: int | None = None
    age_avg: float | None = None
    age_max: int | None = None
    age_min: int | None = None


class TeamAgeStatistics(BaseModel):
    """팀별 평균 나이"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    team_name: str
    age_avg: float
