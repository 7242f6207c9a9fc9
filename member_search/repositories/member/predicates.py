"""회원 검색용 동적 조건(predicate)

각 빌더는 값이 없으면 None을 반환한다. None은 "조건 없음"이며
조합 시 그냥 빠진다 (항상 참/거짓 절을 만들지 않음).
"""

from sqlalchemy import Select, and_
from sqlalchemy.sql.elements import ColumnElement

from member_search.models.member import Member
from member_search.models.team import Team
from member_search.schemas.member import MemberSearchCondition

Predicate = ColumnElement[bool]


def has_text(value: str | None) -> bool:
    """None, 빈 문자열, 공백만 있는 문자열이면 False"""
    return value is not None and value.strip() != ""


def username_eq(username: str | None) -> Predicate | None:
    return Member.username == username if has_text(username) else None


def team_name_eq(team_name: str | None) -> Predicate | None:
    return Team.name == team_name if has_text(team_name) else None


def age_goe(age: int | None) -> Predicate | None:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> Predicate | None:
    return Member.age <= age if age is not None else None


def age_between(age_goe_value: int | None, age_loe_value: int | None) -> Predicate | None:
    """나이 범위 조건 (양쪽 다 없으면 None)"""
    return all_of(age_goe(age_goe_value), age_loe(age_loe_value))


def all_of(*predicates: Predicate | None) -> Predicate | None:
    """None을 제외한 조건들을 AND로 결합 (모두 None이면 None)"""
    active = [p for p in predicates if p is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]
    return and_(*active)


def search_condition(condition: MemberSearchCondition) -> Predicate | None:
    """검색 조건을 하나의 WHERE 절로 결합 (적용할 조건이 없으면 None)

    content 쿼리와 count 쿼리가 같은 절을 공유한다.
    """
    return all_of(
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_between(condition.age_goe, condition.age_loe),
    )


def apply_condition(query: Select, condition: MemberSearchCondition) -> Select:
    """쿼리에 검색 조건 적용 (조건이 없으면 쿼리 그대로)"""
    clause = search_condition(condition)
    return query.where(clause) if clause is not None else query
