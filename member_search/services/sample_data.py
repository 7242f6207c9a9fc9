import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.models.member import Member
from member_search.models.team import Team

logger = logging.getLogger(__name__)

# (username, age, team name)
SAMPLE_MEMBERS: list[tuple[str, int, str]] = [
    ("member1", 10, "teamA"),
    ("member2", 20, "teamA"),
    ("member3", 30, "teamB"),
    ("member4", 40, "teamB"),
]


async def seed_sample_data(session: AsyncSession, *, skip_if_exists: bool = True) -> list[Member]:
    """teamA/teamB와 member1~4 샘플 데이터 생성

    Args:
        session: DB 세션 (flush까지만 수행, commit은 호출자 책임)
        skip_if_exists: 이미 회원이 있으면 아무것도 하지 않음

    Returns:
        생성된 회원 목록 (건너뛴 경우 빈 목록)
    """
    if skip_if_exists:
        existing = (await session.execute(select(func.count(Member.id)))).scalar() or 0
        if existing > 0:
            logger.info("Sample data skipped: %d members already exist", existing)
            return []

    teams: dict[str, Team] = {}
    members: list[Member] = []
    for username, age, team_name in SAMPLE_MEMBERS:
        team = teams.get(team_name)
        if team is None:
            team = Team(team_name)
            teams[team_name] = team
            session.add(team)
        member = Member(username, age, team)
        session.add(member)
        members.append(member)

    await session.flush()
    logger.info("Sample data created: teams=%d, members=%d", len(teams), len(members))
    return members
