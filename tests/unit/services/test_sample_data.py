"""샘플 데이터 시드 테스트 (테스트 DB 사용)"""

import pytest
from sqlalchemy import func, select

from member_search.models.member import Member
from member_search.models.team import Team
from member_search.services.sample_data import seed_sample_data


@pytest.mark.asyncio
async def test_seed_sample_data_creates_teams_and_members(db_session):
    members = await seed_sample_data(db_session)

    assert [(m.username, m.age, m.team.name) for m in members] == [
        ("member1", 10, "teamA"),
        ("member2", 20, "teamA"),
        ("member3", 30, "teamB"),
        ("member4", 40, "teamB"),
    ]
    team_count = (await db_session.execute(select(func.count(Team.id)))).scalar()
    assert team_count == 2


@pytest.mark.asyncio
async def test_seed_sample_data_links_inverse_side(db_session):
    members = await seed_sample_data(db_session)

    team_a = members[0].team
    assert [m.username for m in team_a.members] == ["member1", "member2"]


@pytest.mark.asyncio
async def test_seed_sample_data_skips_when_members_exist(db_session, sample_members):
    members = await seed_sample_data(db_session)

    assert members == []
    member_count = (await db_session.execute(select(func.count(Member.id)))).scalar()
    assert member_count == 4


@pytest.mark.asyncio
async def test_seed_sample_data_force(db_session, sample_members):
    members = await seed_sample_data(db_session, skip_if_exists=False)

    assert len(members) == 4
    member_count = (await db_session.execute(select(func.count(Member.id)))).scalar()
    assert member_count == 8
