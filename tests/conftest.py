"""pytest 설정 및 공유 fixture

테스트 인프라:
- 테스트 DB 엔진/세션 (기본: in-memory SQLite, TEST_DATABASE_URL로 변경 가능)
- FastAPI async client (get_db 오버라이드)
- 샘플 데이터 fixture (teamA/teamB, member1~4)
"""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from member_search.core.config import Settings
from member_search.core.database import Base, get_db
from member_search.models.member import Member
from member_search.models.team import Team
from member_search.services.sample_data import seed_sample_data


# ===== 테스트 설정 =====


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """테스트용 설정

    환경변수 TEST_DATABASE_URL이 있으면 사용, 없으면 in-memory SQLite 사용
    """
    test_db_url = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

    return Settings(
        app_env="test",
        debug=True,
        database_url=test_db_url,
        default_page_size=20,
        max_page_size=2000,
    )


# ===== 데이터베이스 Fixture =====


@pytest.fixture
async def test_engine(test_settings: Settings):
    """테스트용 비동기 엔진

    각 테스트마다 새 엔진 생성 (in-memory SQLite는 연결 하나를 공유해야 함)
    """
    if test_settings.database_url.startswith("sqlite"):
        engine = create_async_engine(
            test_settings.database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            test_settings.database_url,
            echo=False,
            poolclass=NullPool,  # 테스트에서는 pool 사용 안 함
        )

    # 테이블 생성
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # 테이블 삭제
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 DB 세션 (function scope)

    외부 트랜잭션 안에서 동작하고 테스트 후 롤백
    """
    connection = await test_engine.connect()
    transaction = await connection.begin()

    session_maker = async_sessionmaker(
        bind=connection,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    session = session_maker()

    yield session

    # 테스트 후 롤백 (테스트 격리 보장)
    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest.fixture
def override_get_db(db_session: AsyncSession):
    """FastAPI 의존성 오버라이드용 DB fixture"""

    async def _override_get_db():
        yield db_session

    return _override_get_db


# ===== FastAPI Client Fixture =====


@pytest.fixture
async def async_client(override_get_db) -> AsyncGenerator[AsyncClient, None]:
    """비동기 FastAPI client (테스트 DB 세션 사용)"""
    from member_search.main import app

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# ===== 테스트 데이터 Fixture =====


@pytest.fixture
async def sample_members(db_session: AsyncSession) -> list[Member]:
    """teamA(member1, member2), teamB(member3, member4)"""
    return await seed_sample_data(db_session)


@pytest.fixture
async def member_without_team(db_session: AsyncSession, sample_members) -> Member:
    """팀이 없는 회원 (LEFT JOIN 확인용)"""
    member = Member("loner", 50)
    db_session.add(member)
    await db_session.flush()
    return member


@pytest.fixture
async def team_a(db_session: AsyncSession, sample_members) -> Team:
    """샘플 데이터의 teamA"""
    return next(m.team for m in sample_members if m.team.name == "teamA")
