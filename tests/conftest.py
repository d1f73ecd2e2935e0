"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh database. Executed SQL statements are recorded so
tests can assert whether a COUNT query was issued.
"""

import os

# 앱 임포트 전에 설정 — configure before the app reads its settings
os.environ.setdefault("PROFILE", "test")
os.environ.setdefault("DEBUG", "false")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.member import Member, Team  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 새 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def statements(engine: AsyncEngine) -> list[str]:
    """실행된 SQL 문을 기록합니다."""
    recorded: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        recorded.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", _record)
    yield recorded
    event.remove(engine.sync_engine, "before_cursor_execute", _record)


def count_queries(recorded: list[str]) -> int:
    """기록된 문장 중 COUNT 쿼리 수."""
    return sum(1 for s in recorded if "count(" in s.lower())


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    result = {}
    for name in ("teamA", "teamB"):
        team = Team(name=name)
        db.add(team)
        await db.flush()
        await db.refresh(team)
        result[name] = team
    return result


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams) -> list[Member]:
    """회원 4명 — member1(10, A), member2(20, A), member3(30, B), member4(40, B)."""
    created = []
    for i, age in enumerate((10, 20, 30, 40), start=1):
        team = teams["teamA"] if i <= 2 else teams["teamB"]
        member = Member(username=f"member{i}", age=age, team_id=team.id)
        db.add(member)
        await db.flush()
        await db.refresh(member)
        created.append(member)
    return created
