"""샘플 데이터 시드 스크립트 — 팀 2개, 회원 100명 생성.

Seed script — Creates two teams and 100 members for local development.
Runs automatically on startup when PROFILE is "local", or manually.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 100명 회원: member0 ~ member99, age = i, 짝수는 teamA / 홀수는 teamB
      (100 members; even index → teamA, odd index → teamB)
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.database import Base, async_session, engine
from app.models import Member, Team
from app.repositories.member_repository import team_repository

logger = logging.getLogger(__name__)

MEMBER_COUNT: int = 100


async def seed_members(db: AsyncSession) -> bool:
    """팀과 회원 샘플 데이터를 적재합니다.

    Insert the sample teams and members.

    Idempotent: 팀이 하나라도 있으면 건너뜁니다 (Skips if any team exists).

    Returns:
        bool: 데이터를 새로 적재했으면 True (True when data was inserted)
    """
    result = await db.execute(select(Team.id).limit(1))
    if result.scalar_one_or_none() is not None:
        logger.info("Already seeded. Skipping.")
        return False

    team_a: Team = await team_repository.save(db, Team(name="teamA"))
    team_b: Team = await team_repository.save(db, Team(name="teamB"))

    for i in range(MEMBER_COUNT):
        selected: Team = team_a if i % 2 == 0 else team_b
        db.add(Member(username=f"member{i}", age=i, team_id=selected.id))
    await db.flush()

    logger.info("Seeded %d members into %s, %s", MEMBER_COUNT, team_a.name, team_b.name)
    return True


async def seed(
    bind: AsyncEngine = engine,
    session_factory: async_sessionmaker[AsyncSession] = async_session,
) -> None:
    """테이블을 만들고 샘플 데이터를 커밋합니다.

    Create tables from ORM metadata if missing, then seed and commit.
    """
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as db:
        if await seed_members(db):
            await db.commit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
