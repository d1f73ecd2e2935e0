"""회원 레포지토리 — 회원/팀 검색 쿼리 담당.

Member Repository — Dynamic member/team search queries.
Search conditions are turned into a list of optional predicates; absent
conditions contribute nothing and the remaining predicates are ANDed.

Search variants:
    - search: 페이징 없는 검색 (Unpaginated search)
    - search_page_simple: 항상 COUNT 실행 (Page + COUNT every time)
    - search_page_complex: COUNT 생략 가능 시 생략 (Page + COUNT only when needed)
"""

from typing import Any, Sequence

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member, Team
from app.repositories.base import BaseRepository
from app.schemas.member import MemberSearchCondition
from app.utils.exceptions import InvalidPageRequestError
from app.utils.pagination import Page, PageRequest, get_page

# 정렬 가능한 속성 — Sortable properties mapped to columns
SORTABLE_COLUMNS: dict[str, Any] = {
    "id": Member.id,
    "username": Member.username,
    "age": Member.age,
    "team_name": Team.name,
}


def username_eq(username: str | None) -> ColumnElement[bool] | None:
    return Member.username == username if username else None


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    return Team.name == team_name if team_name else None


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age <= age if age is not None else None


def build_member_predicates(condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
    """검색 조건으로부터 WHERE 절 조건 목록을 생성합니다.

    Build the list of predicates for the present condition fields.
    An empty list means "match every row".
    """
    candidates = (
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_goe(condition.age_goe),
        age_loe(condition.age_loe),
    )
    return [p for p in candidates if p is not None]


def order_by_clauses(page_request: PageRequest) -> list[Any]:
    """정렬 조건을 ORDER BY 절로 변환합니다.

    Translate sort orders to ORDER BY clauses. Member id is appended as a
    tie-breaker so paging stays stable across calls.

    Raises:
        InvalidPageRequestError: 정렬할 수 없는 속성 (Unknown sort property)
    """
    clauses: list[Any] = []
    for order in page_request.sort:
        column = SORTABLE_COLUMNS.get(order.property)
        if column is None:
            raise InvalidPageRequestError(
                f"정렬할 수 없는 속성입니다 (Unknown sort property: {order.property!r})"
            )
        clause = column.desc() if order.direction == "desc" else column.asc()
        # 팀 없는 회원은 방향과 무관하게 마지막 — NULLs sort last on every backend
        clauses.append(clause.nulls_last())
    if not any(order.property == "id" for order in page_request.sort):
        clauses.append(Member.id.asc())
    return clauses


class MemberRepository(BaseRepository[Member]):
    """회원 레포지토리.

    Member repository with projected member/team search queries.

    Extends:
        BaseRepository[Member]
    """

    def __init__(self) -> None:
        super().__init__(Member)

    def _member_team_query(self, condition: MemberSearchCondition) -> Select:
        # 회원 LEFT JOIN 팀 프로젝션 — member left join team projection
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Team, Member.team_id == Team.id)
            .where(*build_member_predicates(condition))
        )

    async def find_by_username(self, db: AsyncSession, username: str) -> Sequence[Member]:
        """이름으로 회원을 조회합니다 — Find members by exact username."""
        return await self.get_all(db, filters={"username": username})

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> Sequence[Any]:
        """조건에 맞는 모든 회원을 조회합니다 (페이징 없음).

        Return every matching member/team row ordered by member id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            Sequence[Row]: member_id, username, age, team_id, team_name 행 목록
        """
        query: Select = self._member_team_query(condition).order_by(Member.id)
        result = await db.execute(query)
        return result.all()

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page:
        """페이지 조회 후 항상 COUNT 쿼리를 실행합니다.

        Fetch one page and always run the COUNT query.
        """
        query: Select = self._member_team_query(condition).order_by(*order_by_clauses(page_request))
        return await self.get_paginated(db, query, page_request)

    async def search_page_complex(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page:
        """페이지 조회 후 필요한 경우에만 COUNT 쿼리를 실행합니다.

        Fetch one page, then run a separate COUNT query only when the total
        cannot be derived from the fetched rows (see get_page). The COUNT
        query uses the same join and predicates but no ordering.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            page_request: 페이지 요청 (Zero-based page request)

        Returns:
            Page: 정확한 전체 개수를 포함한 페이지 (Page with an exact total)
        """
        query: Select = (
            self._member_team_query(condition)
            .order_by(*order_by_clauses(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await db.execute(query)
        content: Sequence[Any] = result.all()

        async def count() -> int:
            count_query: Select = (
                select(func.count(Member.id))
                .select_from(Member)
                .outerjoin(Team, Member.team_id == Team.id)
                .where(*build_member_predicates(condition))
            )
            return (await db.execute(count_query)).scalar_one()

        return await get_page(content, page_request, count)


class TeamRepository(BaseRepository[Team]):
    """팀 레포지토리 — Team repository."""

    def __init__(self) -> None:
        super().__init__(Team)


# 싱글턴 인스턴스 — Singleton instances
member_repository: MemberRepository = MemberRepository()
team_repository: TeamRepository = TeamRepository()
