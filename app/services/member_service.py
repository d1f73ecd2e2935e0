"""회원 검색 서비스 — 회원/팀 검색 비즈니스 로직.

Member Search Service — Turns repository rows into response schemas
for the unpaginated and paginated member searches.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.member_repository import member_repository
from app.schemas.member import MemberSearchCondition, MemberTeamPage, MemberTeamResponse
from app.utils.pagination import Page, PageRequest


class MemberService:
    """회원 검색 서비스.

    Member search service wrapping the three search variants.
    """

    def _to_response(self, row: Any) -> MemberTeamResponse:
        return MemberTeamResponse.model_validate(row)

    def _to_page(self, page: Page) -> MemberTeamPage:
        return MemberTeamPage(
            content=[self._to_response(row) for row in page.content],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            sort=page.sort,
        )

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamResponse]:
        """조건에 맞는 모든 회원을 조회합니다.

        Search members without pagination.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            list[MemberTeamResponse]: 회원+팀 응답 목록 (Member/team projections)
        """
        rows = await member_repository.search(db, condition)
        return [self._to_response(row) for row in rows]

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> MemberTeamPage:
        """페이지 검색 — COUNT 쿼리를 항상 실행합니다.

        Paginated search that always issues the COUNT query.
        """
        page: Page = await member_repository.search_page_simple(db, condition, page_request)
        return self._to_page(page)

    async def search_page_complex(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> MemberTeamPage:
        """페이지 검색 — 전체 개수를 알 수 있으면 COUNT 쿼리를 생략합니다.

        Paginated search that skips the COUNT query when the total is
        derivable from the fetched page.
        """
        page: Page = await member_repository.search_page_complex(db, condition, page_request)
        return self._to_page(page)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
