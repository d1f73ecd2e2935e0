"""회원 검색 라우터 — 회원/팀 검색 API.

Member Search Router — Read-only search endpoints over members and teams.

Endpoints:
    - GET /v1/members: 페이징 없는 검색 (Unpaginated search)
    - GET /v2/members: 페이지 + 항상 COUNT (Page, COUNT always issued)
    - GET /v3/members: 페이지 + 필요 시에만 COUNT (Page, COUNT only when needed)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_page_request, get_search_condition
from app.database import get_db
from app.schemas.member import MemberSearchCondition, MemberTeamPage, MemberTeamResponse
from app.services.member_service import member_service
from app.utils.pagination import PageRequest

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=list[MemberTeamResponse])
async def search_member_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
) -> list[MemberTeamResponse]:
    """조건에 맞는 모든 회원을 조회합니다.

    Search members without pagination.
    """
    return await member_service.search(db, condition)


@router.get("/v2/members", response_model=MemberTeamPage)
async def search_member_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> MemberTeamPage:
    """회원 페이지 검색 — 매번 COUNT 쿼리를 실행합니다.

    Paginated search; the total is always counted.
    """
    return await member_service.search_page_simple(db, condition, page_request)


@router.get("/v3/members", response_model=MemberTeamPage)
async def search_member_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> MemberTeamPage:
    """회원 페이지 검색 — 가능하면 COUNT 쿼리를 생략합니다.

    Paginated search; the COUNT query is skipped when the total is derivable
    from the fetched page.
    """
    return await member_service.search_page_complex(db, condition, page_request)
