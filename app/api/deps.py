"""FastAPI 의존성 주입 모듈 — 검색 조건 및 페이지 요청 파싱.

FastAPI dependency injection module — Query parameter parsing.
Provides reusable dependencies that turn query parameters into a
MemberSearchCondition and a validated zero-based PageRequest.

Query parameters:
    - username, teamName, ageGoe, ageLoe: 검색 조건 (Search condition)
    - page, size, sort: 페이지 요청 (Page request; sort is repeatable "property,direction")
"""

from typing import Annotated

from fastapi import Query

from app.config import settings
from app.schemas.member import MemberSearchCondition
from app.utils.pagination import PageRequest


def get_search_condition(
    username: Annotated[str | None, Query()] = None,
    team_name: Annotated[str | None, Query(alias="teamName")] = None,
    age_goe: Annotated[int | None, Query(alias="ageGoe")] = None,
    age_loe: Annotated[int | None, Query(alias="ageLoe")] = None,
) -> MemberSearchCondition:
    """쿼리 파라미터에서 검색 조건을 구성합니다.

    Build a MemberSearchCondition from camelCase query parameters.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


def get_page_request(
    page: Annotated[int, Query()] = 0,
    size: Annotated[int | None, Query()] = None,
    sort: Annotated[list[str] | None, Query()] = None,
) -> PageRequest:
    """쿼리 파라미터에서 페이지 요청을 구성합니다.

    Build a validated PageRequest from query parameters. Bounds are checked
    here so invalid input is rejected with 400 before any query runs.

    Raises:
        InvalidPageRequestError: 잘못된 페이지 입력 (Invalid pagination input)
    """
    return PageRequest.of(
        page=page,
        size=settings.DEFAULT_PAGE_SIZE if size is None else size,
        sort=sort or [],
        max_size=settings.MAX_PAGE_SIZE,
    )
