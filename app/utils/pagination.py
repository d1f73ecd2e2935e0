"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the zero-based PageRequest, the Page result model and get_page,
which builds a Page and runs the COUNT query only when the total cannot be
derived from the fetched content (count elision).
"""

import logging
import math
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, computed_field

from app.utils.exceptions import InvalidPageRequestError

logger = logging.getLogger(__name__)

Direction = Literal["asc", "desc"]

# 64비트 정수 OFFSET 상한 — Largest OFFSET a 64-bit database integer can hold
MAX_OFFSET: int = 2**63 - 1


class SortOrder(BaseModel):
    """정렬 조건 — 속성명과 방향.

    Single sort order: property name and direction.
    """

    model_config = ConfigDict(frozen=True)

    property: str
    direction: Direction = "asc"

    @classmethod
    def parse(cls, expression: str) -> "SortOrder":
        """"property,direction" 형식의 문자열을 파싱합니다.

        Parse a "property[,direction]" expression. Direction defaults to asc.

        Raises:
            InvalidPageRequestError: 형식이 잘못된 경우 (Malformed expression)
        """
        parts: list[str] = [p.strip() for p in expression.split(",")]
        if not parts[0] or len(parts) > 2:
            raise InvalidPageRequestError(f"잘못된 정렬 조건입니다 (Malformed sort: {expression!r})")
        if len(parts) == 1 or not parts[1]:
            return cls(property=parts[0])

        direction: str = parts[1].lower()
        if direction not in ("asc", "desc"):
            raise InvalidPageRequestError(f"잘못된 정렬 방향입니다 (Invalid sort direction: {parts[1]!r})")
        return cls(property=parts[0], direction=direction)


class PageRequest(BaseModel):
    """페이지 요청 — 0부터 시작하는 페이지 번호, 크기, 정렬.

    Page request with a zero-based page index, page size and sort orders.
    Build it with PageRequest.of() so invalid input is rejected before querying.

    Attributes:
        page: 페이지 번호, 0부터 시작 (Zero-based page index)
        size: 페이지 크기 (Page size, > 0)
        sort: 정렬 조건 목록 (Ordered sort orders, may be empty)
    """

    model_config = ConfigDict(frozen=True)

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @classmethod
    def of(
        cls,
        page: int = 0,
        size: int = 20,
        sort: Sequence[str | SortOrder] = (),
        max_size: int | None = None,
    ) -> "PageRequest":
        """검증된 PageRequest를 생성합니다.

        Create a validated PageRequest.

        Args:
            page: 페이지 번호, 0 이상 (Zero-based page index)
            size: 페이지 크기, 1 이상 (Page size)
            sort: "property,direction" 문자열 또는 SortOrder 목록
                  (Sort expressions or SortOrder instances)
            max_size: 허용 최대 크기, None이면 제한 없음 (Upper bound for size)

        Raises:
            InvalidPageRequestError: 입력이 잘못된 경우 (Invalid input)
        """
        if page < 0:
            raise InvalidPageRequestError("페이지 번호는 0 이상이어야 합니다 (Page index must not be negative)")
        if size < 1:
            raise InvalidPageRequestError("페이지 크기는 1 이상이어야 합니다 (Page size must be greater than zero)")
        if max_size is not None and size > max_size:
            raise InvalidPageRequestError(
                f"페이지 크기는 {max_size} 이하여야 합니다 (Page size must not exceed {max_size})"
            )
        if page * size > MAX_OFFSET:
            raise InvalidPageRequestError("페이지 번호가 너무 큽니다 (Page index is too large)")

        orders: tuple[SortOrder, ...] = tuple(
            s if isinstance(s, SortOrder) else SortOrder.parse(s) for s in sort
        )
        return cls(page=page, size=size, sort=orders)

    @property
    def offset(self) -> int:
        """건너뛸 행 수 — Number of rows to skip."""
        return self.page * self.size


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model. total_elements is always exact; the derived
    fields are computed from it and serialized alongside the content.

    Attributes:
        content: 현재 페이지 항목 목록 (Items for the current page)
        page: 현재 페이지 번호, 0부터 시작 (Zero-based page index)
        size: 요청한 페이지 크기 (Requested page size)
        total_elements: 전체 항목 수 (Total count across all pages)
        sort: 적용된 정렬 조건 (Applied sort orders)
    """

    content: list[Any]
    page: int
    size: int
    total_elements: int
    sort: list[SortOrder] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first(self) -> bool:
        return self.page == 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last(self) -> bool:
        return not self.has_next

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @computed_field  # type: ignore[prop-decorator]
    @property
    def empty(self) -> bool:
        return not self.content


def _build(content: Sequence[Any], page_request: PageRequest, total: int) -> Page:
    return Page(
        content=list(content),
        page=page_request.page,
        size=page_request.size,
        total_elements=total,
        sort=list(page_request.sort),
    )


async def get_page(
    content: Sequence[Any],
    page_request: PageRequest,
    count: Callable[[], Awaitable[int]],
) -> Page:
    """조회된 내용으로 Page를 만들고, 필요한 경우에만 COUNT 쿼리를 실행합니다.

    Build a Page from already fetched content, invoking count only when the
    total cannot be derived from the page geometry:

        - offset == 0 and the page is not full: total = len(content)
        - offset > 0 and the page is non-empty but not full: total = offset + len(content)
        - otherwise (full page, or empty page past the first): total = await count()

    Args:
        content: 현재 페이지로 조회된 항목 (Rows fetched for this page)
        page_request: 페이지 요청 (Page request used for the fetch)
        count: 전체 개수를 반환하는 코루틴 함수 (Coroutine function returning the exact total)

    Returns:
        Page: 정확한 전체 개수를 포함한 페이지 (Page with an exact total)
    """
    fetched: int = len(content)
    offset: int = page_request.offset

    if offset == 0:
        if fetched < page_request.size:
            logger.debug("count query skipped: first page holds %d of %d", fetched, page_request.size)
            return _build(content, page_request, fetched)
    elif 0 < fetched < page_request.size:
        logger.debug("count query skipped: last page at offset %d holds %d", offset, fetched)
        return _build(content, page_request, offset + fetched)

    # 전체 개수를 알 수 없음 — total not derivable, run the count query
    total: int = await count()
    logger.debug("count query issued: total=%d", total)
    return _build(content, page_request, total)
