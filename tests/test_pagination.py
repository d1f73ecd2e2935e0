"""페이지네이션 유틸리티 테스트.

Pagination utility tests — PageRequest validation, sort parsing and the
count elision rules of get_page.
"""

import pytest

from app.utils.exceptions import InvalidPageRequestError
from app.utils.pagination import Page, PageRequest, SortOrder, get_page


class CountSpy:
    """COUNT 호출 여부를 기록하는 가짜 카운터."""

    def __init__(self, total: int) -> None:
        self.total = total
        self.calls = 0

    async def __call__(self) -> int:
        self.calls += 1
        return self.total


class TestPageRequest:
    """PageRequest 생성/검증 테스트."""

    def test_offset(self):
        assert PageRequest.of(0, 3).offset == 0
        assert PageRequest.of(2, 3).offset == 6

    def test_negative_page_rejected(self):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(-1, 3)

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(InvalidPageRequestError) as exc:
            PageRequest.of(0, size)
        assert exc.value.status_code == 400

    def test_size_above_max_rejected(self):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(0, 101, max_size=100)
        assert PageRequest.of(0, 100, max_size=100).size == 100

    def test_offset_beyond_64bit_rejected(self):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(10**18, 2000)
        assert PageRequest.of((2**63 - 1) // 2000, 2000).offset <= 2**63 - 1

    def test_sort_parsing(self):
        req = PageRequest.of(0, 10, sort=["age,desc", "username", "team_name,ASC"])
        assert req.sort == (
            SortOrder(property="age", direction="desc"),
            SortOrder(property="username", direction="asc"),
            SortOrder(property="team_name", direction="asc"),
        )

    @pytest.mark.parametrize("expression", ["", ",desc", "age,sideways", "a,b,desc"])
    def test_malformed_sort_rejected(self, expression):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(0, 10, sort=[expression])


class TestGetPage:
    """COUNT 생략 규칙 테스트."""

    async def test_first_page_not_full_skips_count(self):
        spy = CountSpy(total=999)
        page = await get_page(["a", "b"], PageRequest.of(0, 3), spy)
        assert spy.calls == 0
        assert page.total_elements == 2

    async def test_first_page_empty_skips_count(self):
        spy = CountSpy(total=999)
        page = await get_page([], PageRequest.of(0, 3), spy)
        assert spy.calls == 0
        assert page.total_elements == 0
        assert page.empty is True

    async def test_first_page_full_counts(self):
        spy = CountSpy(total=4)
        page = await get_page(["a", "b", "c"], PageRequest.of(0, 3), spy)
        assert spy.calls == 1
        assert page.total_elements == 4

    async def test_last_page_partial_skips_count(self):
        spy = CountSpy(total=999)
        page = await get_page(["d"], PageRequest.of(1, 3), spy)
        assert spy.calls == 0
        assert page.total_elements == 4

    async def test_middle_page_full_counts(self):
        spy = CountSpy(total=10)
        page = await get_page(["d", "e", "f"], PageRequest.of(1, 3), spy)
        assert spy.calls == 1
        assert page.total_elements == 10

    async def test_empty_page_past_first_counts(self):
        # 빈 페이지로는 전체 개수를 알 수 없음 — total is not derivable from an empty page
        spy = CountSpy(total=4)
        page = await get_page([], PageRequest.of(5, 3), spy)
        assert spy.calls == 1
        assert page.total_elements == 4

    async def test_count_error_propagates(self):
        async def broken() -> int:
            raise RuntimeError("database unavailable")

        with pytest.raises(RuntimeError, match="database unavailable"):
            await get_page(["a", "b", "c"], PageRequest.of(0, 3), broken)


class TestPage:
    """Page 파생 필드 테스트."""

    def test_derived_fields(self):
        page = Page(content=["a", "b", "c"], page=0, size=3, total_elements=4)
        assert page.total_pages == 2
        assert page.number_of_elements == 3
        assert page.first is True
        assert page.has_next is True
        assert page.last is False

    def test_last_page(self):
        page = Page(content=["d"], page=1, size=3, total_elements=4)
        assert page.has_next is False
        assert page.last is True

    def test_serialization_includes_derived_fields(self):
        data = Page(content=[], page=0, size=5, total_elements=0).model_dump()
        assert data["total_pages"] == 0
        assert data["empty"] is True
        assert data["last"] is True
