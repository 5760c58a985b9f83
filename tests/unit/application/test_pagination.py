"""Unit tests for offset pagination."""
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from catalog_engine.application.pagination import Page, PageRequest, paginate, total_pages
from catalog_engine.kernel.errors import ValidationError


class TestPageRequest:
    def test_defaults(self) -> None:
        pr = PageRequest()
        assert pr.page == 1
        assert pr.size == 50

    def test_offset(self) -> None:
        assert PageRequest(page=3, size=10).offset == 20

    def test_page_zero_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(page=0)

    def test_size_zero_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(size=0)

    def test_size_over_max_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(size=201)

    def test_custom_max(self) -> None:
        assert PageRequest(size=500, max_size=500).size == 500


class TestPaginate:
    def test_first_page(self) -> None:
        assert paginate(list(range(10)), 1, 3) == [0, 1, 2]

    def test_last_partial_page(self) -> None:
        assert paginate(list(range(10)), 4, 3) == [9]

    def test_past_the_end(self) -> None:
        assert paginate(list(range(10)), 5, 3) == []

    @pytest.mark.parametrize(
        "total, size, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (201, 50, 5)],
    )
    def test_total_pages(self, total: int, size: int, expected: int) -> None:
        assert total_pages(total, size) == expected

    @given(st.lists(st.integers(), max_size=60), st.integers(min_value=1, max_value=15))
    def test_pages_partition_the_sequence(self, items: list[int], size: int) -> None:
        pages = [paginate(items, n, size) for n in range(1, total_pages(len(items), size) + 1)]
        assert [x for page in pages for x in page] == items
        assert all(0 < len(page) <= size for page in pages)


class TestPage:
    def test_of(self) -> None:
        page = Page.of(list(range(25)), PageRequest(page=2, size=10))
        assert page.items == list(range(10, 20))
        assert page.total == 25
        assert page.total_pages == 3
        assert page.has_next
        assert page.has_previous

    def test_last_page_has_no_next(self) -> None:
        page = Page.of(list(range(25)), PageRequest(page=3, size=10))
        assert page.items == [20, 21, 22, 23, 24]
        assert not page.has_next

    def test_map(self) -> None:
        page = Page.of([1, 2, 3], PageRequest(page=1, size=2)).map(str)
        assert page.items == ["1", "2"]
        assert page.total == 3
