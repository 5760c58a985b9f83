"""Unit tests for the Criteria value object."""
from __future__ import annotations

from decimal import Decimal

import pytest

from catalog_engine.application.search import Criteria
from catalog_engine.kernel.errors import ValidationError


class TestDefaults:
    def test_defaults(self) -> None:
        c = Criteria()
        assert c.search_text == ""
        assert c.sort_by == "updated"
        assert c.sort_direction == "desc"
        assert c.page == 1
        assert c.page_size == 50
        assert c.has_image is None

    @pytest.mark.parametrize("field, value", [("page", 0), ("page_size", 0)])
    def test_rejects_non_positive_paging(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            Criteria(**{field: value})

    def test_with_page(self) -> None:
        c = Criteria(search_text="klozet", page_size=10).with_page(3)
        assert (c.page, c.page_size, c.search_text) == (3, 10, "klozet")
        assert c.with_page(1, 5).page_size == 5


class TestFromMapping:
    def test_camel_case_aliases(self) -> None:
        c = Criteria.from_mapping(
            {
                "search": "klozet",
                "eanCode": "869",
                "minWeight": "1.5",
                "maxWarranty": "24",
                "sortBy": "name",
                "sortDirection": "asc",
                "hasImage": "true",
                "hasBarcode": "false",
                "barcodeType": "trendyol",
                "page": "2",
                "pageSize": "20",
            }
        )
        assert c.search_text == "klozet"
        assert c.ean_code == "869"
        assert c.min_weight == Decimal("1.5")
        assert c.max_warranty == 24
        assert c.sort_by == "name"
        assert c.sort_direction == "asc"
        assert c.has_image is True
        assert c.has_barcode is False
        assert c.barcode_type == "trendyol"
        assert (c.page, c.page_size) == (2, 20)

    def test_blank_values_are_absent(self) -> None:
        c = Criteria.from_mapping({"search": "  ", "hasImage": "", "minWeight": "", "sortBy": ""})
        assert c == Criteria()

    def test_snake_case_names(self) -> None:
        c = Criteria.from_mapping({"search_text": "lavabo", "has_ean": "1"})
        assert c.search_text == "lavabo"
        assert c.has_ean is True

    def test_default_page_size_applies_when_missing_or_blank(self) -> None:
        assert Criteria.from_mapping({}, default_page_size=25).page_size == 25
        assert Criteria.from_mapping({"pageSize": ""}, default_page_size=25).page_size == 25
        assert Criteria.from_mapping({"pageSize": "10"}, default_page_size=25).page_size == 10

    def test_unknown_keys_ignored(self) -> None:
        assert Criteria.from_mapping({"utm_source": "x"}) == Criteria()

    @pytest.mark.parametrize(
        "params",
        [{"minWeight": "heavy"}, {"page": "two"}, {"hasImage": "maybe"}, {"maxWarranty": "1.5"}],
    )
    def test_unparseable_values_raise(self, params: dict[str, str]) -> None:
        with pytest.raises(ValidationError):
            Criteria.from_mapping(params)
