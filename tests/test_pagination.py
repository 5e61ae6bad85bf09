"""Tests for the shared pagination/filter contract."""
import pytest
from pydantic import ValidationError

from scaffold.common.pagination import (
    FilterParams,
    Page,
    PaginatedResponse,
    PaginatedResult,
    PaginationParams,
    compute_pages,
)


def test_pagination_defaults():
    params = PaginationParams()
    assert params.limit == 10
    assert params.offset == 0
    assert params.sort == "createdAt"
    assert params.order == "DESC"


def test_filter_params_extend_pagination_with_optional_search():
    params = FilterParams()
    assert params.search is None
    assert params.limit == 10

    params = FilterParams.model_validate({"search": "ocean", "limit": "3"})
    assert params.search == "ocean"
    assert params.limit == 3


def test_query_text_is_coerced_to_integers():
    params = PaginationParams.model_validate({"limit": "25", "offset": "50"})
    assert params.limit == 25
    assert params.offset == 50


@pytest.mark.parametrize("payload", [
    {"limit": 0},
    {"limit": "-1"},
    {"offset": -1},
    {"limit": "ten"},
    {"order": "sideways"},
    {"sort": ""},
])
def test_values_below_floor_or_malformed_are_rejected(payload):
    with pytest.raises(ValidationError):
        PaginationParams.model_validate(payload)


def test_order_is_case_insensitive():
    assert PaginationParams(order="asc").order == "ASC"
    assert PaginationParams(order=" desc ").order == "DESC"


@pytest.mark.parametrize("total,limit,pages", [
    (0, 10, 0),
    (1, 10, 1),
    (10, 10, 1),
    (11, 10, 2),
    (7, 1, 7),
    (99, 100, 1),
])
def test_compute_pages(total, limit, pages):
    assert compute_pages(total, limit) == pages


def test_page_from_result_derives_pages():
    result = PaginatedResult(data=["a", "b"], total=5, limit=2, offset=2)
    page = Page.from_result(result)

    assert page.data == ["a", "b"]
    assert page.paginate.total == 5
    assert page.paginate.limit == 2
    assert page.paginate.offset == 2
    assert page.paginate.pages == 3


def test_page_map_keeps_metadata():
    page = Page.from_result(PaginatedResult(data=[1, 2], total=2, limit=10, offset=0))
    mapped = page.map(str)

    assert mapped.data == ["1", "2"]
    assert mapped.paginate is page.paginate


def test_paginated_response_envelope_shape():
    page = Page.from_result(PaginatedResult(data=[], total=0, limit=10, offset=30))
    response = PaginatedResponse[int].from_page(page)

    assert response.model_dump() == {
        "data": [],
        "paginate": {"total": 0, "limit": 10, "offset": 30, "pages": 0},
    }
