"""Pagination — 1-based slicing and range errors."""

import pytest

from app.core.errors import PageOutOfRangeError, ProfileValidationError
from app.core.pagination import paginate

SEVEN = list(range(7))


def test_first_page_is_full():
    assert paginate(SEVEN, 1, 3) == [0, 1, 2]


def test_last_page_is_partial():
    assert paginate(SEVEN, 3, 3) == [6]


def test_page_past_end_is_out_of_range():
    with pytest.raises(PageOutOfRangeError) as exc_info:
        paginate(SEVEN, 4, 3)
    assert exc_info.value.total == 7
    assert exc_info.value.page == 4


def test_empty_collection_has_no_first_page():
    with pytest.raises(PageOutOfRangeError):
        paginate([], 1, 10)


@pytest.mark.parametrize("page,size,field_name", [(0, 3, "page"), (1, 0, "size"), (-1, 3, "page")])
def test_non_positive_parameters_rejected(page, size, field_name):
    with pytest.raises(ProfileValidationError) as exc_info:
        paginate(SEVEN, page, size)
    assert exc_info.value.field == field_name
