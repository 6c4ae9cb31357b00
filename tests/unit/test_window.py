# tests/unit/test_window.py

import pytest

from mixed_list.utils.window import page_count, page_window


@pytest.mark.parametrize(
    "total, page_size, expected",
    [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (50, 12, 5)],
)
def test_page_count(total: int, page_size: int, expected: int) -> None:
    assert page_count(total, page_size) == expected


@pytest.mark.parametrize(
    "total, page, page_size, expected",
    [
        (50, 0, 12, range(0, 12)),
        (50, 4, 12, range(48, 50)),
        (50, 5, 12, range(50, 50)),
        (0, 0, 10, range(0, 0)),
    ],
)
def test_page_window(total: int, page: int, page_size: int, expected: range) -> None:
    assert page_window(total, page, page_size) == expected


def test_invalid_window_arguments() -> None:
    with pytest.raises(ValueError):
        page_count(10, 0)
    with pytest.raises(ValueError):
        page_window(10, 0, 0)
    with pytest.raises(ValueError):
        page_window(10, -1, 5)
