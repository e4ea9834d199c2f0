import pytest

from src.core.response.schemas import Page, PageRequest
from src.core.utils.utils import get_app_modules, page_window


def test_page_window_bounds():
    for total_pages in range(1, 40):
        for now_page in range(1, total_pages + 1):
            start, end = page_window(now_page, total_pages)
            assert start == max(now_page - 4, 1)
            assert end == min(now_page + 5, total_pages)
            assert 1 <= start <= now_page <= end <= total_pages


@pytest.mark.parametrize(
    "now_page, total_pages, expected",
    [
        (1, 1, (1, 1)),
        (1, 20, (1, 6)),
        (6, 20, (2, 11)),
        (97, 100, (93, 100)),
        (1, 0, (1, 0)),
    ],
)
def test_page_window_examples(now_page, total_pages, expected):
    assert page_window(now_page, total_pages) == expected


def test_page_build_computes_totals():
    page = Page.build(["a", "b"], PageRequest(page=1, size=2), total=5)

    assert page.total_pages == 3
    assert page.total_elements == 5
    assert page.has_previous and page.has_next


def test_page_request_is_immutable():
    request = PageRequest()

    with pytest.raises(Exception):
        request.page = 3  # type: ignore[misc]

    assert request.offset == 0
    assert PageRequest(page=3, size=10).offset == 30


def test_board_models_are_discovered():
    modules = get_app_modules("models")

    assert modules["board"] == {"post": "src.apps.board.models.post"}
