import pytest

from board.pagination import Page, PageSpec, SortDirection


@pytest.mark.parametrize(
    "value, expected",
    [
        ("postId,desc", ("postId", SortDirection.DESC)),
        ("title,ASC", ("title", SortDirection.ASC)),
        ("content", ("content", SortDirection.ASC)),
        ("title,", ("title", SortDirection.ASC)),
    ],
)
def test_parse_sort(value, expected):
    assert PageSpec.parse_sort(value) == expected


def test_parse_sort_rejects_unknown_direction():
    with pytest.raises(ValueError):
        PageSpec.parse_sort("title,sideways")


def test_page_spec_defaults():
    spec = PageSpec()
    assert spec.page_number == 0
    assert spec.page_size == 5
    assert spec.sort_key == "id"
    assert spec.sort_direction is SortDirection.DESC
    assert spec.offset == 0


def test_page_spec_offset():
    assert PageSpec(page_number=3, page_size=5).offset == 15


def test_page_metadata():
    page = Page(items=[1, 2], page_number=1, page_size=5, total_elements=7)
    assert page.total_pages == 2
    assert page.number_of_elements == 2
    assert not page.is_first
    assert page.is_last
    assert not page.is_empty


def test_empty_page_metadata():
    page = Page(items=[], page_number=0, page_size=5, total_elements=0)
    assert page.total_pages == 0
    assert page.is_first
    assert page.is_last
    assert page.is_empty


def test_page_map_preserves_metadata():
    page = Page(items=[1, 2, 3], page_number=0, page_size=3, total_elements=9)
    mapped = page.map(str)
    assert mapped.items == ["1", "2", "3"]
    assert (mapped.page_number, mapped.page_size, mapped.total_elements) == (0, 3, 9)
    assert mapped.total_pages == 3
