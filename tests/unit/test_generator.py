# tests/unit/test_generator.py

import pytest
from pyrsistent import PVector

from mixed_list.generator import DEFAULT_HEADING_INTERVAL, generate_items, make_item
from mixed_list.items import HeadingItem, MessageItem


@pytest.mark.parametrize("count", [0, 1, 5, 6, 7, 13, 100])
def test_generate_length(count: int) -> None:
    assert len(generate_items(count)) == count


def test_generate_returns_persistent_vector() -> None:
    items = generate_items(3)
    assert isinstance(items, PVector)
    with pytest.raises(TypeError):
        items[0] = HeadingItem("replaced")  # type: ignore[index]


def test_heading_every_sixth_index() -> None:
    items = generate_items(40)
    for i, item in enumerate(items):
        if i % 6 == 0:
            assert item == HeadingItem(heading=f"Heading {i}")
        else:
            assert item == MessageItem(sender=f"Sender {i}", body=f"Message body {i}")


def test_six_items_scenario() -> None:
    items = generate_items(6)
    assert items[0] == HeadingItem("Heading 0")
    assert list(items[1:]) == [
        MessageItem(f"Sender {k}", f"Message body {k}") for k in range(1, 6)
    ]


def test_seventh_item_is_heading() -> None:
    assert generate_items(7)[6] == HeadingItem("Heading 6")


def test_generate_is_deterministic() -> None:
    assert generate_items(20) == generate_items(20)


def test_custom_heading_interval() -> None:
    items = generate_items(7, heading_interval=3)
    headings = [i for i, item in enumerate(items) if isinstance(item, HeadingItem)]
    assert headings == [0, 3, 6]


def test_interval_of_one_is_all_headings() -> None:
    assert all(isinstance(item, HeadingItem) for item in generate_items(5, 1))


def test_make_item_matches_generate() -> None:
    items = generate_items(12)
    assert [make_item(i) for i in range(12)] == list(items)
    assert DEFAULT_HEADING_INTERVAL == 6


@pytest.mark.parametrize(
    "call",
    [
        lambda: generate_items(-1),
        lambda: generate_items(3, heading_interval=0),
        lambda: make_item(-2),
        lambda: make_item(1, heading_interval=-1),
    ],
)
def test_invalid_arguments(call) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(ValueError):
        call()
