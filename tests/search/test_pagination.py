"""Tests for the incremental result window."""

from __future__ import annotations

import pytest

from forkful.search.pagination import PaginationWindow


def test_first_page_and_load_more():
    items = list(range(7))
    window = PaginationWindow(3, items)

    assert window.visible() == [0, 1, 2]
    assert window.has_more

    assert window.load_more() == 6
    assert window.load_more() == 7
    assert not window.has_more
    assert window.visible() == items


def test_load_more_is_idempotent_at_the_end():
    window = PaginationWindow(3, list(range(4)))
    window.load_more()
    assert window.visible_count == window.total_count == 4

    for _ in range(3):
        window.load_more()
        assert window.visible_count == 4


def test_short_list_has_nothing_more():
    window = PaginationWindow(3, ["only"])
    assert window.visible_count == 1
    assert not window.has_more
    assert window.load_more() == 1


def test_sync_with_new_list_resets_to_first_page():
    first = list(range(10))
    window = PaginationWindow(3)
    assert window.sync(first)
    window.load_more()
    assert window.visible_count == 6

    assert not window.sync(first)
    assert window.visible_count == 6

    assert window.sync(list(range(10)))
    assert window.visible_count == 3


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        PaginationWindow(0)
