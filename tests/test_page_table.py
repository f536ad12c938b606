import pytest

from PageTable import PageTable
from ReplacementPolicy import LeastRecentlyUsed, SecondChance


def test_new_table_has_nothing_resident():
    table = PageTable()
    assert not table.is_resident(0)
    assert table.entry(0) is None
    assert len(table) == 0
    with pytest.raises(KeyError):
        table.resolve(0)


def test_install_and_resolve():
    table = PageTable()
    table.install(0xABCDE, 7)
    assert table.is_resident(0xABCDE)
    assert table.resolve(0xABCDE) == 7
    assert len(table) == 1


def test_evict_returns_frame_and_invalidates_entry():
    table = PageTable()
    table.install(4, 2)
    assert table.evict(4) == 2
    assert not table.is_resident(4)
    assert table.entry(4).frame_number is None
    with pytest.raises(KeyError):
        table.resolve(4)
    with pytest.raises(KeyError):
        table.evict(4)


def test_install_stamps_current_tick_and_clears_reference_bit():
    table = PageTable()
    assert table.next_tick() == 0
    assert table.next_tick() == 1
    table.install(1, 0)
    entry = table.entry(1)
    assert entry.recency == 2
    assert table.tick == 2
    entry.referenced = True
    table.evict(1)
    table.install(1, 3)
    assert not entry.referenced


def test_touch_follows_policy():
    table = PageTable()
    table.install(1, 0)
    table.install(2, 1)
    table.touch(1, LeastRecentlyUsed())
    table.touch(2, LeastRecentlyUsed())
    assert table.entry(1).recency == 0
    assert table.entry(2).recency == 1
    assert not table.entry(1).referenced

    table.touch(1, SecondChance())
    assert table.entry(1).referenced
    assert table.entry(1).recency == 0


def test_resident_pages_sorted():
    table = PageTable()
    for page, frame in [(9, 0), (2, 1), (5, 2)]:
        table.install(page, frame)
    table.evict(5)
    assert table.resident_pages() == [2, 9]
