from abc import ABC, abstractmethod
from bisect import bisect_left
from typing import Optional

from PageTable import PageTable


class ReplacementPolicy(ABC):
    """Chooses which resident page gives up its frame when none is free."""

    name = None

    @abstractmethod
    def touch(self, page_table: PageTable, page_number: int) -> None:
        """updates the replacement metadata of 'page_number' after a successful reference to it"""
        raise NotImplementedError

    @abstractmethod
    def select_victim(self, page_table: PageTable) -> Optional[int]:
        """returns the page number to evict; returns None if no page is resident"""
        raise NotImplementedError

    def __str__(self):
        return self.name


class LeastRecentlyUsed(ReplacementPolicy):
    name = "LRU"

    def touch(self, page_table: PageTable, page_number: int) -> None:
        page_table.entry(page_number).recency = page_table.next_tick()

    def select_victim(self, page_table: PageTable) -> Optional[int]:
        victim = None
        oldest = None
        # ascending page order, strict comparison: ties go to the lower page
        for page in page_table.resident_pages():
            recency = page_table.entry(page).recency
            if oldest is None or recency < oldest:
                oldest = recency
                victim = page
        return victim


class SecondChance(ReplacementPolicy):
    name = "Second Chance"

    def __init__(self):
        self.hand = 0  # page number the clock hand points at

    def touch(self, page_table: PageTable, page_number: int) -> None:
        page_table.entry(page_number).referenced = True

    def select_victim(self, page_table: PageTable) -> Optional[int]:
        pages = page_table.resident_pages()
        if not pages:
            return None
        # the hand sweeps page-number space, skipping pages that are not resident;
        # a hand past the highest resident page wraps around to the lowest one
        start = bisect_left(pages, self.hand)
        for step in range(2 * len(pages)):
            page = pages[(start + step) % len(pages)]
            entry = page_table.entry(page)
            if not entry.referenced:
                self.hand = page + 1
                return page
            entry.referenced = False
        raise AssertionError('second chance scan did not terminate within two sweeps')


POLICIES = {
    "0": LeastRecentlyUsed,
    "1": SecondChance,
}


def policy_from_selector(selector: str) -> ReplacementPolicy:
    """returns a new policy for the command line selector: '0' for LRU, '1' for Second Chance"""
    try:
        return POLICIES[selector.strip()]()
    except KeyError:
        raise ValueError('invalid policy %r, use 0 for LRU or 1 for Second Chance' % selector) from None
