import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class PageTableEntry:
    __slots__ = ('valid', 'frame_number', 'recency', 'referenced')

    def __init__(self):
        self.valid = False
        self.frame_number: Optional[int] = None
        self.recency = 0  # LRU timestamp
        self.referenced = False  # Second-Chance reference bit


class PageTable:
    """Single-level page table keyed by page number.

    Entries are created the first time a page is installed, so memory use
    follows the pages the trace actually touches rather than the whole
    virtual address space. The table also owns the global tick used as the
    LRU recency clock.
    """

    def __init__(self):
        self.entries: Dict[int, PageTableEntry] = {}
        self.tick = 0

    def __len__(self) -> int:
        return sum(1 for entry in self.entries.values() if entry.valid)

    def next_tick(self) -> int:
        tick = self.tick
        self.tick += 1
        return tick

    def entry(self, page_number: int) -> Optional[PageTableEntry]:
        return self.entries.get(page_number)

    def is_resident(self, page_number: int) -> bool:
        entry = self.entries.get(page_number)
        return entry is not None and entry.valid

    def resolve(self, page_number: int) -> int:
        """returns the frame holding 'page_number'; raises KeyError if the page is not resident"""
        if not self.is_resident(page_number):
            raise KeyError(page_number)
        return self.entries[page_number].frame_number

    def install(self, page_number: int, frame_number: int) -> None:
        entry = self.entries.get(page_number)
        if entry is None:
            entry = self.entries[page_number] = PageTableEntry()
        entry.valid = True
        entry.frame_number = frame_number
        entry.referenced = False
        entry.recency = self.tick

    def evict(self, page_number: int) -> int:
        """marks 'page_number' invalid and returns the frame it occupied; the caller releases that frame"""
        entry = self.entries[page_number]
        if not entry.valid:
            raise KeyError(page_number)
        frame_number = entry.frame_number
        entry.valid = False
        entry.frame_number = None
        logger.debug('page 0x%05X evicted from frame %d', page_number, frame_number)
        return frame_number

    def touch(self, page_number: int, policy) -> None:
        policy.touch(self, page_number)

    def resident_pages(self) -> List[int]:
        return sorted(page for page, entry in self.entries.items() if entry.valid)
