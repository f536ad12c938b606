import logging
from typing import Iterable, Iterator, Tuple

from PageTable import PageTable
from PhysicalMemory import (PAGE_SIZE, NUM_FRAMES, TLB_SIZE, VIRTUAL_ADDRESS_SIZE, FrameAllocator,
                            frame_number_to_physical_address, page_offset_size, va_to_pw)
from ReplacementPolicy import ReplacementPolicy
from SimulationErrors import AddressOutOfRange, CapacityError
from TranslationLookasideBuffer import TranslationLookasideBuffer

logger = logging.getLogger(__name__)


class Stats:

    def __init__(self):
        self.tlb_hits = 0
        self.tlb_misses = 0
        self.page_faults = 0

    @property
    def references(self) -> int:
        return self.tlb_hits + self.tlb_misses


class Translator:
    """Owns one complete simulated memory system and translates references through it.

    Every reference probes the TLB first. A miss falls back to the page table,
    and a page that is not resident is faulted in. Fault handling takes a free
    frame when there is one and otherwise evicts the victim picked by the
    replacement policy. TLB entries of evicted pages are left in place; an
    entry is checked against the page table when it is used, and one that
    no longer matches counts as a miss and is refilled.
    """

    def __init__(self, policy: ReplacementPolicy, page_size: int = PAGE_SIZE, num_frames: int = NUM_FRAMES,
                 tlb_size: int = TLB_SIZE, address_size: int = VIRTUAL_ADDRESS_SIZE):
        if num_frames < 0:
            raise ValueError('number of frames cannot be negative, got %r' % num_frames)
        self.offset_size = page_offset_size(page_size)
        if self.offset_size > address_size:
            raise ValueError('page size %d does not fit in a %d bit address' % (page_size, address_size))
        self.address_size = address_size
        self.policy = policy
        self.tlb = TranslationLookasideBuffer(tlb_size)
        self.page_table = PageTable()
        self.frames = FrameAllocator(num_frames)
        self.stats = Stats()

    def translate(self, virtual_address: int, access_type: str = 'R') -> int:
        """returns the physical address 'virtual_address' maps to, faulting the page in if needed. 'access_type' is
        accepted for trace compatibility; reads and writes are translated the same way"""
        if not 0 <= virtual_address < 1 << self.address_size:
            raise AddressOutOfRange('address 0x%X does not fit in %d bits' % (virtual_address, self.address_size))
        page_number, offset = va_to_pw(virtual_address, self.offset_size, self.address_size)

        frame_number = self.tlb.lookup(page_number)
        if frame_number is not None and not self.is_current(page_number, frame_number):
            # stale entry left behind by an eviction, refilled below
            frame_number = None
        if frame_number is not None:  # hit
            self.stats.tlb_hits += 1
        else:
            self.stats.tlb_misses += 1
            if not self.page_table.is_resident(page_number):
                self.handle_page_fault(page_number)
            frame_number = self.page_table.resolve(page_number)
            self.tlb.insert(page_number, frame_number)
        self.page_table.touch(page_number, self.policy)

        return frame_number_to_physical_address(frame_number, self.offset_size) | offset

    def is_current(self, page_number: int, frame_number: int) -> bool:
        """returns True if the page table still maps 'page_number' to 'frame_number'"""
        return self.page_table.is_resident(page_number) and self.page_table.resolve(page_number) == frame_number

    def handle_page_fault(self, page_number: int) -> None:
        frame_number = self.frames.allocate_free()
        if frame_number is None:
            victim = self.policy.select_victim(self.page_table)
            if victim is None:
                raise CapacityError('page fault on page 0x%X with no free frame and no resident page to evict'
                                    % page_number)
            frame_number = self.page_table.evict(victim)
            self.frames.release(frame_number)
            logger.debug('%s evicted page 0x%05X to make room for page 0x%05X', self.policy, victim, page_number)
        self.frames.bind(frame_number, page_number)
        self.page_table.install(page_number, frame_number)
        self.stats.page_faults += 1
        logger.debug('page fault: page 0x%05X loaded into frame %d', page_number, frame_number)

    def run(self, records: Iterable[Tuple[int, str]]) -> Iterator[Tuple[int, int]]:
        """translates each (address, access type) record in turn, yielding (virtual, physical) address pairs"""
        for address, access_type in records:
            yield address, self.translate(address, access_type)
