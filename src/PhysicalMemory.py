import logging
from typing import List, Optional

from bitarray import bitarray

from SimulationErrors import CapacityError

PAGE_SIZE = 4096  # bytes
NUM_FRAMES = 64
TLB_SIZE = 16  # entries
VIRTUAL_ADDRESS_SIZE = 32  # bits
PAGE_OFFSET_SIZE = PAGE_SIZE.bit_length() - 1  # 12 bits

logger = logging.getLogger(__name__)


class FrameAllocator:

    def __init__(self, num_frames: int = NUM_FRAMES):
        self.occupied = bitarray(num_frames)
        self.occupied.setall(0)
        self.owners: List[Optional[int]] = [None] * num_frames  # frame -> page number

    def __len__(self) -> int:
        return len(self.occupied)

    def allocate_free(self) -> Optional[int]:
        """returns the lowest numbered free frame, or None if every frame is occupied; the frame is only marked once
		it is bound to a page"""
        for index, bit in enumerate(self.occupied):
            if bit == 0:
                return index
        return None

    def bind(self, frame_number: int, page_number: int) -> None:
        if self.occupied[frame_number]:
            raise CapacityError('frame %d is already bound to page %d' % (frame_number, self.owners[frame_number]))
        self.occupied[frame_number] = True
        self.owners[frame_number] = page_number
        logger.debug('frame %d bound to page 0x%05X', frame_number, page_number)

    def release(self, frame_number: int) -> None:
        if not self.occupied[frame_number]:
            raise CapacityError('frame %d is already free' % frame_number)
        self.occupied[frame_number] = False
        self.owners[frame_number] = None

    def owner(self, frame_number: int) -> Optional[int]:
        return self.owners[frame_number]

    def occupied_count(self) -> int:
        return self.occupied.count(1)


def page_offset_size(page_size: int) -> int:
    """returns the number of offset bits for 'page_size'; raises ValueError if 'page_size' is not a power of two"""
    if page_size < 1 or page_size & (page_size - 1):
        raise ValueError('page size must be a power of two, got %r' % page_size)
    return page_size.bit_length() - 1


def frame_number_to_physical_address(frame_number: int, offset_size: int = PAGE_OFFSET_SIZE) -> int:
    """converts frame number to the physical address of the beginning of the frame"""
    return frame_number << offset_size


def extract(value: int, begin: int, end: int) -> int:
    """extracts [begin, end) bits from value"""
    mask = (1 << (end - begin)) - 1
    return (value >> begin) & mask


# p: page number
# w: offset in page
def va_to_pw(va: int, offset_size: int = PAGE_OFFSET_SIZE,
             address_size: int = VIRTUAL_ADDRESS_SIZE) -> (int, int):
    """returns a tuple of (p, w) where p: page number, w: offset in page"""
    w = extract(va, 0, offset_size)
    p = extract(va, offset_size, address_size)
    return p, w
