from typing import Optional

from PhysicalMemory import TLB_SIZE

VALID = 0
PAGE = 1
FRAME = 2


class TranslationLookasideBuffer:
	#	table entry is of the form: 	[valid, p, f]
	# 	where valid says whether the slot holds a mapping, p is the page number and f is the frame the page was mapped
	#	to when the entry was inserted. entries are replaced round-robin (FIFO), the cursor points at the next victim.
	#	entries for evicted pages are not invalidated here; callers check a hit against the page table

	def __init__(self, capacity: int = TLB_SIZE):
		if capacity < 1:
			raise ValueError('TLB capacity must be at least 1, got %r' % capacity)
		self.capacity = capacity
		self.table = [[False, -1, 0] for i in range(capacity)]
		self.cursor = 0

	def __len__(self) -> int:
		return sum(1 for entry in self.table if entry[VALID])

	def index_of_page_in_table(self, page_number: int) -> int:
		"""returns the index of the valid entry holding 'page_number'; returns -1 if 'page_number' is not found in any
		of the entries in the table"""
		for i, entry in enumerate(self.table):
			if entry[VALID] and entry[PAGE] == page_number:
				return i
		return -1

	def lookup(self, page_number: int) -> Optional[int]:
		index = self.index_of_page_in_table(page_number)
		if index == -1:
			return None
		return self.table[index][FRAME]

	def insert(self, page_number: int, frame_number: int) -> None:
		"""writes the mapping into the slot under the cursor and advances the cursor; a page that is already cached is
		rewritten in place so the table never holds duplicates"""
		index = self.index_of_page_in_table(page_number)
		if index != -1:
			self.table[index][FRAME] = frame_number
			return
		self.table[self.cursor] = [True, page_number, frame_number]
		self.cursor = (self.cursor + 1) % self.capacity
