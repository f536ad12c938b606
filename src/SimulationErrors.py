class SimulationError(Exception):
	"""base class for every error raised by the simulator"""


class TraceSourceUnavailable(SimulationError):

	def __init__(self, path: str, reason: OSError):
		super().__init__('%s: %s' % (path, reason.strerror or reason))
		self.path = path
		self.reason = reason


class MalformedRecord(SimulationError, ValueError):

	def __init__(self, line_number: int, text: str):
		super().__init__('line %d: cannot parse %r as "<hex address> <type>"' % (line_number, text))
		self.line_number = line_number
		self.text = text


class CapacityError(SimulationError):
	"""raised when a page fault finds no free frame and no page to evict, or when frame occupancy would be corrupted"""


class AddressOutOfRange(SimulationError, ValueError):
	pass
