import logging
import re
from typing import Iterator, Tuple

from PhysicalMemory import VIRTUAL_ADDRESS_SIZE
from SimulationErrors import MalformedRecord, TraceSourceUnavailable

HEX_ADDRESS = re.compile(r'(0[xX])?[0-9A-Fa-f]+')

logger = logging.getLogger(__name__)


def parse_record(line: str, line_number: int = 0) -> Tuple[int, str]:
    """parses '<hex address> <access type>' into (address, access type); raises MalformedRecord if the line does
    not have exactly those two fields, the address is not hexadecimal or wider than 32 bits, or the type is not a
    single character"""
    tokens = line.split()
    if len(tokens) != 2 or len(tokens[1]) != 1 or not HEX_ADDRESS.fullmatch(tokens[0]):
        raise MalformedRecord(line_number, line.rstrip('\n'))
    address = int(tokens[0], 16)
    if address >= 1 << VIRTUAL_ADDRESS_SIZE:
        raise MalformedRecord(line_number, line.rstrip('\n'))
    return address, tokens[1]


def read_trace(path: str) -> Iterator[Tuple[int, str]]:
    """yields the records of the trace file at 'path' one at a time. reading stops at the first malformed record,
    which is logged and otherwise treated like the end of the file. bytes that are not valid UTF-8 are decoded to
    replacement characters, so a line holding them is malformed"""
    try:
        trace_file = open(path, 'r', encoding='utf-8', errors='replace')
    except OSError as e:
        raise TraceSourceUnavailable(path, e) from e
    with trace_file:
        for line_number, line in enumerate(trace_file, start=1):
            if not line.strip():
                continue
            try:
                record = parse_record(line, line_number)
            except MalformedRecord as e:
                logger.warning('stopped reading %s at malformed record (%s)', path, e)
                return
            yield record
