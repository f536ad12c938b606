#!/usr/bin/env python3
import argparse
import logging
import sys

from ReplacementPolicy import policy_from_selector
from SimulationErrors import TraceSourceUnavailable
from TraceReader import read_trace
from Translator import Translator


def policy_argument(selector: str):
    try:
        return policy_from_selector(selector)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='virtual-memory',
        description='Translate a trace of virtual addresses through a TLB and a single-level page table.')
    parser.add_argument('trace_file', type=str, help='trace file with one "<hex address> <R|W>" record per line')
    parser.add_argument('policy', type=policy_argument, help='page replacement policy: 0 = LRU, 1 = Second Chance')
    return parser


def print_results(translator: Translator) -> None:
    print()
    print('Method used: ' + str(translator.policy))
    print('Page Faults: ' + str(translator.stats.page_faults))
    print('TLB Hits: ' + str(translator.stats.tlb_hits))
    print('TLB Misses: ' + str(translator.stats.tlb_misses))


def main(argv=None) -> int:
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    args = build_parser().parse_args(argv)

    translator = Translator(args.policy)
    try:
        for va, pa in translator.run(read_trace(args.trace_file)):
            print('Logical address: 0x%08X -> Physical address: 0x%08X' % (va, pa))
    except TraceSourceUnavailable as e:
        print('Error opening trace file: ' + str(e), file=sys.stderr)
        return 1

    print_results(translator)
    return 0


if __name__ == '__main__':
    sys.exit(main())
