#!/usr/local/bin/python3
from main_memory import Memory, split_address
from backing_store import BackingStore, ResourceUnavailable, StoreReadError
from replacement import POLICIES, make_policy
import logging
import os
import re
import sys

log = logging.getLogger(__name__)

MAX_FRAMES = 256
DEFAULT_FRAMES = 256
DEFAULT_PRA = "FIFO"
DEFAULT_BACKING_STORE = "BACKING_STORE.bin"

USAGE = "Usage: memsim <reference-sequence-file.txt> [<FRAMES> <PRA>]"

LEADING_INT = re.compile(r'[ \t\n\v\f\r]*([+-]?[0-9]+)')


class ConfigurationError(ValueError):
    pass


def parse_arguments(argc, argv):
    # memsim <file> or memsim <file> <FRAMES> <PRA>
    if argc == 2:
        return argv[1], DEFAULT_FRAMES, DEFAULT_PRA
    if argc != 4:
        raise ConfigurationError("wrong number of arguments")

    frames = argv[2]
    pra = argv[3]
    if not frames.isdecimal():
        raise ConfigurationError(f"FRAMES must be an integer between 1 and {MAX_FRAMES} inclusive")
    frames = int(frames)
    if frames < 1 or frames > MAX_FRAMES:
        raise ConfigurationError(f"FRAMES must be an integer between 1 and {MAX_FRAMES} inclusive")
    if pra not in POLICIES:
        raise ConfigurationError("Page replacement algorithm must be FIFO, LRU, or OPT")
    return argv[1], frames, pra


def parse_address(line):
    """Parse the leading decimal integer of a line, atoi style.

    Anything after the number is ignored. A line with no leading number
    becomes address 0.
    """
    match = LEADING_INT.match(line)
    if match is None:
        log.warning("malformed address line %r, using address 0", line.rstrip('\n'))
        return 0
    return int(match.group(1))


def open_reference_file(path):
    try:
        return open(path, "r")
    except OSError as err:
        raise ResourceUnavailable(f"cannot open reference file {path}: {err.strerror}") from err


def read_addresses(reference_file):
    for line in reference_file:
        yield parse_address(line)


def scan_pages(path):
    # first pass for OPT: page numbers only, nothing is translated
    with open_reference_file(path) as reference_file:
        return [split_address(address)[0] for address in read_addresses(reference_file)]


def format_record(translation):
    hex_data = BackingStore.byte_array_to_hex_ascii(translation.frame_data)
    return f"{translation.address}, {translation.value}, {translation.frame_number}, {hex_data}"


def print_summary(stats, out=None):
    if out is None:
        out = sys.stdout
    print(f"Number of Translated Addresses = {stats.addresses}", file=out)
    print(f"Page Faults = {stats.page_faults}", file=out)
    print(f"Page Fault Rate = {stats.page_fault_rate:.3f}", file=out)
    print(f"TLB Hits = {stats.tlb_hits}", file=out)
    print(f"TLB Misses = {stats.tlb_misses}", file=out)
    print(f"TLB Hit Rate = {stats.tlb_hit_rate:.3f}", file=out)


def simulate(input_path, frames, pra, store_path=DEFAULT_BACKING_STORE, out=None):
    if out is None:
        out = sys.stdout
    references = scan_pages(input_path) if pra == "OPT" else None
    policy = make_policy(pra, references)

    with BackingStore(store_path) as bs, open_reference_file(input_path) as reference_file:
        mem = Memory(frames, bs, policy)
        for address in read_addresses(reference_file):
            print(format_record(mem.translate(address)), file=out)
        print_summary(mem.stats, out)
    return mem.stats


def main(argc, argv):
    level = os.environ.get("MEMSIM_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        input_path, frames, pra = parse_arguments(argc, argv)
    except ConfigurationError as err:
        print(f"Error: {err}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    store_path = os.environ.get("MEMSIM_BACKING_STORE", DEFAULT_BACKING_STORE)
    log.info("simulating %s with %d frames, %s, backing store %s", input_path, frames, pra, store_path)
    try:
        simulate(input_path, frames, pra, store_path)
    except (ResourceUnavailable, StoreReadError) as err:
        log.error("%s", err)
        return 1
    return 0


def run():
    return main(len(sys.argv), sys.argv)


if __name__ == "__main__":
    sys.exit(run())
