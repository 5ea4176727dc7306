from collections import namedtuple
import logging

from TLB import TLB
from page_table import PageTable

log = logging.getLogger(__name__)

Translation = namedtuple(
    'Translation', ['address', 'page_number', 'offset', 'frame_number', 'value', 'frame_data']
)


def split_address(address):
    # only the low 16 bits matter: page in bits 15-8, offset in bits 7-0
    return (address >> 8) & 0xFF, address & 0xFF


class Metrics:
    def __init__(self):
        self.addresses = 0
        self.page_faults = 0
        self.tlb_hits = 0
        self.tlb_misses = 0

    @property
    def page_fault_rate(self):
        if not self.addresses:
            return 0.0
        return self.page_faults / self.addresses

    @property
    def tlb_hit_rate(self):
        lookups = self.tlb_hits + self.tlb_misses
        if not lookups:
            return 0.0
        return self.tlb_hits / lookups


class FrameDirectory:
    def __init__(self, size):
        self.pages = [None] * size

    def bind(self, frame_number, page_number):
        self.pages[frame_number] = page_number

    def resident_page(self, frame_number):
        return self.pages[frame_number]


class Memory:
    def __init__(self, size, store, policy):
        self.size = size
        self.memory = [None] * size
        self.page_table = PageTable()
        self.tlb = TLB()
        self.frame_directory = FrameDirectory(size)
        self.next_free = 0
        self.last_used = [-1] * size
        self.clock = 0
        self.stats = Metrics()
        self.store = store
        self.policy = policy

    def translate(self, address):
        page_number, offset = split_address(address)
        frame_number = self.get_page(page_number)
        self.last_used[frame_number] = self.clock

        frame_data = self.memory[frame_number]
        byte = frame_data[offset]
        signed_byte = byte - 256 if byte > 127 else byte

        self.stats.addresses += 1
        self.clock += 1
        return Translation(address, page_number, offset, frame_number, signed_byte, frame_data)

    def get_page(self, page_number):
        # check if page is in TLB
        frame_number = self.tlb.lookup(page_number)
        if frame_number is not None:
            self.stats.tlb_hits += 1
            return frame_number
        self.stats.tlb_misses += 1

        entry = self.page_table.lookup(page_number)
        if entry.present:
            frame_number = entry.frame_number
        else:
            self.stats.page_faults += 1
            frame_number = self.page_fault(page_number)

        self.tlb.insert(page_number, frame_number)
        return frame_number

    def page_fault(self, page_number):
        if self.next_free < self.size:
            frame_number = self.next_free
            self.next_free += 1
            log.debug("page fault on %d, loading into free frame %d", page_number, frame_number)
        else:
            frame_number = self.evict()
            log.debug("page fault on %d, reusing frame %d", page_number, frame_number)
        return self.load_from_bs(page_number, frame_number)

    def evict(self):
        frame_number = self.policy.victim(self)
        old_page = self.frame_directory.resident_page(frame_number)
        if old_page is None:
            raise LookupError(f"{self.policy.name} chose frame {frame_number}, which holds no page")

        self.page_table.mark_evicted(old_page)
        self.tlb.invalidate(old_page)
        log.debug("%s evicted page %d from frame %d", self.policy.name, old_page, frame_number)
        return frame_number

    def load_from_bs(self, page_number, frame_number):
        self.memory[frame_number] = self.store.read_page(page_number)
        self.frame_directory.bind(frame_number, page_number)
        self.page_table.mark_resident(page_number, frame_number)
        self.policy.loaded(frame_number)
        return frame_number
