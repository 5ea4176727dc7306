from collections import deque
from itertools import islice
import logging

log = logging.getLogger(__name__)

POLICIES = ("FIFO", "LRU", "OPT")


class FIFOPolicy:
    name = "FIFO"

    def __init__(self):
        self.insert_order = deque()

    def loaded(self, frame_number):
        self.insert_order.append(frame_number)

    def victim(self, mem):
        # oldest load goes first, the frame comes back through loaded()
        return self.insert_order.popleft()


class LRUPolicy:
    name = "LRU"

    def loaded(self, frame_number):
        pass

    def victim(self, mem):
        # min() keeps the first frame on ties
        return min(range(mem.size), key=lambda frame_number: mem.last_used[frame_number])


class OPTPolicy:
    name = "OPT"

    def __init__(self, references):
        self.references = list(references)

    def loaded(self, frame_number):
        pass

    def victim(self, mem):
        # page -> frame for everything resident, in frame order
        candidates = {}
        for frame_number in range(mem.size):
            page_number = mem.frame_directory.resident_page(frame_number)
            if page_number is not None:
                candidates[page_number] = frame_number

        for page_number in islice(self.references, mem.clock + 1, None):
            if len(candidates) == 1:
                break
            candidates.pop(page_number, None)

        # whatever is left is never referenced again, or is the last one seen
        victim = min(candidates.values())
        log.debug("OPT picked frame %d at position %d", victim, mem.clock)
        return victim


def make_policy(name, references=None):
    if name == "FIFO":
        return FIFOPolicy()
    if name == "LRU":
        return LRUPolicy()
    if name == "OPT":
        if references is None:
            raise ValueError("OPT needs the full reference sequence")
        return OPTPolicy(references)
    raise ValueError(f"unknown page replacement algorithm {name!r}")
