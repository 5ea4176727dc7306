TLB_SIZE = 16


class TLBEntry:
    __slots__ = ('page_number', 'frame_number', 'valid')

    def __init__(self, page_number=0, frame_number=0, valid=False):
        self.page_number = page_number
        self.frame_number = frame_number
        self.valid = valid

    def __repr__(self):
        return f"TLBEntry({self.page_number}, {self.frame_number}, valid={self.valid})"


class TLB:
    def __init__(self, maxsize=TLB_SIZE):
        self.maxsize = maxsize
        self.entries = [TLBEntry() for _ in range(maxsize)]
        self.cursor = 0

    def insert(self, page_number, frame_number):
        entry = self.entries[self.cursor]
        entry.page_number = page_number
        entry.frame_number = frame_number
        entry.valid = True
        self.cursor = (self.cursor + 1) % self.maxsize  # FIFO

    def lookup(self, page_number):
        for entry in self.entries:
            if entry.valid and entry.page_number == page_number:
                return entry.frame_number
        return None

    def invalidate(self, page_number):
        for entry in self.entries:
            if entry.valid and entry.page_number == page_number:
                entry.valid = False
