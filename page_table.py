PAGE_TABLE_SIZE = 256


class PageTableEntry:
    __slots__ = ('frame_number', 'present')

    def __init__(self):
        self.frame_number = None
        self.present = False

    def __repr__(self):
        return f"PageTableEntry(frame_number={self.frame_number}, present={self.present})"


class PageTable:
    def __init__(self, num_entries=PAGE_TABLE_SIZE):
        self.table = [PageTableEntry() for _ in range(num_entries)]
        self.num_entries = num_entries

    def lookup(self, page_number):
        return self.table[page_number]

    def mark_resident(self, page_number, frame_number):
        entry = self.table[page_number]
        entry.frame_number = frame_number
        entry.present = True

    def mark_evicted(self, page_number):
        # frame_number is left as is, nothing reads it while present is False
        self.table[page_number].present = False
