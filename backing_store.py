import logging

log = logging.getLogger(__name__)

PAGE_SIZE = 256


class ResourceUnavailable(OSError):
    """An input file or the backing store could not be opened."""


class StoreReadError(IOError):
    """The backing store returned less than a full page."""


class BackingStore:
    def __init__(self, filename="BACKING_STORE.bin"):
        self.filename = filename
        try:
            self.file = open(filename, 'rb')
        except OSError as err:
            raise ResourceUnavailable(f"cannot open backing store {filename}: {err.strerror}") from err
        log.debug("opened backing store %s", filename)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if not self.file.closed:
            self.file.close()

    def read_page(self, page_number):
        # read 256 byte page from the backing store
        self.file.seek(page_number * PAGE_SIZE)
        data = self.file.read(PAGE_SIZE)
        if len(data) < PAGE_SIZE:
            raise StoreReadError(
                f"short read for page {page_number}: got {len(data)} of {PAGE_SIZE} bytes"
            )
        return data

    @staticmethod
    def byte_array_to_hex_ascii(byte_array):
        return bytes(byte_array).hex().upper()
