"""The single file that log lines are currently appended to."""

import os


class ActiveFile:
    """Binary append handle that tracks its own size.

    The size is stat'ed once when the handle is opened; after that it is
    size_at_open plus the bytes written through this handle.
    """

    def __init__(self, path: str, handle, size_at_open: int):
        self.path = path
        self._handle = handle
        self.size_at_open = size_at_open
        self.bytes_written = 0

    @classmethod
    def open(cls, path: str, mode: str = "a") -> "ActiveFile":
        handle = open(path, mode + "b")
        if mode == "w":
            size = 0
        else:
            size = os.fstat(handle.fileno()).st_size
        return cls(path, handle, size)

    @property
    def size(self) -> int:
        return self.size_at_open + self.bytes_written

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def write(self, text: str) -> int:
        data = text.encode("utf-8")
        self._handle.write(data)
        self._handle.flush()
        self.bytes_written += len(data)
        return len(data)

    def close(self):
        if not self._handle.closed:
            try:
                self._handle.flush()
            finally:
                self._handle.close()
