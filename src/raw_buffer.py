class RawBuffer:
    """Fixed-size block of slots backing a GrowableSequence.

    A buffer never changes size. Growing or shrinking means allocating a new
    buffer and copying the live prefix across (see reallocate).
    """

    def __init__(self, capacity, fill=None):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._slots = [fill] * capacity
        self._released = False

    def read(self, index):
        self._check(index, "read")
        return self._slots[index]

    def write(self, index, value):
        self._check(index, "write")
        self._slots[index] = value

    def take(self, index):
        """Read a slot and leave it empty."""
        self._check(index, "take")
        value = self._slots[index]
        self._slots[index] = None
        return value

    def move(self, src, dst, count):
        """Move count slots from src to dst; the ranges may overlap."""
        if count <= 0:
            return
        self._check(src, "move")
        self._check(src + count - 1, "move")
        self._check(dst, "move")
        self._check(dst + count - 1, "move")
        self._slots[dst:dst + count] = self._slots[src:src + count]

    def clear_range(self, start, stop):
        for i in range(start, stop):
            self._slots[i] = None

    def capacity(self):
        return self._capacity

    def released(self):
        return self._released

    def _check(self, index, op):
        if self._released:
            raise RuntimeError(f"RawBuffer.{op}: buffer already released")
        if index < 0 or index >= self._capacity:
            raise IndexError(f"RawBuffer.{op}: index out of range")

    def __len__(self):
        return self._capacity


def allocate(capacity, fill=None):
    """Return a buffer of exactly `capacity` slots, or None for zero."""
    if capacity == 0:
        return None
    return RawBuffer(capacity, fill)


def reallocate(buffer, capacity, live):
    """Copy the first `live` slots of `buffer` into a fresh buffer.

    The old buffer is released only after the new one is fully populated, so
    a failed allocation leaves the caller's buffer untouched.
    """
    if live > capacity:
        raise ValueError("reallocate: live slots exceed new capacity")
    new_buffer = allocate(capacity)
    if live:
        new_buffer._slots[:live] = buffer._slots[:live]
    deallocate(buffer)
    return new_buffer


def deallocate(buffer):
    if buffer is None:
        return
    if buffer._released:
        raise RuntimeError("RawBuffer.deallocate: buffer already released")
    buffer._slots = []
    buffer._released = True
