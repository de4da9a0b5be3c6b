from raw_buffer import allocate, reallocate
from sequence_errors import EmptyError, IndexOutOfRange, InvalidArgument
from sequence_view import SliceQueries, SequenceView, as_index

GROWTH_FACTOR = 2
MIN_NON_ZERO_CAPACITY = 1


def grown_capacity(current, required):
    """Smallest capacity reachable by doubling `current` that holds `required`."""
    capacity = current
    while capacity < required:
        capacity = max(MIN_NON_ZERO_CAPACITY, capacity * GROWTH_FACTOR)
    return capacity


class GrowableSequence(SliceQueries):
    def __init__(self):
        self._buffer = None
        self._length = 0
        self._capacity = 0

    @classmethod
    def from_literal(cls, items):
        values = tuple(items)
        seq = cls()
        seq._buffer = allocate(len(values))
        for i, value in enumerate(values):
            seq._buffer.write(i, value)
        seq._length = len(values)
        seq._capacity = len(values)
        return seq

    @classmethod
    def repeated(cls, value, n):
        count = as_index(n)
        if count is None or count < 0:
            raise InvalidArgument("GrowableSequence.repeated: n must be a non-negative integer")
        seq = cls()
        seq._buffer = allocate(count, value)
        seq._length = count
        seq._capacity = count
        return seq

    def capacity(self):
        return self._capacity

    def push_back(self, value):
        if self._length == self._capacity:
            self._grow_to(self._length + 1)
        self._buffer.write(self._length, value)
        self._length += 1

    def pop_back(self):
        if self._length == 0:
            raise EmptyError("GrowableSequence.pop_back: sequence is empty")
        self._length -= 1
        return self._buffer.take(self._length)

    def extend(self, other):
        values = tuple(other)
        if not values:
            return
        self._grow_to(self._length + len(values))
        for value in values:
            self._buffer.write(self._length, value)
            self._length += 1

    def reserve(self, additional):
        count = as_index(additional)
        if count is None or count < 0:
            raise InvalidArgument(
                "GrowableSequence.reserve: additional must be a non-negative integer"
            )
        self._grow_to(self._length + count)

    def shrink_to_fit(self):
        if self._capacity == self._length:
            return
        self._buffer = reallocate(self._buffer, self._length, self._length)
        self._capacity = self._length

    def truncate(self, new_length):
        checked = as_index(new_length)
        if checked is None or checked < 0:
            raise InvalidArgument(
                "GrowableSequence.truncate: new_length must be a non-negative integer"
            )
        new_length = checked
        if new_length >= self._length:
            return
        self._buffer.clear_range(new_length, self._length)
        self._length = new_length

    def clear(self):
        self.truncate(0)

    def insert(self, index, value):
        index = self._as_position(index, "insert")
        if index < 0 or index > self._length:
            raise IndexOutOfRange(
                f"GrowableSequence.insert: index {index} out of range for length {self._length}"
            )
        if self._length == self._capacity:
            self._grow_to(self._length + 1)
        self._buffer.move(index, index + 1, self._length - index)
        self._buffer.write(index, value)
        self._length += 1

    def remove(self, index):
        index = self._check_index(index, "remove")
        value = self._buffer.read(index)
        self._buffer.move(index + 1, index, self._length - index - 1)
        self._length -= 1
        self._buffer.write(self._length, None)
        return value

    def reverse(self):
        i, j = 0, self._length - 1
        while i < j:
            self._exchange(i, j)
            i += 1
            j -= 1

    def swap(self, i, j):
        i = self._check_index(i, "swap")
        j = self._check_index(j, "swap")
        self._exchange(i, j)

    def copy(self):
        return GrowableSequence.from_literal(self)

    def __setitem__(self, index, value):
        index = self._check_index(index, "__setitem__")
        self._buffer.write(index, value)

    def __len__(self):
        return self._length

    def _grow_to(self, required):
        new_capacity = grown_capacity(self._capacity, required)
        if new_capacity == self._capacity:
            return
        self._buffer = reallocate(self._buffer, new_capacity, self._length)
        self._capacity = new_capacity

    def _exchange(self, i, j):
        a = self._buffer.read(i)
        self._buffer.write(i, self._buffer.read(j))
        self._buffer.write(j, a)

    def _as_position(self, index, op):
        checked = as_index(index)
        if checked is None:
            raise InvalidArgument(f"GrowableSequence.{op}: index must be an integer, got {index!r}")
        return checked

    def _check_index(self, index, op):
        index = self._as_position(index, op)
        if index < 0 or index >= self._length:
            raise IndexOutOfRange(
                f"GrowableSequence.{op}: index {index} out of range for length {self._length}"
            )
        return index

    def _slot(self, index):
        return self._buffer.read(index)

    def _window(self, start, stop):
        return SequenceView(self, start, stop)
