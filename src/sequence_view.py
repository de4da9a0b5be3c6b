import operator

from sequence_errors import IndexOutOfRange, InvalidArgument


def as_index(value):
    """Return `value` as a plain int, or None if it is not integer-like.

    NumPy integers and other objects implementing __index__ are accepted;
    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def _checked_index(value, where):
    index = as_index(value)
    if index is None:
        raise InvalidArgument(f"{where}: index must be an integer, got {value!r}")
    return index


class SliceQueries:
    """Read-only operations shared by GrowableSequence and SequenceView.

    Subclasses provide __len__, _slot(index) for an in-range index and
    _window(start, stop) returning a view over [start, stop).
    """

    def length(self):
        return len(self)

    def is_empty(self):
        return len(self) == 0

    def get(self, index, default=None):
        index = as_index(index)
        if index is not None and 0 <= index < len(self):
            return self._slot(index)
        return default

    def first(self):
        if len(self) == 0:
            return None
        return self._slot(0)

    def last(self):
        n = len(self)
        if n == 0:
            return None
        return self._slot(n - 1)

    def contains(self, value):
        for i in range(len(self)):
            if self._slot(i) == value:
                return True
        return False

    def starts_with(self, prefix):
        needle = tuple(prefix)
        if len(needle) > len(self):
            return False
        for i, value in enumerate(needle):
            if self._slot(i) != value:
                return False
        return True

    def ends_with(self, suffix):
        needle = tuple(suffix)
        offset = len(self) - len(needle)
        if offset < 0:
            return False
        for i, value in enumerate(needle):
            if self._slot(offset + i) != value:
                return False
        return True

    def chunks(self, size):
        return Chunks(self, size)

    def split_at(self, index):
        n = len(self)
        index = _checked_index(index, f"{type(self).__name__}.split_at")
        if index < 0 or index > n:
            raise IndexOutOfRange(
                f"{type(self).__name__}.split_at: index {index} out of range for length {n}"
            )
        return self._window(0, index), self._window(index, n)

    def split(self, predicate):
        return Split(self, predicate)

    def to_list(self):
        return [self._slot(i) for i in range(len(self))]

    def __iter__(self):
        for i in range(len(self)):
            yield self._slot(i)

    def __contains__(self, value):
        return self.contains(value)

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise InvalidArgument(
                    f"{type(self).__name__}.__getitem__: only step 1 slices are supported"
                )
            return self._window(start, max(start, stop))
        index = _checked_index(index, f"{type(self).__name__}.__getitem__")
        if index < 0 or index >= len(self):
            raise IndexOutOfRange(f"{type(self).__name__}.__getitem__: index out of range")
        return self._slot(index)

    def __eq__(self, other):
        if not isinstance(other, (SliceQueries, list, tuple)):
            return NotImplemented
        if len(self) != len(other):
            return False
        for i, value in enumerate(other):
            if self._slot(i) != value:
                return False
        return True

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.to_list()!r})"


class SequenceView(SliceQueries):
    """Non-owning window over [start, stop) of a sequence's live elements.

    The window is clipped to the owner's current length: after the owner is
    truncated or popped below `stop`, the view only covers what is still live,
    so get, first and last return None instead of raising.
    """

    def __init__(self, owner, start, stop):
        if start < 0 or stop < start or stop > len(owner):
            raise IndexOutOfRange("SequenceView: window out of range")
        self._owner = owner
        self._start = start
        self._stop = stop

    def _slot(self, index):
        return self._owner._slot(self._start + index)

    def _window(self, start, stop):
        return SequenceView(self._owner, self._start + start, self._start + stop)

    def __len__(self):
        return max(0, min(self._stop, len(self._owner)) - self._start)


class Chunks:
    """Restartable iterable of views of `size` elements; the last may be shorter."""

    def __init__(self, source, size):
        checked = as_index(size)
        if checked is None or checked <= 0:
            raise InvalidArgument(f"chunks: size must be a positive integer, got {size!r}")
        self._source = source
        self._size = checked

    def __iter__(self):
        n = len(self._source)
        for start in range(0, n, self._size):
            yield self._source._window(start, min(start + self._size, n))

    def __len__(self):
        return -(-len(self._source) // self._size)


class Split:
    """Restartable iterable of the views between elements matching `predicate`.

    Matching elements appear in no view. A match at either end, or two
    adjacent matches, produce an empty view, so the view lengths plus the
    number of matches always add up to the source length.
    """

    def __init__(self, source, predicate):
        if not callable(predicate):
            raise InvalidArgument("split: predicate must be callable")
        self._source = source
        self._predicate = predicate

    def __iter__(self):
        start = 0
        n = len(self._source)
        for i in range(n):
            if self._predicate(self._source._slot(i)):
                yield self._source._window(start, i)
                start = i + 1
        yield self._source._window(start, n)
