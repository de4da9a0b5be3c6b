class SequenceError(Exception):
    """Base class for errors raised by GrowableSequence and its views."""


class EmptyError(SequenceError, IndexError):
    pass


class IndexOutOfRange(SequenceError, IndexError):
    pass


class InvalidArgument(SequenceError, ValueError):
    pass
