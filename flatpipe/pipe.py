import collections.abc
import flatpipe as fp

class NotDoubleEndedException(TypeError):
    pass

class Pipe:
    double_ended = False

    def __iter__(self):
        return self

    def __next__(self):
        return _next(self)

    def next_back(self):
        return _next_back(self)

    def __reversed__(self):
        return fp.rev(self)

    def _next_back(self):
        raise NotDoubleEndedException(f"{type(self).__name__} cannot produce elements from the back")

class IteratorPipe(Pipe):
    def __init__(self, iterator):
        super().__init__()
        if hasattr(iterator, "__next__"):
            self.iterator = iterator
        elif hasattr(iterator, "__iter__"):
            self.iterator = iter(iterator)
        else:
            raise ValueError("Pipe object is neither an iterator nor an iterable")

    def _next(self):
        return next(self.iterator)

class SequencePipe(Pipe):
    double_ended = True

    def __init__(self, sequence):
        super().__init__()
        self.sequence = sequence
        self.front = 0
        self.back = len(sequence)

    def _next(self):
        if self.front >= self.back:
            raise StopIteration
        value = self.sequence[self.front]
        self.front += 1
        return value

    def _next_back(self):
        if self.front >= self.back:
            raise StopIteration
        self.back -= 1
        return self.sequence[self.back]

def wrap(pipe_or_iterable):
    if isinstance(pipe_or_iterable, Pipe):
        return pipe_or_iterable
    elif isinstance(pipe_or_iterable, collections.abc.Sequence):
        return SequencePipe(pipe_or_iterable)
    else:
        return IteratorPipe(pipe_or_iterable)

def _next(pipe):
    return pipe._next()

def _next_back(pipe):
    if not pipe.double_ended:
        raise NotDoubleEndedException(f"{type(pipe).__name__} cannot produce elements from the back")
    return pipe._next_back()

_missing = object()

def next_back(pipe, default=_missing):
    """Counterpart of the builtin next() that pulls from the back of a double-ended pipe."""
    if not isinstance(pipe, Pipe):
        raise ValueError(f"Object of type {type(pipe).__name__} is not a pipe")
    try:
        return pipe.next_back()
    except StopIteration:
        if default is _missing:
            raise
        return default
