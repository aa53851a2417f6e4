from . import pipe

class flatten(pipe.Pipe):
    """Lazily yields every element of every group produced by ``input``, in order.

    Groups are pulled one at a time and held as a front cursor (for ``next``) or a back cursor
    (for ``next_back``). When the outer pipe runs dry, each direction drains whatever is left in
    the opposite direction's cursor, so both ends meet in the middle without repeating or
    skipping elements.

    Not synchronized, wrap in ``fp.thread.mutex`` to share between threads.
    """

    def __init__(self, input):
        super().__init__()
        self.input = pipe.wrap(input)
        self._double_ended = self.input.double_ended
        self.front = None
        self.back = None

    @property
    def double_ended(self):
        return self._double_ended

    def _next_group(self, next_fn):
        if self.input is None:
            return None
        try:
            group = next_fn(self.input)
        except StopIteration:
            # Outer pipe is done for both directions
            self.input = None
            return None
        try:
            return pipe.wrap(group)
        except ValueError:
            raise ValueError("Group produced in flatten is neither an iterator nor an iterable")

    def _next(self):
        while True:
            if self.front is not None:
                try:
                    return pipe._next(self.front)
                except StopIteration:
                    self.front = None

            group = self._next_group(pipe._next)
            if group is None:
                if self.back is None:
                    raise StopIteration
                try:
                    return pipe._next(self.back)
                except StopIteration:
                    self.back = None
                    raise
            self.front = group

    def _next_back(self):
        while True:
            if self.back is not None:
                try:
                    return pipe._next_back(self.back)
                except StopIteration:
                    self.back = None

            group = self._next_group(pipe._next_back)
            if group is None:
                if self.front is None:
                    raise StopIteration
                try:
                    return pipe._next_back(self.front)
                except StopIteration:
                    self.front = None
                    raise
            self.back = group
