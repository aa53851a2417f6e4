from . import pipe

class print_on_item(pipe.Pipe):
    def __init__(self, input, msg_fn):
        super().__init__()
        self.input = pipe.wrap(input)

        if isinstance(msg_fn, str):
            msg_fn = lambda value=None, result=msg_fn: result
        self.msg_fn = msg_fn

    @property
    def double_ended(self):
        return self.input.double_ended

    def _pull(self, next_fn, direction):
        print(f"PIPE: Pulling {direction:<5}   {self.msg_fn()}")
        try:
            value = next_fn(self.input)
        except StopIteration:
            print(f"PIPE: Exhausted {direction:<5} {self.msg_fn()}")
            raise
        print(f"PIPE: Returning {direction:<5} {self.msg_fn(value)}")
        return value

    def _next(self):
        return self._pull(pipe._next, "front")

    def _next_back(self):
        return self._pull(pipe._next_back, "back")
