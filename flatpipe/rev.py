from . import pipe

class rev(pipe.Pipe):
    double_ended = True

    def __init__(self, input):
        super().__init__()
        self.input = pipe.wrap(input)
        if not self.input.double_ended:
            raise pipe.NotDoubleEndedException(f"Cannot reverse {type(self.input).__name__}, it is not double-ended")

    def _next(self):
        return pipe._next_back(self.input)

    def _next_back(self):
        return pipe._next(self.input)
