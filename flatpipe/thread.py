from . import pipe
import threading

class mutex(pipe.Pipe):
    def __init__(self, input):
        super().__init__()
        self.input = pipe.wrap(input)
        self.lock = threading.Lock()

    @property
    def double_ended(self):
        return self.input.double_ended

    def _next(self):
        with self.lock:
            return pipe._next(self.input)

    def _next_back(self):
        with self.lock:
            return pipe._next_back(self.input)
