from .pipe import Pipe, NotDoubleEndedException, wrap, next_back
from .flatten import flatten
from .rev import rev
from . import thread
from . import debug
