import flatpipe as fp
import collections
import pytest

@pytest.mark.parametrize("sequence", [[1, 2, 3], (1, 2, 3), range(1, 4), collections.deque([1, 2, 3])])
def test_wrap_sequence(sequence):
    pipe = fp.wrap(sequence)
    assert pipe.double_ended
    assert next(pipe) == 1
    assert pipe.next_back() == 3
    assert pipe.next_back() == 2
    assert fp.next_back(pipe, None) is None
    assert next(pipe, None) is None

def test_wrap_iterator():
    pipe = fp.wrap(iter([1, 2]))
    assert not pipe.double_ended
    assert list(pipe) == [1, 2]
    with pytest.raises(fp.NotDoubleEndedException):
        pipe.next_back()

def test_wrap_iterable():
    pipe = fp.wrap({"a": 1, "b": 2})
    assert not pipe.double_ended
    assert list(pipe) == ["a", "b"]

def test_wrap_pipe():
    pipe = fp.flatten([])
    assert fp.wrap(pipe) is pipe

def test_wrap_invalid():
    with pytest.raises(ValueError):
        fp.wrap(1)

def test_next_back_invalid():
    with pytest.raises(ValueError):
        fp.next_back([1, 2])

def test_next_back_default():
    pipe = fp.wrap([])
    with pytest.raises(StopIteration):
        fp.next_back(pipe)
    assert fp.next_back(pipe, "end") == "end"
