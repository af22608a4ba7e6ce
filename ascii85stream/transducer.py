import warnings
from typing import Callable
from typing import Iterable
from typing import List
from typing import Optional

from ascii85stream.errors import UpstreamFailure
from ascii85stream.results import Err
from ascii85stream.results import Result


class BlockTransducer:
    """
    A lazy, non-restartable iterator that turns blocks of `_in` source elements into blocks of output elements.

    Only one block is held at a time, so at most `_in` source elements are pulled ahead of what has been produced.
    Subclasses fill `self._block` and `self._omitted` in `_fill_block()`; an omitted position ends the sequence.

    The source is owned by the transducer: it should not be advanced by anyone else while being transduced.
    """

    # these are constants that need to be set by subclasses
    _in = 0  # (source size) number of source elements consumed per full block
    _out = 0  # (produced size) number of elements produced per full block

    # normalizes one source element into Ok(value) or Err(exception)
    _normalize: Callable[..., Result]

    def __init__(self, source: Iterable):
        self._source = iter(source)
        self._position = 0  # index of the next source element

        self._block = []
        self._omitted: List[bool] = []
        self._cursor = 0

        # flags
        self._terminated = False
        self._failure: Optional[BaseException] = None

    def __repr__(self):
        return f'<{self.__class__.__name__} position={self._position} {hex(id(self))}>'

    def __iter__(self):
        return self

    def __next__(self):
        if self._terminated:
            if self._failure is not None:
                warnings.warn(f'{self.__class__.__name__} already failed with {self._failure!r}, nothing more to produce',
                              RuntimeWarning,
                              stacklevel=2)
            raise StopIteration

        if self._cursor == 0:
            try:
                self._fill_block()
            except Exception as e:
                self._terminated = True
                self._failure = e
                raise

        assert 0 <= self._cursor < len(self._block) == len(self._omitted), (self._cursor, self._block)
        if self._omitted[self._cursor]:
            self._terminated = True
            raise StopIteration

        out = self._block[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._block)
        return out

    def _pull(self):
        """
        Take one element from the source, or return None if the source is exhausted.

        A failing source (an `Err` element, or an exception raised while iterating) raises `UpstreamFailure`.
        """
        position = self._position
        try:
            element = next(self._source)
        except StopIteration:
            return None
        except Exception as e:
            raise UpstreamFailure(e, position) from e

        self._position += 1
        result = self._normalize(element)
        if isinstance(result, Err):
            raise UpstreamFailure(result.error, position) from result.error
        return result.value

    def _end(self):
        """Mark the block as empty so the sequence ends before producing anything more"""
        self._block = [None]
        self._omitted = [True]

    def _fill_block(self):
        raise NotImplementedError
