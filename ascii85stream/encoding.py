from ascii85stream.constants import BINARY_BLOCK_SIZE
from ascii85stream.constants import BINARY_TO_CHAR_BIAS
from ascii85stream.constants import CHARACTER_BLOCK_SIZE
from ascii85stream.constants import CHAR_FOR_4_ZEROS
from ascii85stream.constants import WEIGHTS
from ascii85stream.results import byte_result
from ascii85stream.transducer import BlockTransducer


class Ascii85Encoding(BlockTransducer):
    """
    Lazily encodes a source of bytes into Ascii85 characters, one character per `next()`.

    The source may yield ints, length-1 bytes, or `Ok` / `Err` wrapped values.
    Every 4 bytes become 5 characters, except 4 zero bytes which become a single 'z'.
    A final group of n bytes (1 <= n <= 3) is zero-padded and only its first n + 1 characters are produced.

    >>> ''.join(Ascii85Encoding(b'test string'))
    'FCfN8+EMXFBl7P'
    """

    _in = BINARY_BLOCK_SIZE
    _out = CHARACTER_BLOCK_SIZE
    _normalize = staticmethod(byte_result)

    def _fill_block(self):
        value = 0
        num_bytes = 0
        for i in range(self._in):
            byte = self._pull()
            if byte is None:
                break
            value |= byte << (8 * (self._in - 1 - i))
            num_bytes += 1

        # source is exhausted on a block boundary
        if num_bytes == 0:
            self._end()
            return

        # the shorthand only applies to a complete group
        if num_bytes == self._in and value == 0:
            self._block = [CHAR_FOR_4_ZEROS]
            self._omitted = [False]
            return

        self._block = []
        for weight in WEIGHTS:
            digit, value = divmod(value, weight)
            self._block.append(chr(digit + BINARY_TO_CHAR_BIAS))
        assert value == 0

        # n real bytes only determine the first n + 1 characters
        self._omitted = [i > num_bytes for i in range(self._out)]
