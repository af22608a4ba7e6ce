from ascii85stream.constants import BINARY_BLOCK_SIZE
from ascii85stream.constants import BINARY_TO_CHAR_BIAS
from ascii85stream.constants import CHARACTER_BLOCK_SIZE
from ascii85stream.constants import CHAR_FOR_4_ZEROS
from ascii85stream.constants import FIRST_CHAR
from ascii85stream.constants import LAST_CHAR
from ascii85stream.constants import MAX_DIGIT
from ascii85stream.constants import MAX_GROUP_VALUE
from ascii85stream.constants import WEIGHTS
from ascii85stream.errors import GroupOverflow
from ascii85stream.errors import IncompleteGroup
from ascii85stream.errors import InvalidCharacter
from ascii85stream.errors import MisplacedShorthand
from ascii85stream.results import char_result
from ascii85stream.transducer import BlockTransducer


class Ascii85Decoding(BlockTransducer):
    """
    Lazily decodes a source of Ascii85 characters into bytes (as ints), one byte per `next()`.

    The source may yield 1-char strs, int code points, length-1 bytes, or `Ok` / `Err` wrapped values.
    No framing (`<~`, `~>`) or whitespace is accepted, only the characters '!' to 'u' and 'z'.

    >>> bytes(Ascii85Decoding('FCfN8zF*)G:DJ&'))
    b'test\\x00\\x00\\x00\\x00string'
    """

    _in = CHARACTER_BLOCK_SIZE
    _out = BINARY_BLOCK_SIZE
    _normalize = staticmethod(char_result)

    def _fill_block(self):
        digits = []
        while len(digits) < self._in:
            char = self._pull()
            if char is None:
                break

            if char == CHAR_FOR_4_ZEROS:
                if digits:
                    raise MisplacedShorthand(self._position - 1)
                self._block = [0] * self._out
                self._omitted = [False] * self._out
                return

            if not FIRST_CHAR <= char <= LAST_CHAR:
                raise InvalidCharacter(char, self._position - 1)
            digits.append(ord(char) - BINARY_TO_CHAR_BIAS)

        num_chars = len(digits)
        if num_chars == 0:
            self._end()
            return
        if num_chars == 1:
            raise IncompleteGroup(self._position - 1)

        # pad with the largest digit so truncated characters round the value up to the original bytes
        digits.extend([MAX_DIGIT] * (self._in - num_chars))
        value = sum(digit * weight for digit, weight in zip(digits, WEIGHTS))
        if value > MAX_GROUP_VALUE:
            raise GroupOverflow(value, self._position - 1)

        self._block = list(value.to_bytes(self._out, 'big'))

        # n real characters only determine the first n - 1 bytes
        self._omitted = [i >= num_chars - 1 for i in range(self._out)]
