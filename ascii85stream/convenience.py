from itertools import chain
from itertools import islice
from typing import Iterable
from typing import Iterator
from typing import Union

from ascii85stream.decoding import Ascii85Decoding
from ascii85stream.encoding import Ascii85Encoding

DEFAULT_CHUNK_SIZE = 8192


def encode(data: Union[bytes, bytearray, memoryview]) -> str:
    """Encodes `data` in Ascii85 as a string, without delimiters or line breaks"""
    data = bytes(data)
    out = ''.join(Ascii85Encoding(data))
    assert len(out) <= 5 * (len(data) // 4) + (len(data) % 4 and len(data) % 4 + 1)
    return out


def decode(text: Union[str, bytes, bytearray]) -> bytes:
    """Decodes an Ascii85-encoded string (or ascii byte-string) `text` into bytes"""
    out = bytes(Ascii85Decoding(text))
    assert len(out) >= 4 * (len(text) // 5)
    return out


def _batches(iterator: Iterator, size: int) -> Iterator[list]:
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


def encode_chunks(chunks: Iterable[bytes], size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """
    Lazily encode an iterable of byte chunks (e.g. blocks read from a socket or file)

    The chunks are treated as one continuous byte stream, so chunk boundaries need not fall on 4-byte groups.
    Yields pieces of encoded text of up to `size` characters each; joining them gives `encode(b''.join(chunks))`.
    """
    if size <= 0:
        raise ValueError(f'size must be positive, got {size}')
    for batch in _batches(Ascii85Encoding(chain.from_iterable(chunks)), size):
        yield ''.join(batch)


def decode_chunks(chunks: Iterable[Union[str, bytes]], size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Lazily decode an iterable of Ascii85 text chunks, yielding pieces of up to `size` bytes

    As with `encode_chunks`, groups may span chunk boundaries.
    """
    if size <= 0:
        raise ValueError(f'size must be positive, got {size}')
    for batch in _batches(Ascii85Decoding(chain.from_iterable(chunks)), size):
        yield bytes(batch)
