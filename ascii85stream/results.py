"""
Normalizes source elements so a plain value and a fallible value can be fed to the transducers alike

A source may yield plain elements (an int byte, a 1-char str) or explicitly fallible ones,
wrapped as `Ok(value)` or `Err(exception)`. Each element is normalized exactly once, when it is pulled.
"""

from typing import Any
from typing import NamedTuple
from typing import Union


class Ok(NamedTuple):
    value: Any


class Err(NamedTuple):
    error: BaseException


Result = Union[Ok, Err]


def _unwrap(element):
    if isinstance(element, Ok):
        return element.value
    return element


def byte_result(element) -> Result:
    """
    Normalize a byte-like element to `Ok(int)` or pass an `Err` through.

    Accepts an int in range(256) or a bytes-like object of length 1.
    """
    if isinstance(element, Err):
        return element
    value = _unwrap(element)

    if isinstance(value, (bytes, bytearray, memoryview)):
        if len(value) != 1:
            raise ValueError(f'expected a single byte, got {len(value)} bytes')
        value = value[0]
    elif isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'expected a byte, got {type(value)}')

    if not 0 <= value <= 0xFF:
        raise ValueError(f'byte value out of range: {value}')
    return Ok(value)


def char_result(element) -> Result:
    """
    Normalize a character-like element to `Ok(str)` or pass an `Err` through.

    Accepts a 1-char str, an int code point, or a bytes-like object of length 1
    (so iterating over encoded bytes works as well as iterating over encoded text).
    """
    if isinstance(element, Err):
        return element
    value = _unwrap(element)

    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f'expected a single character, got {len(value)} characters')
        return Ok(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        if len(value) != 1:
            raise ValueError(f'expected a single character, got {len(value)} bytes')
        value = value[0]
    elif isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'expected a character, got {type(value)}')

    if not 0 <= value <= 0x10FFFF:
        raise ValueError(f'code point out of range: {value}')
    return Ok(chr(value))
