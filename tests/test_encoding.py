import base64
import random
from itertools import islice

import pytest

from ascii85stream import Ascii85Encoding
from ascii85stream import Err
from ascii85stream import Ok
from ascii85stream import UpstreamFailure


def _encode(source) -> str:
    return ''.join(Ascii85Encoding(source))


@pytest.mark.parametrize('data,expected', [
    (b'', ''),
    (bytes([0, 1, 2, 3]), "!!*-'"),
    (b'test string', 'FCfN8+EMXFBl7P'),
    (b'test\0\0\0\0string', 'FCfN8zF*)G:DJ&'),
    (b'\xff\xff\xff\xff', 's8W-!'),
])
def test_encode_fixtures(data: bytes, expected: str) -> None:
    assert _encode(data) == expected


def test_encode_full_zero_group_is_shorthand() -> None:
    assert _encode(b'\0\0\0\0') == 'z'
    assert _encode(b'\0' * 8) == 'zz'
    assert _encode(b'abcd\0\0\0\0abcd') == '@:E_Wz@:E_W'


@pytest.mark.parametrize('data,expected', [
    (b'\0', '!!'),
    (b'\0\0', '!!!'),
    (b'\0\0\0', '!!!!'),
    (b'\0\0\0\0\0', 'z!!'),
])
def test_encode_partial_zero_group_is_not_shorthand(data: bytes, expected: str) -> None:
    assert _encode(data) == expected


@pytest.mark.parametrize('length', list(range(0, 13)) + [63, 64, 65, 1000])
def test_encode_matches_stdlib(length: int) -> None:
    rng = random.Random(length)
    data = bytes(rng.randrange(256) for _ in range(length))
    assert _encode(data) == base64.a85encode(data).decode('ascii')


def test_encode_partial_group_lengths() -> None:
    for n in range(1, 4):
        assert len(_encode(b'\x01' * n)) == n + 1
        assert len(_encode(b'\x01' * (4 + n))) == 5 + n + 1


def test_encode_accepts_mixed_elements() -> None:
    source = [b't', Ok(ord('e')), ord('s'), Ok(b't'), bytearray(b' ')]
    assert _encode(source) == _encode(b'test ')


def test_encode_err_element_fails_at_first_pull() -> None:
    cause = OSError('boom')
    encoder = Ascii85Encoding([Ok(0), Err(cause), Ok(2), Ok(3)])
    with pytest.raises(UpstreamFailure) as exc_info:
        next(encoder)
    assert exc_info.value.position == 1
    assert exc_info.value.error is cause
    assert exc_info.value.__cause__ is cause


def test_encode_output_before_failure_is_kept() -> None:
    source = list(b'abcd') + [Ok(ord('e')), Err(ValueError('bad byte')), Ok(0)]
    encoder = Ascii85Encoding(source)
    assert ''.join(islice(encoder, 5)) == base64.a85encode(b'abcd').decode('ascii')
    with pytest.raises(UpstreamFailure) as exc_info:
        next(encoder)
    assert exc_info.value.position == 5


def test_encode_raising_source_is_upstream_failure() -> None:
    def source():
        yield 1
        yield 2
        raise OSError('disconnected')

    encoder = Ascii85Encoding(source())
    with pytest.raises(UpstreamFailure) as exc_info:
        next(encoder)
    assert exc_info.value.position == 2
    assert isinstance(exc_info.value.__cause__, OSError)


def test_encode_is_terminal_after_failure() -> None:
    encoder = Ascii85Encoding([Err(OSError()), 1, 2, 3, 4])
    with pytest.raises(UpstreamFailure):
        next(encoder)
    with pytest.warns(RuntimeWarning):
        with pytest.raises(StopIteration):
            next(encoder)


def test_encode_is_terminal_after_end() -> None:
    encoder = Ascii85Encoding(b'ab')
    assert list(encoder) == list(_encode(b'ab'))
    assert list(encoder) == []


def test_encode_pulls_one_block_at_a_time() -> None:
    pulled = []

    def source():
        for byte in b'abcdefghij':
            pulled.append(byte)
            yield byte

    encoder = Ascii85Encoding(source())
    next(encoder)
    assert len(pulled) == 4
    for _ in range(4):
        next(encoder)
    assert len(pulled) == 4
    next(encoder)
    assert len(pulled) == 8


def test_encode_bad_elements() -> None:
    with pytest.raises(TypeError):
        next(Ascii85Encoding([1.5]))
    with pytest.raises(ValueError):
        next(Ascii85Encoding([256]))
    with pytest.raises(ValueError):
        next(Ascii85Encoding([b'ab']))
