"""
A streaming Ascii85 (base-85) codec that encodes bytes into printable text and back, one element at a time
"""

from ascii85stream.convenience import decode
from ascii85stream.convenience import decode_chunks
from ascii85stream.convenience import encode
from ascii85stream.convenience import encode_chunks
from ascii85stream.decoding import Ascii85Decoding
from ascii85stream.encoding import Ascii85Encoding
from ascii85stream.errors import Ascii85Error
from ascii85stream.errors import GroupOverflow
from ascii85stream.errors import IncompleteGroup
from ascii85stream.errors import InvalidCharacter
from ascii85stream.errors import MisplacedShorthand
from ascii85stream.errors import UpstreamFailure
from ascii85stream.results import Err
from ascii85stream.results import Ok

__version__ = '0.1.0'

__all__ = (
    'Ascii85Encoding',
    'Ascii85Decoding',
    'Ok',
    'Err',
    'Ascii85Error',
    'UpstreamFailure',
    'InvalidCharacter',
    'MisplacedShorthand',
    'IncompleteGroup',
    'GroupOverflow',
    'encode',
    'decode',
    'encode_chunks',
    'decode_chunks',
)
