"""
Decoding and pretty-printing of Bencoded (BitTorrent) data.
"""
from .decoder import (
    BencodeDecodeError,
    MalformedToken,
    NestingTooDeep,
    TruncatedInput,
    UnexpectedKeyType,
    decode,
    decode_one,
)
from .printer import render
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode', 'decode_one', 'render',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'TruncatedInput', 'MalformedToken', 'NestingTooDeep', 'UnexpectedKeyType',
]
