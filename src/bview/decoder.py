"""
Bencode decoder.

Turns a resident byte buffer holding zero or more back-to-back Bencoded
values into a list of immutable value trees.
"""
from typing import List

from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

DIGITS = b"0123456789"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Lists and dictionaries nested deeper than this are rejected.
DEFAULT_MAX_DEPTH = 128


class BencodeDecodeError(ValueError):
    """Base exception for Bencode decoding errors."""

    def __init__(self, reason: str, position: int = None):
        message = reason if position is None else f"{reason} (at byte {position})"
        super().__init__(message)
        self.reason = reason
        self.position = position


class TruncatedInput(BencodeDecodeError):
    """The buffer ended before a value was complete."""


class MalformedToken(BencodeDecodeError):
    """A length prefix, integer literal or framing byte is invalid."""


class NestingTooDeep(MalformedToken):
    """Lists/dictionaries are nested deeper than the decoder allows."""


class UnexpectedKeyType(BencodeDecodeError):
    """A dictionary key is something other than a byte string."""


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode value objects.

    In lenient mode (the default) dictionaries may list their keys in any
    order and repeat them; the last value wins. With ``strict=True`` keys
    must be unique and sorted, and string lengths may not be zero-padded.
    """
    def __init__(self, data: bytes, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH):
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        if not isinstance(data, bytes):
            raise TypeError(f"BencodeDecoder expects bytes, not {type(data).__name__}")
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")

        self.data = data
        self.strict = strict
        self.max_depth = max_depth
        self.i = 0  # cursor index
        self.depth = 0

    def decode(self) -> List[BencodeType]:
        """Decodes every top-level value in the buffer, in order."""
        self.i = 0
        self.depth = 0

        values = []
        while self.i < len(self.data):
            values.append(self._parse_value())
        return values

    def decode_one(self) -> BencodeType:
        """Decodes a buffer that must hold exactly one value."""
        self.i = 0
        self.depth = 0

        value = self._parse_value()
        if self.i != len(self.data):
            raise MalformedToken(f"{len(self.data) - self.i} bytes of trailing data", self.i)
        return value

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self):
        if self.i >= len(self.data):
            raise TruncatedInput("Unexpected end of input", self.i)
        return self.data[self.i:self.i+1]

    def _consume(self, n=1):
        """Moves cursor forward by n bytes and returns the consumed chunk."""
        chunk = self.data[self.i:self.i+n]
        self.i += n
        return chunk

    def _scan_digits(self):
        """Consumes a (possibly empty) run of ASCII digits."""
        start = self.i
        while self.i < len(self.data) and self.data[self.i] in DIGITS:
            self.i += 1
        return self.data[start:self.i]

    def _enter(self):
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels", self.i)

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self):
        ch = self._peek()

        if ch == b'i':
            return self._parse_int()

        if ch.isdigit():  # Bencode strings start with length, which is a digit
            return self._parse_string()

        if ch == b'l':
            return self._parse_list()

        if ch == b'd':
            return self._parse_dict()

        raise MalformedToken(f"Invalid token {ch!r}", self.i)

    def _parse_int(self):
        """Parses an integer: i, optional '-', digits, e."""
        start = self.i
        self._consume(1)  # skip 'i'

        negative = self._peek() == b'-'
        if negative:
            self._consume(1)

        digits = self._scan_digits()
        terminator = self._peek()
        if terminator != b'e':
            raise MalformedToken(f"Invalid integer: unexpected {terminator!r}", self.i)
        if not digits:
            raise MalformedToken("Invalid integer: no digits", start)
        # canonical form: no leading zeros and no negative zero
        if digits[:1] == b'0' and (len(digits) > 1 or negative):
            raise MalformedToken(f"Invalid integer {self.data[start:self.i+1]!r}", start)

        # no 64-bit value needs more than 19 digits
        if len(digits) > 19:
            raise MalformedToken("Integer out of signed 64-bit range", start)

        num = int(digits)
        if negative:
            num = -num
        if not INT64_MIN <= num <= INT64_MAX:
            raise MalformedToken("Integer out of signed 64-bit range", start)

        self._consume(1)  # skip 'e'
        return BencodeInt(num)

    def _parse_string(self):
        """Parses a byte string: length digits, ':', payload."""
        start = self.i
        digits = self._scan_digits()
        if not digits:
            raise MalformedToken("Invalid string length", start)

        if self._peek() != b':':
            raise MalformedToken(f"Invalid string length: expected ':' got {self.data[self.i:self.i+1]!r}", self.i)
        if self.strict and digits[:1] == b'0' and len(digits) > 1:
            raise MalformedToken(f"Zero-padded string length {digits!r}", start)

        self._consume(1)  # skip ':'
        remaining = len(self.data) - self.i

        significant = digits.lstrip(b'0') or b'0'
        if len(significant) > len(str(remaining)):
            raise TruncatedInput(f"String declares a {len(significant)}-digit length but only {remaining} bytes remain", start)

        length = int(significant)
        if length > remaining:
            raise TruncatedInput(f"String declares {length} bytes but only {remaining} remain", start)

        return BencodeString(self._consume(length))

    def _parse_list(self):
        """Parses a list from the Bencoded data."""
        self._enter()
        self._consume(1)  # skip 'l'
        items = []

        while self._peek() != b'e':
            items.append(self._parse_value())

        self._consume(1)  # skip 'e'
        self.depth -= 1
        return BencodeList(items)

    def _parse_dict(self):
        """Parses a dictionary from the Bencoded data."""
        self._enter()
        self._consume(1)  # skip 'd'
        obj = {}
        last_key = None

        while True:
            ch = self._peek()
            if ch == b'e':
                break

            # keys MUST be strings
            if not ch.isdigit():
                raise UnexpectedKeyType(f"Dictionary key must be a byte string, got {ch!r}", self.i)

            key_pos = self.i
            key = self._parse_string().value
            if self.strict and last_key is not None:
                if key in obj:
                    raise MalformedToken(f"Duplicate dictionary key {key!r}", key_pos)
                if key < last_key:
                    raise MalformedToken(f"Dictionary key {key!r} sorts before {last_key!r}", key_pos)
            last_key = key

            obj[key] = self._parse_value()

        self._consume(1)  # skip 'e'
        self.depth -= 1
        return BencodeDict(obj)


def decode(data: bytes, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> List[BencodeType]:
    """
    Convenience function to decode Bencoded data.
    Returns the top-level values in encounter order.
    """
    return BencodeDecoder(data, strict=strict, max_depth=max_depth).decode()


def decode_one(data: bytes, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> BencodeType:
    """Decodes a buffer holding exactly one Bencoded value."""
    return BencodeDecoder(data, strict=strict, max_depth=max_depth).decode_one()
