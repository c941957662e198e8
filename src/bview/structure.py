"""
Data structures for representing decoded Bencode values.

Every decoded value is one of four immutable wrappers. The payload is
available as ``.value``: ``int``, ``bytes``, a ``tuple`` of values, or a
read-only mapping of ``bytes`` keys to values.
"""
from types import MappingProxyType

__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
]


class BencodeType:
    """Base class for all Bencode data types."""
    __slots__ = ("_value",)

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        if hasattr(self, "_value"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class BencodeInt(BencodeType):
    """Represents a Bencoded integer."""
    __slots__ = ()

    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        self._value = value


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    __slots__ = ()

    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires bytes.")
        self._value = bytes(value)

    def __len__(self):
        return len(self._value)


class BencodeList(BencodeType):
    """Represents a Bencoded list."""
    __slots__ = ()

    def __init__(self, value):
        if not isinstance(value, (list, tuple)):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError("BencodeList items must be Bencode values.")
        self._value = tuple(value)

    def __len__(self):
        return len(self._value)

    def __iter__(self):
        return iter(self._value)

    def __repr__(self):
        return f"BencodeList({list(self._value)!r})"


class BencodeDict(BencodeType):
    """Represents a Bencoded dictionary. Keys keep their insertion order."""
    __slots__ = ()

    def __init__(self, value: dict):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        # keys must be bytes (bencode requirement)
        for k, v in value.items():
            if not isinstance(k, bytes):
                raise TypeError("BencodeDict keys must be bytes.")
            if not isinstance(v, BencodeType):
                raise TypeError("BencodeDict values must be Bencode values.")
        self._value = MappingProxyType(dict(value))

    def __len__(self):
        return len(self._value)

    def __eq__(self, other):
        if not isinstance(other, BencodeDict):
            return NotImplemented
        return dict(self._value) == dict(other._value)

    __hash__ = None

    def __repr__(self):
        return f"BencodeDict({dict(self._value)!r})"
