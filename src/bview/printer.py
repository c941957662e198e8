"""
Indented text rendering of decoded Bencode values.
"""
from typing import Iterable, Iterator

from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

DEFAULT_INDENT = " "


def describe_bytes(raw: bytes) -> str:
    """UTF-8 text when possible, otherwise a byte-count placeholder."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return f"[{len(raw)} bytes]"


class BencodePrinter:
    """
    Renders a sequence of top-level values, one bracketed block each.
    Nesting adds one indent unit per level.
    """
    def __init__(self, values: Iterable[BencodeType], indent: str = DEFAULT_INDENT):
        self.values = list(values)
        for v in self.values:
            if not isinstance(v, BencodeType):
                raise TypeError(f"Cannot render object of type {type(v).__name__}")
        self.indent = indent

    def render(self) -> str:
        return "".join(line + "\n" for line in self.iter_lines())

    def iter_lines(self) -> Iterator[str]:
        yield from self._blocks(self.values, 0)

    def _pad(self, level: int) -> str:
        return self.indent * level

    def _blocks(self, values, level):
        for v in values:
            yield self._pad(level) + "["
            yield from self._value(v, level + 1)
            yield self._pad(level) + "]"

    def _value(self, v, level):
        if isinstance(v, BencodeInt):
            yield self._pad(level) + str(v.value)
        elif isinstance(v, BencodeString):
            yield self._pad(level) + describe_bytes(v.value)
        elif isinstance(v, BencodeList):
            yield from self._blocks(v.value, level)
        elif isinstance(v, BencodeDict):
            for key, item in v.value.items():
                yield f"{self._pad(level)}{describe_bytes(key)} =>"
                yield from self._value(item, level + 1)
        else:
            raise TypeError(f"Cannot render object of type {type(v).__name__}")


def render(values: Iterable[BencodeType], indent: str = DEFAULT_INDENT) -> str:
    """Convenience function to render decoded values as indented text."""
    return BencodePrinter(values, indent=indent).render()
