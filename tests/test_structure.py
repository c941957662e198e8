import pytest

from bview.structure import BencodeDict, BencodeInt, BencodeList, BencodeString


def test_constructor_type_checks():
    with pytest.raises(TypeError):
        BencodeInt("1")
    with pytest.raises(TypeError):
        BencodeInt(True)
    with pytest.raises(TypeError):
        BencodeString("text")
    with pytest.raises(TypeError):
        BencodeList([1, 2])
    with pytest.raises(TypeError):
        BencodeDict({"key": BencodeInt(1)})
    with pytest.raises(TypeError):
        BencodeDict({b"key": 1})


def test_values_are_immutable():
    n = BencodeInt(1)
    with pytest.raises(AttributeError):
        n.value = 2
    with pytest.raises(AttributeError):
        n._value = 2
    with pytest.raises(AttributeError):
        del n._value
    assert n.value == 1

    items = [BencodeInt(1)]
    lst = BencodeList(items)
    items.append(BencodeInt(2))
    assert len(lst) == 1

    d = BencodeDict({b"a": BencodeInt(1)})
    with pytest.raises(TypeError):
        d.value[b"b"] = BencodeInt(2)


def test_equality_and_hashing():
    assert BencodeString(bytearray(b"abc")) == BencodeString(b"abc")
    assert BencodeInt(1) != BencodeString(b"1")
    assert BencodeDict({b"a": BencodeInt(1), b"b": BencodeInt(2)}) == \
        BencodeDict({b"b": BencodeInt(2), b"a": BencodeInt(1)})
    assert len({BencodeInt(1), BencodeInt(1), BencodeString(b"x")}) == 2


def test_repr():
    assert repr(BencodeInt(3)) == "BencodeInt(3)"
    assert repr(BencodeList([BencodeString(b"a")])) == "BencodeList([BencodeString(b'a')])"
    assert repr(BencodeDict({b"k": BencodeInt(0)})) == "BencodeDict({b'k': BencodeInt(0)})"
