import pytest

from bview.decoder import decode
from bview.printer import BencodePrinter, describe_bytes, render
from bview.structure import BencodeInt, BencodeString


def test_render_scalars():
    print("Rendering scalars...")
    text = render(decode(b"3:apai-23e"))
    print(text)
    assert text == "[\n apa\n]\n[\n -23\n]\n"


def test_render_list():
    text = render(decode(b"l3:apai32ei43ee"))
    assert text.splitlines() == [
        "[",
        " [",
        "  apa",
        " ]",
        " [",
        "  32",
        " ]",
        " [",
        "  43",
        " ]",
        "]",
    ]


def test_render_dict():
    text = render(decode(b"d3:apai10e3:cowl3:mooee"))
    assert text.splitlines() == [
        "[",
        " apa =>",
        "  10",
        " cow =>",
        "  [",
        "   moo",
        "  ]",
        "]",
    ]


def test_render_empty_containers():
    assert render(decode(b"le")) == "[\n]\n"
    assert render(decode(b"de")) == "[\n]\n"
    assert render([]) == ""


def test_render_invalid_utf8_as_placeholder():
    text = render([BencodeString(b"\xff\xfe\x00")])
    assert text == "[\n [3 bytes]\n]\n"

    # dictionary keys get the same treatment
    text = render(decode(b"d2:\xff\xfei1ee"))
    assert "[2 bytes] =>" in text


def test_render_utf8_text():
    assert describe_bytes("héllo".encode("utf-8")) == "héllo"
    assert describe_bytes(b"") == ""


def test_custom_indent():
    printer = BencodePrinter(decode(b"d1:ai1ee"), indent="\t")
    assert list(printer.iter_lines()) == ["[", "\ta =>", "\t\t1", "]"]


def test_render_rejects_plain_python_values():
    with pytest.raises(TypeError):
        render([1, 2])


def test_render_is_pure():
    values = [BencodeInt(7)]
    assert render(values) == render(values)
    assert values == [BencodeInt(7)]
