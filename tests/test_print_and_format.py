import pytest

from qbscript.reader.parser import parse
from qbscript.types import Atom, Call, FALSE, List, Number, Single, String, Symbol, TRUE


@pytest.mark.parametrize(
    "source",
    [
        "42",
        "-3",
        "0",
        '"abc"',
        "sym",
        "#x",
        "()",
        "[]",
        "(add 3 2)",
        '[a (b #c) "d e" 1 -2]',
        "[[[]]]",
    ]
)
def test_parse_then_print_reproduces_text(source):
    assert str(parse(source)[1]) == source


def test_print_normalises_whitespace():
    assert str(parse("(  a\n  [b   c]  )")[1]) == "(a [b c])"


@pytest.mark.parametrize(
    "elem, text",
    [
        (Atom(Number(-17)), "-17"),
        (Atom(String("hi there")), '"hi there"'),
        (Atom(Symbol("foo")), "foo"),
        (Single(Symbol("t")), "#t"),
        (Single(Number(3)), "#3"),
        (Single(String("s")), '#"s"'),
        (Call([Atom(Symbol("f")), List([])]), "(f [])"),
        (List([Call([]), Atom(Number(1))]), "[() 1]"),
        (TRUE, "#t"),
        (FALSE, "[]"),
    ]
)
def test_printed_form(elem, text):
    assert str(elem) == text


def test_repr_shows_constructors():
    assert repr(Atom(Symbol("a"))) == "Atom(Symbol('a'))"
    assert repr(List([Atom(Number(1))])) == "List([Atom(Number(1))])"
    assert repr(Call([])) == "Call([])"


def test_host_equality_is_structural():
    assert Atom(Symbol("a")) == Atom(Symbol("a"))
    assert Atom(Symbol("1")) != Atom(Number(1))
    assert Atom(Symbol("a")) != Single(Symbol("a"))
    assert Call([Atom(Number(1))]) != List([Atom(Number(1))])
    assert List([]) == FALSE
    assert hash(List([Atom(Number(1))])) == hash(List([Atom(Number(1))]))
