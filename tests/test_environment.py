from qbscript.types import Atom, Environment, Number, Symbol


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("a"), Atom(Number(1)))
    assert Symbol("a") in env
    assert env.lookup(Symbol("a")) == Atom(Number(1))
    assert len(env) == 1


def test_snapshot_is_independent():
    env = Environment({Symbol("a"): Atom(Number(1))})
    scope = env.snapshot()
    scope.define(Symbol("b"), Atom(Number(2)))
    scope.define(Symbol("a"), Atom(Number(3)))
    assert Symbol("b") not in env
    assert env.lookup(Symbol("a")) == Atom(Number(1))
    assert scope.lookup(Symbol("a")) == Atom(Number(3))


def test_update_and_names():
    env = Environment()
    env.update({Symbol("x"): Atom(Number(1)), Symbol("y"): Atom(Number(2))})
    assert list(env.names()) == [Symbol("x"), Symbol("y")]


def test_str_and_repr():
    env = Environment({Symbol("x"): Atom(Number(1))})
    assert str(env) == "{x: 1}"
    assert repr(env) == "<Environment {x: 1}>"
