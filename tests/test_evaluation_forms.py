import pytest


# ------------------ List structure ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ('(cons #A [B C :D "EFG" 1 2 3])', '[A B C :D "EFG" 1 2 3]'),
        ("(cons 1 2)", "[1 2]"),
        ("(cons 1 (list))", "[1]"),
        ("(cons [1] [2])", "[[1] 2]"),
        ("(cons 0 ())", "[0]"),
        ("(cons (add 1 1) [3])", "[2 3]"),
        ("(append [1 2] 3)", "[1 2 3]"),
        ("(append 1 [2])", "[1 [2]]"),
        ("(append () 1)", "[1]"),
        ("(append [] [])", "[[]]"),
        ("(list)", "[]"),
        ("(list 1 (add 1 1) x)", "[1 2 x]"),
        ("(list [a] #b)", "[[a] b]"),
        ("(head [a b])", "a"),
        ("(head (list [1] 2))", "[1]"),
        ("(head [])", "[]"),
        ("(head 5)", "[]"),
        ("(tail [a b c])", "[b c]"),
        ("(tail [a])", "[]"),
        ("(tail [])", "[]"),
        ("(tail a)", "[]"),
    ]
)
def test_list_forms(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("element", ["a", "7", '"s"', "[x y]"])
@pytest.mark.parametrize("lst", ["[]", "[1]", "[p q r]"])
def test_head_and_tail_of_cons(run, element, lst):
    assert run(f"(head (cons {element} {lst}))") == element
    assert run(f"(tail (cons {element} {lst}))") == lst


# ------------------ Predicates ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(atom a)", "#t"),
        ("(atom #a)", "#t"),
        ("(atom 3)", "#t"),
        ("(atom [])", "[]"),
        ("(atom ())", "[]"),
        ("(not [])", "#t"),
        ("(not ())", "#t"),
        ("(not [a])", "[]"),
        ("(not a)", "[]"),
        ("(not #t)", "[]"),
        ("(eq 1 1)", "#t"),
        ("(eq a a)", "#t"),
        ("(eq #a a)", "#t"),
        ('(eq "a" a)', "[]"),
        ("(eq 1 2)", "[]"),
        ("(eq [] [])", "[]"),
        ("(eq a [])", "[]"),
        ("(ne 1 2)", "#t"),
        ("(ne a a)", "[]"),
        # sequences are neither equal nor unequal
        ("(ne [] [])", "[]"),
        ("(ne [1] [2])", "[]"),
        ("(ne a [])", "[]"),
    ]
)
def test_predicates(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(lt 1 2)", "#t"),
        ("(lt 2 1)", "[]"),
        ("(lt 2 2)", "[]"),
        ("(gt 2 1)", "#t"),
        ("(gt -1 0)", "[]"),
        ("(le 2 2)", "#t"),
        ("(le 1 2)", "#t"),
        ("(le 3 2)", "[]"),
        ("(ge 2 2)", "#t"),
        ("(ge 1 2)", "[]"),
        ("(lt a 1)", "[]"),
        ("(gt 1 [])", "[]"),
        # le/ge are the negation of gt/lt, so non-numbers compare true
        ("(le a 1)", "#t"),
        ("(ge a 1)", "#t"),
        ("(le (add 3 2) 5)", "#t"),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) == expected


# ------------------ Conditionals ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ('(if [] "T" "F")', '"F"'),
        ('(if () "T" "F")', '"F"'),
        ('(if (list 1) "T" "F")', '"F"'),
        ('(if a "T" "F")', '"T"'),
        ('(if "x" "T" "F")', '"T"'),
        ('(if 0 "T" "F")', '"T"'),
        ('(if (not []) "T" "F")', '"T"'),
        ('(if (eq 1 2) "T" "F")', '"F"'),
        ("(if (gt 3 1) (add 1 1) (add 2 2))", "2"),
    ]
)
def test_if_truthiness_is_by_kind(run, source, expected):
    assert run(source) == expected


def test_if_evaluates_only_chosen_branch(run):
    run("(if a 1 (let y 2))")
    assert run("y") == "y"
    run("(if [] (let z 2) 1)")
    assert run("z") == "z"


@pytest.mark.parametrize(
    "source, expected",
    [
        ('(cond [(le (add 3 2) 5) "3 + 2 <= 5"] [T "Catch-all"])', '"3 + 2 <= 5"'),
        ('(cond [(gt 1 5) "big"] [T "Catch-all"])', '"Catch-all"'),
        ("(cond [[] 1] [x 2])", "2"),
        ("(cond [[] 1])", "[]"),
        ("(cond)", "[]"),
        ("(cond [[]])", "[]"),
        # non-List clauses are skipped
        ("(cond (a 1) [b 2])", "2"),
        ("(cond [a (add 1 2)] [b 9])", "3"),
    ]
)
def test_cond(run, source, expected):
    assert run(source) == expected


def test_cond_stops_at_first_match(run):
    run("(cond [a 1] [b (let w 2)])")
    assert run("w") == "w"


# ------------------ Arithmetic ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(add 3 2)", "5"),
        ("(add)", "0"),
        ('(add 1 "x" 2)', "3"),
        ("(add 1 -1)", "0"),
        ("(add -5 -6)", "-11"),
        ("(add (add 1 2) (add 3 4))", "10"),
        ("(add [1] 2)", "2"),
        ("(add #a 2)", "2"),
        ("(add 99999999999999999999 1)", "100000000000000000000"),
    ]
)
def test_add(run, source, expected):
    assert run(source) == expected


def test_add_uses_bound_values(run):
    run("(let n 4)")
    assert run("(add n n 1)") == "9"


# ------------------ let ------------------

def test_let_returns_name_and_binds(run):
    assert run("(let x 7)") == "x"
    assert run("x") == "7"


def test_let_stores_expression_unevaluated(run):
    run("(let y (add 1 2))")
    assert run("y") == "(add 1 2)"


def test_let_overwrites(run):
    run("(let x 1)")
    run("(let x 2)")
    assert run("x") == "2"


def test_let_with_non_symbol_name_is_echoed(run, interp):
    assert run("(let 5 6)") == "(let 5 6)"
    assert run('(let "s" 6)') == '(let "s" 6)'
    assert run("(let #q 6)") == "(let #q 6)"
    assert len(interp.env) == 0


def test_builtins_cannot_be_shadowed(run):
    run("(let add 5)")
    assert run("(add 1 2)") == "3"
    # the binding is still visible as a plain symbol
    assert run("add") == "5"
