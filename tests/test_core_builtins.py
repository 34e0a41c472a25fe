import math

import pytest

from tau.errors import TauArityError, TauPrimitiveError, TauUserRaised
from tau.types.atom import Atom
from tau.types.collections import Vector
from tau.types.nil import Nil
from tau.types.symbol import Keyword, Symbol


# -------------------------------
# Arithmetic
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(+ 1 2.5)", 3.5),
        ("(-)", 0),
        ("(- 5)", -5),
        ("(- 10 4 3)", 3),
        ("(*)", 1),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4.0),
        ("(/ 1 2)", 0.5),
        ("(/ 5)", 5),
        ("(/ 100 2 5)", 10.0),
    ],
)
def test_arithmetic(interp, source, expected):
    assert interp.run(source) == expected


def test_division_with_no_arguments_is_nil(interp):
    assert interp.run("(/)") is Nil


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 4 2 0)"])
def test_division_by_zero(interp, source):
    with pytest.raises(TauPrimitiveError, match="Division by zero"):
        interp.run(source)


@pytest.mark.parametrize("source", ['(+ 1 "2")', "(- nil)", "(* 2 true)", "(/ 1 :k)"])
def test_arithmetic_rejects_non_numbers(interp, source):
    with pytest.raises(TauPrimitiveError, match="must be numbers"):
        interp.run(source)


# -------------------------------
# Comparison and equality
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(<= 2 2)", True),
        ("(> 3 1.5)", True),
        ("(>= 1 2)", False),
    ],
)
def test_comparators(interp, source, expected):
    assert interp.run(source) is expected


def test_comparators_take_two_numbers(interp):
    with pytest.raises(TauArityError):
        interp.run("(< 1 2 3)")
    with pytest.raises(TauPrimitiveError):
        interp.run('(< 1 "2")')


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ('(= "a" "a")', True),
        ('(= "a" "b")', False),
        ("(= nil nil)", True),
        ("(= true true)", True),
        ("(= true 1)", False),
        ("(= 'a 'a)", True),
        ("(= :k :k)", True),
        ("(= :k 'k)", False),
        ("(= (list 1) (list 1))", False),
        ("(let (l (list 1)) (= l l))", True),
        ("(= + +)", True),
    ],
)
def test_equality(interp, source, expected):
    assert interp.run(source) is expected


def test_equality_takes_two_arguments(interp):
    with pytest.raises(TauArityError):
        interp.run("(= 1 1 1)")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(or)", False),
        ("(or nil false)", False),
        ("(or nil 2 3)", 2),
        ("(and)", True),
        ("(and 1 2 3)", 3),
        ("(and 1 nil 3)", Nil),
        ("(and 1 false)", False),
    ],
)
def test_logical_folds(interp, source, expected):
    assert interp.run(source) == expected
    assert type(interp.run(source)) is type(expected)


def test_or_and_evaluate_every_argument(interp):
    interp.run("(def hits (atom 0))")
    interp.run("(or true (swap! hits + 1))")
    interp.run("(and false (swap! hits + 1))")
    assert interp.run("@hits") == 2


# -------------------------------
# Sequences
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(nth (list 1 2 3) 0)", 1),
        ("(nth [1 2 3] 2)", 3),
        ("(first (list 1 2))", 1),
        ("(first (list))", Nil),
        ("(first nil)", Nil),
        ("(last [1 2 3])", 3),
        ("(last (list))", Nil),
        ("(rest (list 1 2 3))", [2, 3]),
        ("(rest (list))", []),
        ("(rest nil)", []),
        ("(empty? (list))", True),
        ("(empty? [1])", False),
        ("(empty? nil)", True),
        ("(count (list 1 2 3))", 3),
        ("(count nil)", 0),
        ('(count "abc")', 3),
        ("(count {:a 1})", 1),
        ("(cons 1 (list 2 3))", [1, 2, 3]),
        ("(cons 1 nil)", [1]),
        ("(concat (list 1) [2] nil (list 3 4))", [1, 2, 3, 4]),
        ("(concat)", []),
        ("(range 3)", [0, 1, 2]),
        ("(range 2 5)", [2, 3, 4]),
        ("(range 0 10 3)", [0, 3, 6, 9]),
        ("(range 5 2)", []),
    ],
)
def test_sequence_functions(interp, source, expected):
    assert interp.run(source) == expected


def test_rest_and_cons_of_vector_return_lists(interp):
    assert not isinstance(interp.run("(rest [1 2])"), Vector)
    assert not isinstance(interp.run("(cons 0 [1 2])"), Vector)
    assert interp.rep("(cons 0 [1 2])") == "(0 1 2)"


@pytest.mark.parametrize(
    "source, message",
    [
        ("(nth (list 1 2) 2)", "nth: index out of range"),
        ("(nth (list 1 2) -1)", "nth: index out of range"),
        ("(nth (list 1 2) 0.5)", "integer"),
        ("(first 1)", "expects a list"),
        ("(cons 1 2)", "expects a list"),
        ("(concat (list 1) 2)", "expects a list"),
    ],
)
def test_sequence_errors(interp, source, message):
    with pytest.raises(TauPrimitiveError, match=message):
        interp.run(source)


def test_list_and_vector_constructors(interp):
    assert interp.run("(list 1 2)") == [1, 2]
    assert isinstance(interp.run("(vector 1 2)"), Vector)
    assert interp.rep("(vector 1 (list 2))") == "[1 (2)]"


# -------------------------------
# apply
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(apply + (list 1 2 3))", 6),
        ("(apply + 1 2 (list 3 4))", 10),
        ("(apply + nil)", 0),
        ("(apply (fn (a b) (- a b)) [10 4])", 6),
        ("(apply list 1 (list))", [1]),
    ],
)
def test_apply(interp, source, expected):
    assert interp.run(source) == expected


def test_apply_errors(interp):
    with pytest.raises(TauArityError):
        interp.run("(apply +)")
    with pytest.raises(TauPrimitiveError):
        interp.run("(apply + 1)")


# -------------------------------
# Strings and printing
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(str)", ""),
        ('(str "a" 1 "b")', "a1b"),
        ('(str "q\\"" nil true :k (list 1 "x"))', 'q"niltrue:k(1 x)'),
    ],
)
def test_str(interp, source, expected):
    assert interp.run(source) == expected


def test_prn_prints_readably(interp, output):
    assert interp.run('(prn "a\\nb" 1 (list "c"))') is Nil
    assert output.getvalue() == '"a\\nb" 1 ("c")\n'


def test_println_prints_for_display(interp, output):
    assert interp.run('(println "a\\nb" 1 (list "c"))') is Nil
    assert output.getvalue() == 'a\nb 1 (c)\n'


def test_prn_defaults_to_stdout(capsys):
    from tau.interpreter import Interpreter

    Interpreter().run("(prn :hello)")
    assert capsys.readouterr().out == ":hello\n"


def test_read_string(interp):
    assert interp.run('(read-string "(+ 1 2)")') == [Symbol("+"), 1, 2]
    assert interp.run('(eval (read-string "(+ 1 2)"))') == 3


def test_read_string_errors(interp):
    with pytest.raises(TauPrimitiveError):
        interp.run("(read-string 1)")


# -------------------------------
# Atoms
# -------------------------------
def test_atom_lifecycle(interp):
    a = interp.run("(def a (atom 1))")
    assert isinstance(a, Atom)
    assert interp.run("(atom? a)") is True
    assert interp.run("(deref a)") == 1
    assert interp.run("(reset! a 10)") == 10
    assert interp.run("@a") == 10
    assert interp.run("(swap! a + 2 3)") == 15
    assert interp.run("(swap! a (fn (x) (* x 2)))") == 30
    assert a.value == 30


def test_atom_printing(interp):
    assert interp.rep('(atom "x")') == '#<atom "x">'


@pytest.mark.parametrize("source", ["(deref 1)", "(reset! 1 2)", "(swap! 1 +)"])
def test_atom_functions_reject_non_atoms(interp, source):
    with pytest.raises(TauPrimitiveError, match="expects an atom"):
        interp.run(source)


# -------------------------------
# Metadata
# -------------------------------
def test_meta_defaults_to_nil(interp):
    assert interp.run("(meta (fn (x) x))") is Nil
    assert interp.run("(meta (list 1))") is Nil
    assert interp.run("(meta 1)") is Nil


def test_with_meta_returns_annotated_copy(interp):
    interp.run("(def f (fn (x) (* x 2)))")
    interp.run('(def g (with-meta f {:doc "doubles"}))')
    assert interp.run("(meta g)") == {Keyword("doc"): "doubles"}
    assert interp.run("(meta f)") is Nil
    assert interp.run("(g 4)") == 8


@pytest.mark.parametrize(
    "source, printed",
    [
        ("(with-meta [1 2] :m)", "[1 2]"),
        ("(with-meta (list 1 2) :m)", "(1 2)"),
        ("(with-meta {:a 1} :m)", "{:a 1}"),
    ],
)
def test_with_meta_on_collections(interp, source, printed):
    assert interp.rep(source) == printed
    assert interp.run(f"(meta {source})") is Keyword("m")


def test_with_meta_on_builtin(interp):
    interp.run("(def plus (with-meta + 1))")
    assert interp.run("(meta plus)") == 1
    assert interp.run("(plus 1 2)") == 3
    assert interp.run("(meta +)") is Nil


def test_with_meta_on_atomic_value(interp):
    with pytest.raises(TauPrimitiveError):
        interp.run("(with-meta 1 :m)")


# -------------------------------
# Predicates and constructors
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(nil? nil)", True),
        ("(nil? false)", False),
        ("(true? true)", True),
        ("(true? 1)", False),
        ("(false? false)", True),
        ("(false? nil)", False),
        ("(number? 1)", True),
        ("(number? 1.5)", True),
        ("(number? true)", False),
        ('(string? "s")', True),
        ("(string? 's)", False),
        ("(symbol? 's)", True),
        ('(symbol? "s")', False),
        ("(keyword? :k)", True),
        ("(keyword? 'k)", False),
        ("(fn? +)", True),
        ("(fn? (fn () 1))", True),
        ("(fn? sqrt)", True),
        ("(fn? 1)", False),
        ("(macro? +)", False),
        ("(list? (list))", True),
        ("(list? [])", False),
        ("(vector? [])", True),
        ("(vector? (list))", False),
        ("(map? {})", True),
        ("(map? (list))", False),
        ("(atom? 1)", False),
    ],
)
def test_predicates(interp, source, expected):
    assert interp.run(source) is expected


def test_symbol_and_keyword_constructors(interp):
    assert interp.run('(symbol "abc")') is Symbol("abc")
    assert interp.run('(keyword "abc")') is Keyword("abc")
    assert interp.run("(keyword :abc)") is Keyword("abc")
    with pytest.raises(TauPrimitiveError):
        interp.run("(symbol 1)")


def test_throw(interp):
    with pytest.raises(TauUserRaised) as info:
        interp.run("(throw (list 1 2))")
    assert info.value.value == [1, 2]


@pytest.mark.parametrize("source", ["(nil?)", "(count 1 2)", "(atom)", "(throw)", "(first)"])
def test_builtin_arity(interp, source):
    with pytest.raises(TauArityError):
        interp.run(source)


# -------------------------------
# Host math
# -------------------------------
def test_math_forwarding(interp):
    assert interp.run("(sqrt 16)") == 4.0
    assert interp.run("pi") == math.pi
    assert interp.run("(floor 2.7)") == 2
    assert interp.run("(pow 2 10)") == 1024.0
    assert interp.run("(abs -3)") == 3
    assert interp.run("(max 1 5 3)") == 5
    assert interp.run("(min 4 2)") == 2
    assert interp.run("(round 2.6)") == 3


def test_math_errors_are_primitive_errors(interp):
    with pytest.raises(TauPrimitiveError, match="^sqrt: "):
        interp.run("(sqrt -1)")
    with pytest.raises(TauPrimitiveError):
        interp.run('(sqrt "x")')


def test_math_names_print_as_primitives(interp):
    assert interp.rep("sqrt") == "#<primitive sqrt>"
    assert interp.rep("+") == "#<primitive add>"
