import pytest
from hypothesis import given, strategies as st

from malt.evaluation.evaluator import evaluate
from malt.printer import escape, pr_str
from malt.reader.parser import read_str
from malt.types.environment import Environment
from malt.types.node import INT_MAX, INT_MIN, Node, NodeKind
from malt.types.procedure import Builtin
from malt.types.result import Result


def read(source):
    return read_str(source).unwrap()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(a b c)", "(a b c)"),
        ("(  a   b,c )", "(a b c)"),
        ("[1 [2 [3]]]", "[1 [2 [3]]]"),
        ("{a 1 b 2}", "{a 1 b 2}"),
        ("( )", "()"),
        ("-0", "0"),
        ("007", "7"),
        ('"a\\"b"', '"a\\"b"'),
        ('"line\\nbreak"', '"line\\nbreak"'),
        ("(def! x ; comment\n 1)", "(def! x 1)"),
        ("true", "true"),
        ("nil", "nil"),
    ]
)
def test_print_read_form(source, expected):
    assert pr_str(read(source)) == expected


def test_print_root_prints_its_child():
    root = read("(+ 1 2)")
    assert root.kind is NodeKind.ROOT
    assert pr_str(root) == "(+ 1 2)"
    assert pr_str(Node.make_root()) == ""


def test_print_strings_readably_or_raw():
    node = Node.make_string('say "hi"\n')
    assert pr_str(node) == '"say \\"hi\\"\\n"'
    assert pr_str(node, readably=False) == 'say "hi"\n'
    nested = Node.make_aggregate(NodeKind.VECTOR, children=[node])
    assert pr_str(nested, readably=False) == '[say "hi"\n]'


def test_print_function_placeholder():
    fn = Node.make_func(Builtin("+", lambda args: Result.ok(Node.make_nil())))
    assert pr_str(fn) == "#<function +>"


@pytest.mark.parametrize(
    "s, expected",
    [
        ("", '""'),
        ("plain", '"plain"'),
        ("back\\slash", '"back\\\\slash"'),
        ('"', '"\\""'),
    ]
)
def test_escape(s, expected):
    assert escape(s) == expected


# -----------------------------------------------------
# Round trip: data-only forms survive read -> eval -> print
# -----------------------------------------------------

atoms = st.one_of(
    st.integers(min_value=INT_MIN, max_value=INT_MAX).map(str),
    st.booleans().map(lambda b: "true" if b else "false"),
    st.just("nil"),
    st.text().map(escape),
)

data_forms = st.recursive(
    atoms,
    lambda children: st.lists(children, max_size=5).map(lambda xs: "[" + " ".join(xs) + "]"),
    max_leaves=20,
)


def rep(source):
    parsed = read_str(source)
    assert not parsed.is_error, parsed.message
    result = evaluate(parsed.value, Environment())
    assert not result.is_error, result.message
    return pr_str(result.value)


@given(data_forms)
def test_data_round_trip_is_identity(source):
    printed = rep(source)
    assert printed == source
    assert rep(printed) == printed
