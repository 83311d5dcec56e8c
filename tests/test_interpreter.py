import io

import pytest

from malt.interpreter import Interpreter
from malt.repl import repl
from malt.types.errors import MaltEmptyInput, MaltRecursionError
from malt.types.node import Node, NodeKind


def test_definitions_persist_across_lines(interp):
    assert interp.rep("(def! x 10)") == "10"
    assert interp.rep("(* x 2)") == "20"
    assert interp.rep("(let* (x 2 y (+ x 1)) (+ x y))") == "5"
    assert interp.rep("x") == "10"


def test_interpreters_are_independent():
    a, b = Interpreter(), Interpreter()
    a.rep("(def! x 1)")
    assert b.rep("x") == "ERROR: 'x' could not be resolved"


@pytest.mark.parametrize("line", ["", "   ", "; comment only", ","])
def test_blank_lines_are_skipped(interp, line):
    assert interp.rep(line) is None
    assert isinstance(interp.eval(line).error, MaltEmptyInput)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("(/ 10 0)", "ERROR: division by zero"),
        ("(a", "ERROR: unbalanced tree"),
        ('"abc', "ERROR: EOF in string"),
        ("1 2", "ERROR: unbalanced (multiple atoms outside list)"),
        ("(def! only-one-arg)", "ERROR: def! requires exactly 2 arguments"),
    ]
)
def test_errors_are_reported(interp, line, expected):
    assert interp.rep(line) == expected


def test_root_env_has_builtins(interp):
    for name in "+-*/":
        assert interp.env.get(name) is not None


def test_repl_loop():
    stdin = io.StringIO("(def! a 2)\n\n(+ a 3)\n(/ a 0)\n")
    stdout = io.StringIO()
    assert repl(Interpreter(), stdin, stdout, prompt="> ") == 0
    assert stdout.getvalue() == "> 2\n> > 5\n> ERROR: division by zero\n> \n"


def test_repl_uses_configured_prompt(monkeypatch):
    monkeypatch.setenv("MALT_PROMPT", "malt> ")
    stdout = io.StringIO()
    repl(Interpreter(), io.StringIO("1\n"), stdout)
    assert stdout.getvalue().startswith("malt> 1\n")


NESTED_SUM = "(+ 1 " * 1000 + "0" + ")" * 1000


def test_nesting_past_the_call_stack_is_an_error(interp):
    result = interp.eval(NESTED_SUM)
    assert isinstance(result.error, MaltRecursionError)
    assert interp.rep(NESTED_SUM) == "ERROR: maximum nesting depth exceeded"
    assert interp.rep("[" * 1200 + "]" * 1200) == "ERROR: maximum nesting depth exceeded"
    # the session is still usable afterwards
    assert interp.rep("(+ 1 2)") == "3"


def test_deep_let_releases_its_frames(interp):
    source = "(let* (a 1) " * 1000 + "a" + ")" * 1000
    assert interp.rep(source) == "ERROR: maximum nesting depth exceeded"
    assert interp.rep("a") == "ERROR: 'a' could not be resolved"
    assert interp.env.vars.keys() == {"+", "-", "*", "/"}


def test_render_too_deep_is_an_error(interp):
    node = Node.make_number(1)
    for _ in range(5000):
        node = Node.make_aggregate(NodeKind.VECTOR, children=[node])
    printed = interp.render(node)
    assert isinstance(printed.error, MaltRecursionError)
    assert interp.render(Node.make_number(7)).value == "7"
