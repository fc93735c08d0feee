"""Tests for `eq` and the arithmetic keywords."""
import pytest

from pfxlang.interpreter import Interpreter, truncating_div
from pfxlang.tests.utils import parse_source, run_source
from pfxlang.values import BoolValue, IntValue


def eval_one(source: str, interpreter: Interpreter | None = None):
    interpreter = interpreter or Interpreter("<test>")
    (stmt,) = parse_source(source)
    return interpreter.execute_statement(stmt)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("add 2 3 ;", IntValue(5)),
        ("sub 2 3 ;", IntValue(-1)),
        ("mul 6 7 ;", IntValue(42)),
        ("div 10 3 ;", IntValue(3)),
        ("div 9 3 ;", IntValue(3)),
        ("div 0 5 ;", IntValue(0)),
    ],
)
def test_arithmetic_results(source, expected):
    assert eval_one(source) == expected


def test_operands_are_read_in_source_order():
    interpreter = Interpreter("<test>")
    interpreter.run("let a 20 ; let b 4 ;")
    assert eval_one("sub a b ;", interpreter) == IntValue(16)
    assert eval_one("div a b ;", interpreter) == IntValue(5)
    assert eval_one("sub b a ;", interpreter) == IntValue(-16)


def test_div_truncates_toward_zero():
    assert truncating_div(10, 3) == 3
    assert truncating_div(-7, 2) == -3
    assert truncating_div(7, -2) == -3
    assert truncating_div(-7, -2) == 3


def test_div_by_zero_has_no_result():
    assert eval_one("div 1 0 ;") is None


def test_arithmetic_on_booleans_has_no_result():
    assert eval_one("add true 1 ;") is None
    assert eval_one("mul false true ;") is None


def test_eq_same_kind():
    assert eval_one("eq 4 4 ;") == BoolValue(True)
    assert eval_one("eq 4 5 ;") == BoolValue(False)
    assert eval_one("eq true true ;") == BoolValue(True)
    assert eval_one("eq true false ;") == BoolValue(False)


def test_eq_mismatched_kinds_has_no_result():
    assert eval_one("eq 1 true ;") is None
    assert eval_one("eq false 0 ;") is None


def test_results_are_discarded(capsys):
    interpreter = run_source("add 2 3 ;\neq 4 4 ;\nmul 2 2 ;\n")
    assert capsys.readouterr().out == ""
    assert interpreter.vars == {}


def test_arithmetic_on_very_long_literals():
    digits = "9" * 5000
    result = eval_one(f"add {digits} 1 ;")
    assert str(result) == "1" + "0" * 5000
    assert str(eval_one(f"sub 1 {digits} ;")) == "-" + "9" * 4999 + "8"
    assert eval_one(f"eq {digits} {digits} ;") == BoolValue(True)
