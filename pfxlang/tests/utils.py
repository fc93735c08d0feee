"""
Utility functions shared across PFX Language tests.
"""
from pathlib import Path

from pfxlang.interpreter import Interpreter
from pfxlang.lexer import tokenize
from pfxlang.statements import split_statements

PROJECT_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_DIR = PROJECT_ROOT / "examples"


def parse_source(source: str):
    """
    Tokenize and split source code into statements.
    """
    return split_statements(tokenize(source))


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.run(source)
    return interpreter


def run_file(path: Path) -> Interpreter:
    """
    Run a file and return the interpreter instance after execution.
    """
    interpreter = Interpreter(str(path))
    interpreter.run(path.read_text(encoding="utf-8"))
    return interpreter
