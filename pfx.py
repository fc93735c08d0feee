"""
PFX Language Interpreter

This is the main entry point for the PFX language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer drops comment lines and tokenizes the rest of the source.
3. The token stream is split into separator-terminated statements.
4. The Interpreter executes each statement in order against a fresh environment.
"""
import os
import sys

from pfxlang.exceptions import PfxException, ScriptNotFoundException
from pfxlang.interpreter import Interpreter
from pfxlang.lexer import tokenize
from pfxlang.statements import pending_tokens, split_statements


def print_usage():
    """
    Print usage.
    """
    print()
    print("PFX Language Interpreter")
    print()
    print("Usage:")
    print("    pfx <script.txt>")
    print()
    print("Arguments:")
    print("    <script.txt>")
    print("        Path to a PFX source file to execute.")
    print()
    print("Example:")
    print("    pfx hello.txt")
    print()
    print("Run with no arguments to do nothing.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print("    -i, --interactive")
    print("        Start an interactive session (REPL).")


def debug_print_tokens_statements(tokens, statements):
    """
    Print tokenized source and statements
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nStatements:\n", file=sys.stderr)
    for stmt in statements:
        print(stmt, file=sys.stderr)
    print(" ", file=sys.stderr)


def read_script(script_name: str) -> str:
    """
    Read a script as UTF-8 text, dropping a leading BOM.

    Raises:
        ScriptNotFoundException: If the file cannot be read.
    """
    try:
        with open(script_name, "r", encoding="utf-8-sig", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise ScriptNotFoundException(script_name) from e


def run_script(script_name: str) -> int:
    """
    Run a PFX script and return the process exit code.
    """
    try:
        code = read_script(script_name)
    except ScriptNotFoundException as e:
        print(e, file=sys.stderr)
        return 1

    try:
        tokens = tokenize(code)
        statements = split_statements(tokens)

        if os.environ.get('PFXDEBUG'):
            debug_print_tokens_statements(tokens, statements)

        interpreter = Interpreter(script_name)
        interpreter.execute(statements)
    except PfxException as e:
        sys.stdout.flush()
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("PFX Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    pending = []
    line_num = 0
    while True:
        try:
            prompt = ">>> " if not pending else "... "
            line = input(prompt)
            if line.strip() in {"exit", "quit"}:
                break
            line_num += 1
            tokens = pending + tokenize(line, first_line=line_num)
            pending = pending_tokens(tokens)
            try:
                interpreter.execute(split_statements(tokens))
            except PfxException as e:
                print(f"{type(e).__name__}: {e}")
                pending = []
            sys.stdout.flush()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: do nothing and exit cleanly.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument equal to ``-i`` or ``--interactive``: enter the REPL.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and args[0] in ('-i', '--interactive'):
        run_repl()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def entry():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    entry()
