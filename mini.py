"""
minilang interpreter

This is the main entry point for the minilang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set the MINIDEBUG environment variable to dump the tokens and AST before
execution.
"""
import os
import sys

from minilang.exceptions import MinilangException, ParserException
from minilang.interpreter import Interpreter
from minilang.lexer import tokenize
from minilang.nodes import to_source
from minilang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print("usage: mini [script.mini | -h]")
    print()
    print("Runs a minilang program. Statements are `$name = expression` or")
    print("`PRINT expression, ...`, separated by newlines or ';'.")
    print()
    print("  script.mini    program to lex, parse and execute")
    print("  -h, --help     show this message")
    print()
    print("Without a script an interactive session starts; leave it with")
    print("`exit`, `quit` or end-of-file.")
    print()
    print("Set MINIDEBUG=1 to dump tokens and the syntax tree before execution.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    for tok in tokens:
        print(f"    {tok}")
    print("\nAST:\n")
    for node in ast:
        print(f"    {to_source(node)}")
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a minilang script and return an exit status.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    try:
        tokens = tokenize(code)
        ast = Parser(tokens, script_name).parse()

        if os.environ.get('MINIDEBUG'):
            debug_print_tokens_ast(tokens, ast)

        Interpreter(script_name).interpret(ast)
    except MinilangException as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL

    Each line is tokenized on its own. While a statement is incomplete its
    tokens stay pending and the next line's tokens are appended to them, so a
    trailing comment cannot reach into the following lines.
    """
    print("minilang interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    pending: list = []
    while True:
        try:
            prompt = ">>> " if not pending else "... "
            line = input(prompt)
            if not pending and line.strip() in {"exit", "quit"}:
                break
            try:
                tokens = pending + tokenize(line)
                ast = Parser(tokens, "<stdin>").parse()
                pending = []
                interpreter.interpret(ast)
            except ParserException as e:
                # Input stopped mid-statement, e.g. after a trailing operator
                if e.at_end:
                    pending = tokens
                    continue
                print(f"{type(e).__name__}: {e}")
                pending = []
            except MinilangException as e:
                print(f"{type(e).__name__}: {e}")
                pending = []
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
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def run():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
