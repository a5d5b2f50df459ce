"""
Utility functions shared across minilang tests.
"""
from minilang.lexer import tokenize
from minilang.parser import Parser
from minilang.interpreter import Interpreter


def token_pairs(source: str) -> list[tuple]:
    """
    Tokenize source code and return (type, value) pairs.
    """
    return [(tok.type, tok.value) for tok in tokenize(source)]


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    return Parser(tokenize(source), "<test>").parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.interpret(parse_source(source))
    return interpreter
