# Pastel language package
# This package provides a lexer, parser and tree-walking interpreter for Pastel,
# a small Pascal-like language.
from .errors import PastelError, PastelSyntaxError, ParserError
from .interpreter import Interpreter, run_program, run_file
from .lexer import Lexer, tokenize
from .parser import Parser, parse_program

__all__ = [
    'Interpreter',
    'Lexer',
    'Parser',
    'ParserError',
    'PastelError',
    'PastelSyntaxError',
    'parse_program',
    'run_file',
    'run_program',
    'tokenize',
]
