"""Token kinds and keyword table for the Pastel language.

Tokens are represented with :class:`lark.Token`, a ``str`` subclass whose
value is the literal text and whose ``type`` attribute holds the token
kind. The lexer fills in ``line``, ``column`` and ``start_pos`` for every
token it produces.
"""

from __future__ import annotations

from typing import Dict

from lark import Token


# Special
ILLEGAL = 'ILLEGAL'
EOF = 'EOF'

# Identifiers and literals
IDENT = 'IDENT'
INT = 'INT'
REAL_LIT = 'REAL_LIT'
CHAR_LIT = 'CHAR_LIT'
STRING_LIT = 'STRING_LIT'
TRUE = 'TRUE'
FALSE = 'FALSE'

# Operators
ASSIGN = 'ASSIGN'
PLUS = 'PLUS'
MINUS = 'MINUS'
STAR = 'STAR'
SLASH = 'SLASH'

# Delimiters
COMMA = 'COMMA'
SEMICOLON = 'SEMICOLON'
COLON = 'COLON'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
DOT = 'DOT'

# Keywords used by the grammar
PROGRAM = 'PROGRAM'
VAR = 'VAR'
BEGIN = 'BEGIN'
END = 'END'
WRITELN = 'WRITELN'

# Type keywords
INTEGER = 'INTEGER'
REAL = 'REAL'
BOOLEAN = 'BOOLEAN'
CHAR = 'CHAR'
STRING = 'STRING'

TYPE_KEYWORDS = (INTEGER, REAL, BOOLEAN, CHAR, STRING)

# Reserved words of Pascal that the grammar does not use yet. They still
# lex as keywords so they cannot be used as variable names.
RESERVED_WORDS = (
    'and', 'array', 'case', 'const', 'div', 'do', 'downto', 'else',
    'file', 'for', 'forward', 'function', 'goto', 'if', 'in', 'label',
    'mod', 'nil', 'not', 'of', 'or', 'packed', 'procedure', 'record',
    'repeat', 'set', 'then', 'to', 'type', 'until', 'while', 'with',
)

KEYWORDS: Dict[str, str] = {word: word.upper() for word in RESERVED_WORDS}
KEYWORDS.update({
    'program': PROGRAM,
    'var': VAR,
    'begin': BEGIN,
    'end': END,
    'writeln': WRITELN,
    'integer': INTEGER,
    'real': REAL,
    'boolean': BOOLEAN,
    'char': CHAR,
    'string': STRING,
    'true': TRUE,
    'false': FALSE,
})

# Single-character punctuation. ':' is handled by the lexer because of ':='.
PUNCTUATION: Dict[str, str] = {
    ';': SEMICOLON,
    ',': COMMA,
    '+': PLUS,
    '-': MINUS,
    '*': STAR,
    '/': SLASH,
    '(': LPAREN,
    ')': RPAREN,
    '.': DOT,
}


def lookup_ident(ident: str) -> str:
    """Return the keyword kind for ``ident`` or ``IDENT``."""
    return KEYWORDS.get(ident.lower(), IDENT)


def make_token(kind: str, literal: str, line: int, column: int, start_pos: int = 0) -> Token:
    return Token(kind, literal, start_pos, line, column)
