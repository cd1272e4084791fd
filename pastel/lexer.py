"""Lexer for the Pastel language.

The lexer walks the source one character at a time and hands out tokens on
demand through :meth:`Lexer.next_token`. Identifiers and keywords are
case-insensitive: their text is lowercased before the keyword lookup and
before it is stored in the token. Positions are 1-based and count raw
characters, so a tab advances the column by one.
"""

from __future__ import annotations

from typing import Iterator, List

from lark import Token

from . import tokens as tk


def is_letter(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z')


def is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


class Lexer:
    """Turns a source string into a lazy stream of tokens."""

    def __init__(self, source: str):
        self.source = source
        self.position = 0
        self.read_position = 0
        self.ch = ''
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self) -> None:
        if self.read_position >= len(self.source):
            if self.ch == '' and self.read_position > 0:
                # already at end of input; keep the EOF position stable
                return
            self.ch = ''
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        if self.ch == '\n':
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    def peek_char(self) -> str:
        if self.read_position >= len(self.source):
            return ''
        return self.source[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch in (' ', '\t', '\n', '\r'):
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch) or is_digit(self.ch):
            self.read_char()
        return self.source[start:self.position].lower()

    def read_number(self) -> tuple:
        start = self.position
        is_real = False
        while is_digit(self.ch):
            self.read_char()
        # a '.' only belongs to the number when a digit follows it
        if self.ch == '.' and is_digit(self.peek_char()):
            is_real = True
            self.read_char()
            while is_digit(self.ch):
                self.read_char()
        return self.source[start:self.position], is_real

    def read_quoted(self) -> str:
        self.read_char()  # opening quote
        start = self.position
        while self.ch != '\'' and self.ch != '':
            self.read_char()
        text = self.source[start:self.position]
        self.read_char()  # closing quote, if any
        return text

    def next_token(self) -> Token:
        self.skip_whitespace()

        # position of the token's first character
        line = self.line
        column = self.column
        start = self.position

        if self.ch == '':
            return tk.make_token(tk.EOF, '', line, column, start)

        if is_letter(self.ch):
            literal = self.read_identifier()
            return tk.make_token(tk.lookup_ident(literal), literal, line, column, start)

        if is_digit(self.ch):
            literal, is_real = self.read_number()
            kind = tk.REAL_LIT if is_real else tk.INT
            return tk.make_token(kind, literal, line, column, start)

        if self.ch == '\'':
            literal = self.read_quoted()
            kind = tk.CHAR_LIT if len(literal) == 1 else tk.STRING_LIT
            return tk.make_token(kind, literal, line, column, start)

        if self.ch == ':':
            if self.peek_char() == '=':
                self.read_char()
                self.read_char()
                return tk.make_token(tk.ASSIGN, ':=', line, column, start)
            kind = tk.COLON
        else:
            kind = tk.PUNCTUATION.get(self.ch, tk.ILLEGAL)
        literal = self.ch
        self.read_char()
        return tk.make_token(kind, literal, line, column, start)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type == tk.EOF:
                return


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF."""
    return list(Lexer(source))
