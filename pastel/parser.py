"""Recursive-descent parser for the Pastel language.

The parser pulls tokens from a :class:`~pastel.lexer.Lexer` and keeps two
of them in view: ``cur_token`` and ``peek_token``. Each grammar rule is a
``parse_*`` method. ``+``/``-`` and ``*``/``/`` are separate precedence
levels, and each level folds its operands to the left.

Problems are not raised. They are recorded as :class:`ParserError`
entries and the failing rule returns ``None``; callers leave ``None``
results out of the tree. Inside a ``begin ... end`` block the parser drops
the failing statement, advances one token and keeps going, so one typo
can produce follow-up diagnostics. A program whose parse recorded any
error must not be executed.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark import Token

from . import tokens as tk
from .ast import (
    Program, VarDecl, CompoundStmt, AssignStmt, PrintStmt,
    IntegerLiteral, RealLiteral, BooleanLiteral, CharLiteral,
    StringLiteral, Identifier, BinaryExpr, Expr, Stmt,
)
from .errors import ParserError
from .lexer import Lexer
from .types import INT_MAX


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self._errors: List[ParserError] = []
        self.cur_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def errors(self) -> List[ParserError]:
        return list(self._errors)

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, kind: str) -> bool:
        return self.cur_token.type == kind

    def got(self, token: Optional[Token] = None) -> str:
        token = token if token is not None else self.cur_token
        return f'Got "{token.value}" ({token.type}) instead.'

    def add_error(self, message: str, detail: str, hint: str, token: Optional[Token] = None) -> None:
        token = token if token is not None else self.cur_token
        self._errors.append(ParserError(message, detail, hint, token.line or 0, token.column or 0))

    def expect_peek(self, kind: str) -> bool:
        if self.peek_token.type == kind:
            self.next_token()
            return True
        self.add_error(
            f"Expected next token to be {kind}",
            self.got(self.peek_token),
            'Check the syntax of your program.',
            token=self.peek_token,
        )
        return False

    # Program structure

    def parse_program(self) -> Optional[Program]:
        if not self.cur_token_is(tk.PROGRAM):
            self.add_error(
                "Expected 'program' keyword",
                self.got(),
                "A Pascal program must start with the 'program' keyword.",
            )
            return None
        self.next_token()

        if not self.cur_token_is(tk.IDENT):
            self.add_error(
                'Expected program name',
                self.got(),
                "The 'program' keyword must be followed by an identifier.",
            )
            return None
        name = self.cur_token.value
        self.next_token()

        if not self.cur_token_is(tk.SEMICOLON):
            self.add_error(
                'Expected semicolon',
                self.got(),
                'Statements must end with a semicolon.',
            )
            return None
        self.next_token()

        declarations: List[VarDecl] = []
        while self.cur_token_is(tk.VAR):
            decl = self.parse_var_decl()
            if decl is not None:
                declarations.append(decl)

        if not self.cur_token_is(tk.BEGIN):
            self.add_error(
                "Expected 'begin' block",
                self.got(),
                "A Pascal program must have a 'begin' block to define its main body.",
            )
            return None
        main = self.parse_compound()

        if not self.cur_token_is(tk.DOT):
            self.add_error(
                "Expected '.' at the end of the program",
                self.got(),
                "A Pascal program must end with a period ('.').",
            )
            return None

        return Program(name, tuple(declarations), main)

    def parse_var_decl(self) -> Optional[VarDecl]:
        self.next_token()  # 'var'

        if not self.cur_token_is(tk.IDENT):
            self.add_error(
                "Expected variable name after 'var'",
                self.got(),
                'Variable declarations must start with a valid identifier.',
            )
            return None
        name = self.cur_token.value
        self.next_token()

        if not self.cur_token_is(tk.COLON):
            self.add_error(
                "Expected ':' after variable name",
                self.got(),
                'Variable declarations must specify a type after the colon.',
            )
            return None
        self.next_token()

        if self.cur_token.type not in tk.TYPE_KEYWORDS:
            self.add_error(
                'Expected type for variable',
                self.got(),
                'Supported types are: integer, real, boolean, char, string.',
            )
            return None
        type_name = self.cur_token.value
        self.next_token()

        if not self.cur_token_is(tk.SEMICOLON):
            self.add_error(
                "Expected ';' after variable declaration",
                self.got(),
                'Variable declarations must end with a semicolon.',
            )
            return None
        self.next_token()

        return VarDecl(name, type_name)

    # Statements

    def parse_statement(self) -> Optional[Stmt]:
        kind = self.cur_token.type
        if kind == tk.IDENT:
            if self.peek_token.type == tk.ASSIGN:
                return self.parse_assignment()
            self.add_error(
                f"Unexpected identifier '{self.cur_token.value}'",
                'This identifier is not part of an assignment or recognized statement.',
                "Make sure you're using ':=' for assignments or a known keyword like 'writeln'.",
            )
            self.next_token()
            return None
        if kind == tk.WRITELN:
            return self.parse_print()
        if kind == tk.BEGIN:
            return self.parse_compound()
        # not a statement start; the enclosing block skips it
        return None

    def parse_compound(self) -> CompoundStmt:
        statements: List[Stmt] = []
        self.next_token()  # 'begin'
        while self.cur_token.type not in (tk.END, tk.EOF, tk.DOT):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        if self.cur_token_is(tk.END):
            self.next_token()
        return CompoundStmt(tuple(statements))

    def parse_assignment(self) -> Optional[AssignStmt]:
        name = self.cur_token.value
        if not self.expect_peek(tk.ASSIGN):
            return None
        self.next_token()

        value = self.parse_expression()
        if value is None:
            return None

        if not self.cur_token_is(tk.SEMICOLON):
            self.add_error(
                'Expected semicolon at the end of assignment',
                self.got(),
                'Assignments must end with a semicolon.',
            )
            return None
        return AssignStmt(name, value)

    def parse_print(self) -> Optional[PrintStmt]:
        self.next_token()  # 'writeln'

        if not self.cur_token_is(tk.LPAREN):
            self.add_error(
                "Expected '(' after 'writeln'",
                self.got(),
                "The 'writeln' keyword must be followed by parentheses containing the argument.",
            )
            return None
        self.next_token()

        argument = self.parse_expression()
        if argument is None:
            return None

        if not self.cur_token_is(tk.RPAREN):
            self.add_error(
                "Expected ')' after writeln argument",
                self.got(),
                "Ensure the argument to 'writeln' is enclosed in parentheses.",
            )
            return None
        self.next_token()

        if not self.cur_token_is(tk.SEMICOLON):
            self.add_error(
                "Expected ';' after writeln",
                self.got(),
                'Statements must end with a semicolon.',
            )
            return None
        return PrintStmt(argument)

    # Expressions

    def parse_expression(self) -> Optional[Expr]:
        node = self.parse_term()
        while node is not None and self.cur_token.type in (tk.PLUS, tk.MINUS):
            operator = self.cur_token.value
            self.next_token()
            right = self.parse_term()
            if right is None:
                return None
            node = BinaryExpr(node, operator, right)
        return node

    def parse_term(self) -> Optional[Expr]:
        node = self.parse_factor()
        while node is not None and self.cur_token.type in (tk.STAR, tk.SLASH):
            operator = self.cur_token.value
            self.next_token()
            right = self.parse_factor()
            if right is None:
                return None
            node = BinaryExpr(node, operator, right)
        return node

    def parse_factor(self) -> Optional[Expr]:
        token = self.cur_token
        kind = token.type
        if kind == tk.LPAREN:
            self.next_token()
            expr = self.parse_expression()
            if expr is None:
                return None
            if not self.cur_token_is(tk.RPAREN):
                self.add_error(
                    'Expected closing parenthesis',
                    self.got(),
                    'Ensure all opening parentheses have matching closing parentheses.',
                )
                return None
            self.next_token()
            return expr

        node: Optional[Expr] = None
        if kind == tk.INT:
            digits = token.value.lstrip('0') or '0'
            if len(digits) > len(str(INT_MAX)) or int(digits) > INT_MAX:
                self.add_error(
                    'Integer literal out of range',
                    f"Integer literals must not exceed {INT_MAX}.",
                    'Use a real literal for larger numbers.',
                )
                return None
            node = IntegerLiteral(int(digits))
        elif kind == tk.REAL_LIT:
            node = RealLiteral(float(token.value))
        elif kind == tk.TRUE:
            node = BooleanLiteral(True)
        elif kind == tk.FALSE:
            node = BooleanLiteral(False)
        elif kind == tk.CHAR_LIT:
            node = CharLiteral(token.value)
        elif kind == tk.STRING_LIT:
            node = StringLiteral(token.value)
        elif kind == tk.IDENT:
            node = Identifier(token.value)

        if node is None:
            self.add_error(
                'Unexpected token in primary expression',
                self.got(),
                'Check the syntax of your expression.',
            )
            return None
        self.next_token()
        return node


def parse_program(source: str) -> Tuple[Optional[Program], List[ParserError]]:
    """Parse Pastel source code.

    Returns the program (``None`` when the parse could not complete) and the
    list of recorded diagnostics. The program is only usable when the list
    is empty.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors()
