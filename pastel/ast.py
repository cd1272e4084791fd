"""Abstract Syntax Tree (AST) definitions for the Pastel language.

The AST classes defined in this module represent the syntactic structure
of parsed Pastel programs. Nodes are frozen dataclasses and are never
modified once the parser has built them. ``Stmt`` and ``Expr`` name the
closed sets of statement and expression nodes the interpreter accepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class IntegerLiteral(Node):
    value: int


@dataclass(frozen=True)
class RealLiteral(Node):
    value: float


@dataclass(frozen=True)
class BooleanLiteral(Node):
    value: bool


@dataclass(frozen=True)
class CharLiteral(Node):
    value: str  # exactly one character


@dataclass(frozen=True)
class StringLiteral(Node):
    value: str


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class BinaryExpr(Node):
    left: 'Expr'
    operator: str  # '+', '-', '*' or '/'
    right: 'Expr'


@dataclass(frozen=True)
class VarDecl(Node):
    name: str
    type_name: str  # 'integer', 'real', 'boolean', 'char' or 'string'


@dataclass(frozen=True)
class AssignStmt(Node):
    name: str
    value: 'Expr'


@dataclass(frozen=True)
class PrintStmt(Node):
    argument: 'Expr'


@dataclass(frozen=True)
class CompoundStmt(Node):
    statements: Tuple['Stmt', ...] = ()


@dataclass(frozen=True)
class Program(Node):
    name: str
    declarations: Tuple[VarDecl, ...]
    main: CompoundStmt


Expr = Union[
    IntegerLiteral, RealLiteral, BooleanLiteral, CharLiteral,
    StringLiteral, Identifier, BinaryExpr,
]

Stmt = Union[AssignStmt, PrintStmt, CompoundStmt]
