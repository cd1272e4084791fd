"""Tree-walking interpreter for the Pastel language.

The interpreter executes a parsed :class:`~pastel.ast.Program` directly.
Declarations seed a fresh :class:`~pastel.environment.Environment` with the
zero value of each declared type; the main block then runs statement by
statement. Values are dynamically typed: an assignment may store a value
of any kind regardless of the declared type.

Arithmetic follows these rules:

* ``+`` adds numbers or joins strings and chars (the result is always a
  string);
* ``-`` and ``*`` accept numbers only;
* ``/`` rejects a zero divisor before anything else, truncates toward zero
  for two integers and divides as reals otherwise.

Integers are signed 64-bit; an integer result outside that range raises
:class:`~pastel.errors.IntegerOverflow` instead of wrapping around.
An integer combined with a real is widened to real. The first runtime
error raises a :class:`~pastel.errors.PastelError` and ends the run;
anything already printed stays printed.
"""

from __future__ import annotations

from typing import Optional, TextIO

from .ast import (
    Program, VarDecl, CompoundStmt, AssignStmt, PrintStmt,
    IntegerLiteral, RealLiteral, BooleanLiteral, CharLiteral,
    StringLiteral, Identifier, BinaryExpr, Node,
)
from .environment import Environment
from .errors import (
    PastelSyntaxError, UndeclaredVariable, UndefinedVariable, TypeMismatch,
    DivisionByZero, UnsupportedOperator, UnsupportedStatement,
    UnsupportedExpression, IntegerOverflow,
)
from .parser import parse_program
from .types import (
    Value, IntegerValue, RealValue, BooleanValue, CharValue, StringValue,
    is_numeric, is_textual, in_int_range,
)


def truncate_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Interpreter:
    """Core interpreter that executes a Pastel AST."""
    def __init__(self, out: Optional[TextIO] = None, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.out = out
        self.env = Environment()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    # Public API
    def run(self, program: Program) -> None:
        self.env = Environment()
        if self.debug_level > 0:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            if self.debug_level >= 1:
                self.debug(f"run program {program.name}")
            for decl in program.declarations:
                self.declare(decl)
            self.execute(program.main)
            if self.debug_level >= 1:
                self.debug(f"finished program {program.name}")
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def declare(self, decl: VarDecl) -> None:
        value = self.env.declare(decl.name, decl.type_name)
        if self.debug_level >= 2:
            self.debug(f"declare {decl.name}: {decl.type_name} = {value.display()!r}")

    def execute(self, node: Node) -> None:
        if isinstance(node, AssignStmt):
            if not self.env.exists(node.name):
                raise UndeclaredVariable(node.name)
            value = self.evaluate(node.value)
            self.env.set(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name} := {value.display()!r} ({value.kind})")
            return
        if isinstance(node, CompoundStmt):
            for stmt in node.statements:
                self.execute(stmt)
            return
        if isinstance(node, PrintStmt):
            value = self.evaluate(node.argument)
            print(value.display(), file=self.out)
            return
        raise UnsupportedStatement(node)

    def evaluate(self, node: Node) -> Value:
        if isinstance(node, IntegerLiteral):
            if not in_int_range(node.value):
                raise IntegerOverflow('An integer literal')
            return IntegerValue(node.value)
        if isinstance(node, RealLiteral):
            return RealValue(node.value)
        if isinstance(node, BooleanLiteral):
            return BooleanValue(node.value)
        if isinstance(node, CharLiteral):
            return CharValue(node.value)
        if isinstance(node, StringLiteral):
            return StringValue(node.value)
        if isinstance(node, Identifier):
            value = self.env.get(node.name)
            if value is None:
                raise UndefinedVariable(node.name)
            return value
        if isinstance(node, BinaryExpr):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            result = self.apply_binary_op(node.operator, left, right)
            if self.debug_level >= 3:
                self.debug(f"{left.display()!r} {node.operator} {right.display()!r} -> {result.display()!r}")
            return result
        raise UnsupportedExpression(node)

    def apply_binary_op(self, op: str, a: Value, b: Value) -> Value:
        if op == '+':
            if is_textual(a) and is_textual(b):
                return StringValue(a.value + b.value)
            if is_numeric(a) and is_numeric(b):
                if isinstance(a, IntegerValue) and isinstance(b, IntegerValue):
                    return self.integer_result(op, a, b, a.value + b.value)
                return RealValue(float(a.value) + float(b.value))
            raise TypeMismatch(op, a.kind, b.kind)
        if op == '-':
            if is_numeric(a) and is_numeric(b):
                if isinstance(a, IntegerValue) and isinstance(b, IntegerValue):
                    return self.integer_result(op, a, b, a.value - b.value)
                return RealValue(float(a.value) - float(b.value))
            raise TypeMismatch(op, a.kind, b.kind)
        if op == '*':
            if is_numeric(a) and is_numeric(b):
                if isinstance(a, IntegerValue) and isinstance(b, IntegerValue):
                    return self.integer_result(op, a, b, a.value * b.value)
                return RealValue(float(a.value) * float(b.value))
            raise TypeMismatch(op, a.kind, b.kind)
        if op == '/':
            # a zero divisor is reported before the operand types are checked
            if is_numeric(b) and b.value == 0:
                raise DivisionByZero()
            if is_numeric(a) and is_numeric(b):
                if isinstance(a, IntegerValue) and isinstance(b, IntegerValue):
                    return self.integer_result(op, a, b, truncate_div(a.value, b.value))
                return RealValue(float(a.value) / float(b.value))
            raise TypeMismatch(op, a.kind, b.kind)
        raise UnsupportedOperator(op)

    def integer_result(self, op: str, a: Value, b: Value, n: int) -> IntegerValue:
        if not in_int_range(n):
            raise IntegerOverflow(f"The result of {a.value} {op} {b.value}")
        return IntegerValue(n)


def run_program(source: str, out: Optional[TextIO] = None, debug_level: int = 0) -> Interpreter:
    """Parse and run a Pastel program from a source string.

    Raises :class:`~pastel.errors.PastelSyntaxError` when the source does
    not parse and lets runtime errors propagate. Returns the interpreter so
    callers can inspect the final variable values.
    """
    program, errors = parse_program(source)
    if errors or program is None:
        raise PastelSyntaxError(errors)
    interpreter = Interpreter(out=out, debug_level=debug_level)
    interpreter.run(program)
    return interpreter


def run_file(file_path: str, out: Optional[TextIO] = None, debug_level: int = 0) -> Interpreter:
    """Read a Pastel file and run it, returning the interpreter instance."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, out=out, debug_level=debug_level)
