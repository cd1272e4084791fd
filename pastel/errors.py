from dataclasses import dataclass
from typing import List, Sequence

from pastel.types import INT_MAX, INT_MIN


@dataclass(frozen=True)
class ParserError:
    """A diagnostic recorded by the parser.

    Parse errors are collected, not raised, so one parse can report several
    problems. ``line`` is 0 when no position is known.
    """
    message: str
    detail: str = ''
    hint: str = ''
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.line > 0:
            text = f"[Parser Error] at line {self.line}, column {self.column}: {self.message}"
        else:
            text = f"[Parser Error] {self.message}"
        if self.detail:
            text += f"\n  -> {self.detail}"
        if self.hint:
            text += f"\n  Hint: {self.hint}"
        return text


class PastelSyntaxError(Exception):
    """Raised by :func:`pastel.run_program` when the source fails to parse."""
    def __init__(self, errors: Sequence[ParserError]):
        self.errors: List[ParserError] = list(errors)
        super().__init__('\n'.join(str(e) for e in self.errors))


class PastelError(Exception):
    """Base exception for Pastel runtime errors.

    Runtime errors stop the program at the first failing statement. They
    carry no source position because the interpreter works on the AST only.
    """
    def __init__(self, message: str, detail: str = '', hint: str = ''):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.hint = hint

    def __str__(self) -> str:
        text = f"[Runtime Error] {self.message}"
        if self.detail:
            text += f"\n  -> {self.detail}"
        if self.hint:
            text += f"\n  Hint: {self.hint}"
        return text


class UndeclaredVariable(PastelError):
    def __init__(self, name: str):
        super().__init__(
            f"Undeclared variable '{name}'",
            'This variable is being used but was never declared with a type.',
            f"Try adding `var {name}: integer;` at the top of your program.",
        )
        self.name = name


class UndefinedVariable(PastelError):
    def __init__(self, name: str):
        super().__init__(
            f"Undefined variable '{name}'",
            'This variable is being used but was never declared or assigned a value.',
            f"Declare the variable using `var {name}: integer;` and assign it a value before use.",
        )
        self.name = name


class TypeMismatch(PastelError):
    def __init__(self, operator: str, left: str, right: str):
        super().__init__(
            'Type mismatch',
            f"Operator '{operator}' cannot be applied to {left} and {right}.",
            "Arithmetic needs integer or real operands; '+' also joins strings and chars.",
        )
        self.operator = operator


class DivisionByZero(PastelError):
    def __init__(self):
        super().__init__(
            'Division by zero',
            'An attempt was made to divide by zero.',
            'Ensure the divisor is not zero before performing division.',
        )


class UnsupportedOperator(PastelError):
    def __init__(self, operator: str):
        super().__init__(
            'Unknown operator',
            f"Operator '{operator}' is not supported.",
            'Use valid operators such as +, -, *, or /.',
        )
        self.operator = operator


class UnsupportedStatement(PastelError):
    def __init__(self, node: object):
        super().__init__(
            'Unknown statement type',
            f"Encountered an unsupported statement: {type(node).__name__}",
            'Ensure all statements are valid Pascal constructs.',
        )


class UnsupportedExpression(PastelError):
    def __init__(self, node: object):
        super().__init__(
            'Unknown expression type',
            f"Encountered an unsupported expression: {type(node).__name__}",
            'Ensure all expressions are valid Pascal constructs.',
        )


class IntegerOverflow(PastelError):
    def __init__(self, what: str):
        super().__init__(
            'Integer overflow',
            f"{what} does not fit in a 64-bit integer.",
            f"Integer values must lie between {INT_MIN} and {INT_MAX}; use real values for larger numbers.",
        )
