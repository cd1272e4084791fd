import pytest

from pastel.ast import (
    Program, VarDecl, CompoundStmt, AssignStmt, PrintStmt, BinaryExpr,
    IntegerLiteral, RealLiteral, BooleanLiteral, CharLiteral, StringLiteral,
    Identifier,
)
from pastel.lexer import Lexer
from pastel.parser import Parser, parse_program


def parse_ok(source):
    program, errors = parse_program(source)
    assert errors == [], '\n'.join(str(e) for e in errors)
    assert program is not None
    return program


def parse_expr(text):
    program = parse_ok(f"program t;\nvar x: integer;\nbegin\n  x := {text};\nend.")
    return program.main.statements[0].value


def test_minimal_program():
    program = parse_ok("program test;\nbegin\nend.")
    assert program == Program('test', (), CompoundStmt(()))


def test_declarations():
    program = parse_ok("program test;\nvar x: integer;\nvar Name: STRING;\nbegin\nend.")
    assert program.declarations == (VarDecl('x', 'integer'), VarDecl('name', 'string'))


def test_assignment_and_writeln():
    program = parse_ok("program test;\nvar x: integer;\nbegin\n  x := 42;\n  writeln(x);\nend.")
    assert program.main.statements == (
        AssignStmt('x', IntegerLiteral(42)),
        PrintStmt(Identifier('x')),
    )


@pytest.mark.parametrize('text, expected', [
    ('123', IntegerLiteral(123)),
    ('2.75', RealLiteral(2.75)),
    ('true', BooleanLiteral(True)),
    ('FALSE', BooleanLiteral(False)),
    ("'c'", CharLiteral('c')),
    ("'text'", StringLiteral('text')),
    ("''", StringLiteral('')),
    ('y', Identifier('y')),
])
def test_factors(text, expected):
    assert parse_expr(text) == expected


def test_multiplication_binds_tighter_than_addition():
    expr = parse_expr('2 + 3 * 4')
    assert expr == BinaryExpr(
        IntegerLiteral(2), '+', BinaryExpr(IntegerLiteral(3), '*', IntegerLiteral(4)),
    )


def test_parentheses_override_precedence():
    expr = parse_expr('(2 + 3) * 4')
    assert expr == BinaryExpr(
        BinaryExpr(IntegerLiteral(2), '+', IntegerLiteral(3)), '*', IntegerLiteral(4),
    )


def test_operators_are_left_associative():
    assert parse_expr('10 - 4 - 3') == BinaryExpr(
        BinaryExpr(IntegerLiteral(10), '-', IntegerLiteral(4)), '-', IntegerLiteral(3),
    )
    assert parse_expr('8 / 4 * 2') == BinaryExpr(
        BinaryExpr(IntegerLiteral(8), '/', IntegerLiteral(4)), '*', IntegerLiteral(2),
    )


def test_nested_compound_statement():
    program = parse_ok(
        "program t;\nvar x: integer;\nbegin\n  begin\n    x := 1;\n  end;\n  writeln(x);\nend."
    )
    assert program.main.statements == (
        CompoundStmt((AssignStmt('x', IntegerLiteral(1)),)),
        PrintStmt(Identifier('x')),
    )


def test_parse_expression_is_public():
    parser = Parser(Lexer('1 + x * 2'))
    assert parser.parse_expression() == BinaryExpr(
        IntegerLiteral(1), '+', BinaryExpr(Identifier('x'), '*', IntegerLiteral(2)),
    )
    assert not parser.has_errors()


@pytest.mark.parametrize('source', [
    "test;\nbegin\nend.",
    "program test\nbegin\nend.",
    "program test;\nbegin\nend",
])
def test_malformed_program_reports_position(source):
    program, errors = parse_program(source)
    assert program is None
    assert len(errors) >= 1
    assert errors[0].line > 0


def test_missing_program_keyword():
    parser = Parser(Lexer("test;\nbegin\nend."))
    assert parser.parse_program() is None
    assert parser.has_errors()
    err = parser.errors()[0]
    assert err.message == "Expected 'program' keyword"
    assert err.detail == 'Got "test" (IDENT) instead.'
    assert (err.line, err.column) == (1, 1)


def test_missing_dot_points_at_end_of_input():
    _, errors = parse_program("program test;\nbegin\nend")
    assert errors[0].message == "Expected '.' at the end of the program"
    assert (errors[0].line, errors[0].column) == (3, 4)


def test_missing_begin():
    _, errors = parse_program("program test;\nvar x: integer;\nx := 1;\nend.")
    assert [e.message for e in errors] == ["Expected 'begin' block"]


def test_bad_variable_type():
    _, errors = parse_program("program t;\nvar x: float;\nbegin\nend.")
    assert errors[0].message == 'Expected type for variable'
    assert errors[0].hint == 'Supported types are: integer, real, boolean, char, string.'


def test_missing_semicolon_after_assignment():
    _, errors = parse_program("program t;\nvar x: integer;\nbegin\n  x := 1\nend.")
    assert errors[0].message == 'Expected semicolon at the end of assignment'
    assert (errors[0].line, errors[0].column) == (5, 1)


def test_unclosed_parenthesis():
    _, errors = parse_program("program t;\nbegin\n  writeln((1 + 2);\nend.")
    assert errors[0].message == 'Expected closing parenthesis'


def test_errors_in_separate_statements_are_all_reported():
    source = "program t;\nvar x: integer;\nbegin\n  y;\n  x := ;\n  writeln(x;\n  x := 1;\nend."
    program, errors = parse_program(source)
    messages = [e.message for e in errors]
    assert messages[0] == "Unexpected identifier 'y'"
    assert 'Unexpected token in primary expression' in messages
    assert "Expected ')' after writeln argument" in messages
    assert [e.line for e in errors] == sorted(e.line for e in errors)
    # the well-formed statement after the errors is still parsed
    assert program.main.statements == (AssignStmt('x', IntegerLiteral(1)),)


def test_failed_expression_is_not_built_partially():
    program, errors = parse_program("program t;\nvar x: integer;\nbegin\n  x := 1 + ;\nend.")
    assert len(errors) == 1
    assert program.main.statements == ()


def test_tokens_that_cannot_start_a_statement_are_skipped():
    program, errors = parse_program("program t;\nbegin\n  42 @ ;\n  writeln(1);\nend.")
    assert errors == []
    assert program.main.statements == (PrintStmt(IntegerLiteral(1)),)


def test_parser_error_formatting():
    _, errors = parse_program("program t\nbegin\nend.")
    text = str(errors[0])
    assert text.startswith('[Parser Error] at line 2, column 1: Expected semicolon')
    assert '\n  -> Got "begin" (BEGIN) instead.' in text
    assert text.endswith('\n  Hint: Statements must end with a semicolon.')


@pytest.mark.parametrize('literal', ['9223372036854775808', '9' * 5000, '00099999999999999999999'])
def test_integer_literal_out_of_range(literal):
    program, errors = parse_program(f"program t;\nbegin\n  writeln({literal});\nend.")
    assert errors
    assert errors[0].message == 'Integer literal out of range'
    assert errors[0].line == 3


def test_largest_integer_literal():
    assert parse_expr('9223372036854775807') == IntegerLiteral(9223372036854775807)
    assert parse_expr('000042') == IntegerLiteral(42)
