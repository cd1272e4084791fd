from pathlib import Path

import pytest

from pastel.errors import DivisionByZero
from pastel.interpreter import Interpreter
from pastel.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_stops_at_runtime_error(capsys):
    """Output printed before the failing statement is kept; nothing after it runs."""
    source = (EXAMPLES / 'program_7.pas').read_text(encoding='utf-8')
    ast, errors = parse_program(source)
    assert errors == []
    interp = Interpreter()
    with pytest.raises(DivisionByZero):
        interp.run(ast)
    out = capsys.readouterr().out
    assert out == 'before\n'
