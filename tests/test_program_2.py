from pathlib import Path

from pastel.interpreter import Interpreter
from pastel.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_integer_arithmetic(capsys):
    source = (EXAMPLES / 'program_2.pas').read_text(encoding='utf-8')
    ast, errors = parse_program(source)
    assert errors == []
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    # precedence, grouping, truncating division and left associativity
    assert out_lines == ['14', '20', '5', '3', '-3', '3']
