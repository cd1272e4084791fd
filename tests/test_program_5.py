from pathlib import Path

from pastel.interpreter import Interpreter
from pastel.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_default_values(capsys):
    source = (EXAMPLES / 'program_5.pas').read_text(encoding='utf-8')
    ast, errors = parse_program(source)
    assert errors == []
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['0', '0', 'false', '[ ]', '[]']
