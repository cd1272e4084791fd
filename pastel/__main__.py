"""CLI entry point for the Pastel interpreter.

Usage:
    python -m pastel [-v|-vv|-vvv] <program_file>
    python -m pastel [-v...] --emit-ast <program_file>
    python -m pastel [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .pas file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. A program that fails to parse is never
executed; its diagnostics are printed instead.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast import Program
from .ast_json import dump_program, load_program
from .errors import PastelError
from .interpreter import Interpreter
from .parser import parse_program


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_or_report(source: str) -> Program:
    program, errors = parse_program(source)
    if errors or program is None:
        print("Parsing errors encountered:")
        for err in errors:
            print(str(err))
        sys.exit(1)
    return program


def execute(program: Program, debug_level: int) -> None:
    interpreter = Interpreter(debug_level=debug_level)
    try:
        interpreter.run(program)
    except PastelError as e:
        print("Runtime error encountered:")
        print(str(e))
        sys.exit(1)
    print("Program executed successfully.")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog='pastel', description="Pastel language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PASCAL_FILE', help='emit AST JSON for the given source file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Pastel program file to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        program = parse_or_report(read_source(program_file))
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(dump_program(program), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        source = read_source(ast_path)
        try:
            program = load_program(json.loads(source))
        except (KeyError, TypeError, ValueError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
        execute(program, args.v)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast')
    program = parse_or_report(read_source(Path(args.program)))
    execute(program, args.v)


if __name__ == '__main__':
    main()
