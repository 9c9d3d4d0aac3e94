"""CLI entry point for the Pascal subset interpreter.

Usage:
    python -m tinypas [-v|-vv|-vvv] [--show-env] <program_file>
    python -m tinypas [-v...] --emit-ast <program_file>
    python -m tinypas [-v...] --ast <ast_json_file>
    python -m tinypas -e '<expression>'

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug records go (default: debug.txt)
  --emit-ast    Parse the given program file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  -e, --expr    Evaluate a single expression
  --show-env    Print the final variable values after a run

Debug information is written to the debug file when verbosity is greater
than zero. A run prints `Success!` when the program yields no value and
`Program terminated with value: <value>` otherwise; errors go to stderr
and the exit status is 1.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .ast_json import ast_to_obj, ast_from_obj
from .errors import InterpretError, NestingTooDeep
from .interpreter import Interpreter
from .parser import parse_program
from .types import Nil

package_logger = logging.getLogger('tinypas')


def _read(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _fail(error: InterpretError) -> None:
    print(f"Error: {error}", file=sys.stderr)
    if error.token is not None:
        print(f"Offending token: {error.token!r}", file=sys.stderr)
    sys.exit(1)


def _report(result, interpreter: Interpreter, show_env: bool) -> None:
    if isinstance(result, Nil):
        print('Success!')
    else:
        print(f"Program terminated with value: {result}")
    if show_env and interpreter.environment is not None:
        for name, value in interpreter.environment.items():
            print(f"{name} = {value}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Pascal subset interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='file receiving debug output')
    parser.add_argument('--show-env', action='store_true', help='print variable values after the run')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    group.add_argument('-e', '--expr', metavar='EXPRESSION', help='evaluate a single expression')
    parser.add_argument('program', nargs='?', help='program file (.pas) to execute')
    args = parser.parse_args(argv)

    handler = None
    if args.v > 0:
        handler = logging.FileHandler(args.debug_file, mode='w', encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)
    try:
        _dispatch(parser, args)
    finally:
        if handler is not None:
            package_logger.removeHandler(handler)
            handler.close()


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    interpreter = Interpreter(debug_level=args.v)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = _read(program_file)
        try:
            ast_program = parse_program(source)
        except InterpretError as e:
            _fail(e)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        try:
            text = json.dumps(ast_to_obj(ast_program), ensure_ascii=False, indent=2)
        except RecursionError:
            _fail(NestingTooDeep('parse'))
        with open(out_path, 'w', encoding='utf-8') as out:
            out.write(text)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        source = _read(Path(args.ast))
        try:
            result = interpreter.run(ast_from_obj(json.loads(source)))
        except RecursionError:
            _fail(NestingTooDeep('parse'))
        except InterpretError as e:
            _fail(e)
        _report(result, interpreter, args.show_env)
        return

    # Expression mode
    if args.expr is not None:
        try:
            result = interpreter.calculate(args.expr)
        except InterpretError as e:
            _fail(e)
        print(result)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast/--expr')
    source = _read(Path(args.program))
    try:
        result = interpreter.interpret(source)
    except InterpretError as e:
        _fail(e)
    _report(result, interpreter, args.show_env)


if __name__ == '__main__':
    main()
