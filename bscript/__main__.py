"""CLI entry point for the bscript interpreter.

Usage:
    python -m bscript [-v|-vv|-vvv] [program_file]
    python -m bscript [-v...] --emit-tokens <program_file>
    python -m bscript [-v...] --tokens <tokens_json_file>

Options:
  -v              Increase debug verbosity (can be repeated)
  --emit-tokens   Tokenize the given .bs file and write a token JSON file
  --tokens        Execute a previously emitted token JSON file

The program file defaults to `index.bs` in the current directory. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .errors import BScriptError
from .interpreter import Interpreter
from .lexer import tokenize
from .token_json import tokens_to_obj, tokens_from_obj

DEFAULT_PROGRAM = 'index.bs'


def read_source(program_file: Path) -> str:
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def execute(tokens, debug_level: int) -> None:
    interpreter = Interpreter(tokens, debug_level=debug_level)
    try:
        interpreter.run()
    except BScriptError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='bscript', description="bscript language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-tokens', metavar='BS_FILE', help='emit token JSON for the given .bs file')
    group.add_argument('--tokens', metavar='TOKENS_JSON_FILE', help='execute tokens from a JSON file')
    parser.add_argument('program', nargs='?', help=f'bscript program file to execute (default: {DEFAULT_PROGRAM})')
    args = parser.parse_args(argv)

    # Emit tokens mode
    if args.emit_tokens:
        program_file = Path(args.emit_tokens)
        source = read_source(program_file)
        try:
            tokens = tokenize(source)
        except BScriptError as e:
            print(f"Runtime error: {e}", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.tokens.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(tokens_to_obj(tokens), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from token JSON
    if args.tokens:
        tokens_path = Path(args.tokens)
        if not tokens_path.exists():
            print(f"Error: file {tokens_path} not found", file=sys.stderr)
            sys.exit(1)
        with open(tokens_path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                print(f"Error: {tokens_path} is not valid JSON: {e}", file=sys.stderr)
                sys.exit(1)
        try:
            tokens = tokens_from_obj(data)
        except BScriptError as e:
            print(f"Runtime error: {e}", file=sys.stderr)
            sys.exit(1)
        execute(tokens, args.v)
        return

    # Default: execute source file
    program_file = Path(args.program or DEFAULT_PROGRAM)
    source = read_source(program_file)
    try:
        tokens = tokenize(source)
    except BScriptError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    execute(tokens, args.v)


if __name__ == '__main__':
    main()
