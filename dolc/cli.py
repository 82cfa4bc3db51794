"""dolc CLI: structural analyzer for the DOL language.

Usage:
    dolc compile <file> [--json] [--compact] [--output <output_path>]
    dolc validate <file>
    dolc format <file> [--output <output_path>]
    dolc version
    dolc serve [--host <host>] [--port <port>]

``<file>`` may be ``-`` to read from stdin.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dolc.api import compile_source, format_source, get_version, initialize, validate_source


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dolc",
        description="dolc: structural analyzer for DOL spirits and functions",
    )
    parser.add_argument("--version", action="version", version=f"dolc {get_version()}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- compile ---
    compile_parser = subparsers.add_parser("compile", help="Analyze a DOL source file")
    compile_parser.add_argument("source_file", type=str, help="Path to DOL file, or '-'")
    compile_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON instead of a report"
    )
    compile_parser.add_argument(
        "--output", "-o", type=str, default=None, help="Write the JSON result to this path"
    )
    compile_parser.add_argument(
        "--compact", action="store_true", help="Emit compact JSON (with --json or --output)"
    )

    # --- validate ---
    validate_parser = subparsers.add_parser("validate", help="Check a DOL file for errors")
    validate_parser.add_argument("source_file", type=str, help="Path to DOL file, or '-'")

    # --- format ---
    format_parser = subparsers.add_parser("format", help="Format a DOL source file")
    format_parser.add_argument("source_file", type=str, help="Path to DOL file, or '-'")
    format_parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output path (default: stdout)"
    )

    # --- version ---
    subparsers.add_parser("version", help="Print the compiler version")

    # --- serve ---
    serve_parser = subparsers.add_parser("serve", help="Serve the compiler over HTTP")
    serve_parser.add_argument("--host", type=str, default=None, help="Server host")
    serve_parser.add_argument("--port", type=int, default=None, help="Server port")

    return parser


def _read_source(source_file: str) -> str | None:
    """Read a source file, or stdin for '-'. Returns None if it cannot be read."""
    if source_file == "-":
        return sys.stdin.read()

    path = Path(source_file)
    if not path.is_file():
        print(f"Error: Source file not found: {path}", file=sys.stderr)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        print(f"Error: Source file is not valid UTF-8: {path}", file=sys.stderr)
        return None


def _source_name(source_file: str) -> str:
    return "<stdin>" if source_file == "-" else Path(source_file).name


def cmd_compile(args: argparse.Namespace) -> int:
    """Analyze a DOL file and print a report or JSON."""
    from dolc.compiler.serializer import serialize_to_json

    source = _read_source(args.source_file)
    if source is None:
        return 1

    result = compile_source(source)

    if args.output:
        json_str = serialize_to_json(result, compact=args.compact)
        Path(args.output).write_text(json_str, encoding="utf-8")
        print(f"Written to: {args.output}")
    elif args.json:
        print(serialize_to_json(result, compact=args.compact))
    else:
        from dolc.report import render_result

        render_result(result, source_name=_source_name(args.source_file))

    return 0 if result.success else 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Print 'valid' or 'invalid' for a DOL file."""
    source = _read_source(args.source_file)
    if source is None:
        return 1

    if validate_source(source):
        print("valid")
        return 0
    print("invalid")
    return 1


def cmd_format(args: argparse.Namespace) -> int:
    """Format a DOL file."""
    source = _read_source(args.source_file)
    if source is None:
        return 1

    formatted = format_source(source)
    if args.output:
        Path(args.output).write_text(formatted, encoding="utf-8")
    else:
        sys.stdout.write(formatted)
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Print the compiler version."""
    print(get_version())
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Serve the compiler over HTTP."""
    from dolc.runtime.serving import start_server

    start_server(host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        initialize()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    dispatch = {
        "compile": cmd_compile,
        "validate": cmd_validate,
        "format": cmd_format,
        "version": cmd_version,
        "serve": cmd_serve,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
