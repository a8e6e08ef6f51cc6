"""Command-line interface for the lexi scanner."""

from __future__ import annotations

import argparse
import json
import sys

from lexi.errors import Diagnostic, LexiError, format_diagnostic
from lexi.main import read_source, summarize_source, tokenize_file, tokenize_source
from lexi.serialization import tokens_to_json
from lexi.service import capabilities_request


def build_parser() -> argparse.ArgumentParser:
    """Build argparse command tree for lexi CLI."""
    parser = argparse.ArgumentParser(prog="lexi", description="lexi lexical scanner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser("scan", help="Print the token stream of a source")
    scan_parser.add_argument("input", nargs="?", help="Input source file")
    scan_parser.add_argument("--code", help="Inline source string")
    scan_parser.add_argument("--json", action="store_true", help="Print tokens as a JSON array")
    scan_parser.add_argument("--emit-tokens", help="Write token JSON to this path")
    scan_parser.add_argument("--debug", action="store_true", help="Emit debug info to stderr")

    summary_parser = subparsers.add_parser("summary", help="Print token counts per kind as JSON")
    summary_parser.add_argument("input", nargs="?", help="Input source file")
    summary_parser.add_argument("--code", help="Inline source string")

    subparsers.add_parser("capabilities", help="Print service capability metadata")

    return parser


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "scan":
            _check_source_args(args.input, args.code)
            if args.input:
                artifacts = tokenize_file(
                    args.input,
                    debug=args.debug,
                    emit_tokens_path=args.emit_tokens,
                )
            else:
                artifacts = tokenize_source(
                    args.code,
                    filename="<inline>",
                    debug=args.debug,
                    emit_tokens_path=args.emit_tokens,
                )

            if args.json:
                print(tokens_to_json(artifacts.tokens))
            else:
                for token in artifacts.tokens:
                    print(token)
            return 0

        if args.command == "summary":
            _check_source_args(args.input, args.code)
            if args.input:
                payload = summarize_source(read_source(args.input), filename=args.input)
            else:
                payload = summarize_source(args.code, filename="<inline>")
            print(json.dumps(payload, indent=2, sort_keys=True))
            return 0

        if args.command == "capabilities":
            print(json.dumps(capabilities_request(), indent=2, sort_keys=True))
            return 0

        raise argparse.ArgumentTypeError(f"Unsupported command '{args.command}'.")

    except LexiError as err:
        print(format_diagnostic(err.to_diagnostic()), file=sys.stderr)
        return 1
    except argparse.ArgumentTypeError as err:
        diag = Diagnostic(code="CLI001", message=str(err), hint="Run lexi --help for usage.")
        print(format_diagnostic(diag), file=sys.stderr)
        return 2
    except Exception as err:  # pragma: no cover
        diag = Diagnostic(code="CLI999", message=f"Internal error: {err}", hint="Run with --debug")
        print(format_diagnostic(diag), file=sys.stderr)
        return 3


def _check_source_args(input_path: str | None, inline_code: str | None) -> None:
    if input_path and inline_code is not None:
        raise argparse.ArgumentTypeError("Use either input file path or --code, not both.")
    if not input_path and inline_code is None:
        raise argparse.ArgumentTypeError("No source provided. Pass input file path or --code.")


if __name__ == "__main__":
    raise SystemExit(run())
