"""Command-line interface for clex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from clex.errors import ConverterError, LexError

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    output_format: str
    skip_comments: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="clex",
        description="Tokenize C source and print the token stream",
    )
    p.add_argument("input", help="Input source file ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--skip-comments",
        action="store_true",
        default=None,
        help="Skip // and /* */ comments between tokens",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover clex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "clex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.input == "-":
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    skip_comments = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_skip = cfg_lexer.get("skip_comments")
        if isinstance(cfg_skip, bool):
            skip_comments = cfg_skip
    if args.skip_comments is not None:
        skip_comments = args.skip_comments

    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in OUTPUT_FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        skip_comments=skip_comments,
        debug=args.debug,
    )


def read_source(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def lex_file(options: CliOptions) -> str:
    """Read and tokenize the input, returning the rendered token stream."""
    from clex.debug import dump_tokens, format_token, tokens_to_json
    from clex.lexer import lex

    source = read_source(options)
    tokens = lex(source, skip_comments=options.skip_comments)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    if options.output_format == "json":
        return tokens_to_json(tokens)
    return "".join(format_token(t) + "\n" for t in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    filename = str(options.input_file) if options.input_file else "<stdin>"
    try:
        output = lex_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {filename}: {exc}", file=sys.stderr)
        return 2
    except LexError as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1
    except ConverterError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
