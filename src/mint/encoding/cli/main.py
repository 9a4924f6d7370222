"""Command line interface for encoding and decoding Sqids."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from ..domain.models import SqidsOptions
from ..manager import Mint, SqidConductor
from ..parser.config_loader import load_options
from ..utils.constants import SCHEMA_JSON_PATH
from ..utils.errors import MintError
from ..utils.logging import configure_logger


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", "-c", type=Path, help="Path to a JSON configuration file")
    parser.add_argument(
        "--schema",
        "-sc",
        type=Path,
        default=SCHEMA_JSON_PATH,
        help="Path to the configuration JSON schema (default: bundled schema.json)",
    )
    parser.add_argument("--alphabet", "-a", help="Alphabet to encode with (overrides the config file)")
    parser.add_argument(
        "--min-length",
        "-ml",
        type=int,
        help="Minimum length of generated ids, 0-255 (overrides the config file)",
    )
    blocklist = parser.add_mutually_exclusive_group()
    blocklist.add_argument(
        "--blocklist-file",
        "-bf",
        type=Path,
        help="File with one blocked word per line (replaces the default word list)",
    )
    blocklist.add_argument(
        "--no-blocklist",
        "-nb",
        action="store_true",
        help="Disable blocklist filtering entirely",
    )
    parser.add_argument("--log-file", "-lf", type=Path, help="Also write log output to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-console-log", "-nl", action="store_true", help="Disable console logging")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Encode integers into short ids and decode them back")
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Encode one or more non-negative integers")
    encode.add_argument("numbers", type=int, nargs="+", help="Integers to encode, in order")
    _add_common_arguments(encode)

    decode = commands.add_parser("decode", help="Decode an id back into its integers")
    decode.add_argument("value", help="Id to decode")
    _add_common_arguments(decode)

    validate = commands.add_parser("validate", help="Check whether an id is a canonical encoding")
    validate.add_argument("value", help="Id to check")
    _add_common_arguments(validate)

    generate = commands.add_parser("generate", help="Generate time-based ids")
    generate.add_argument("--count", "-n", type=int, default=1, help="Number of ids to generate (default: 1)")
    _add_common_arguments(generate)

    return parser


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _read_blocklist_file(path: Path) -> tuple[str, ...]:
    if not path.exists():
        raise SystemExit(f"--blocklist-file path not found: {path}")
    lines = path.read_text(encoding="utf-8").splitlines()
    return tuple(line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#"))


def _resolve_options(args: argparse.Namespace) -> SqidsOptions:
    options = load_options(args.config, args.schema) if args.config is not None else SqidsOptions()
    if args.alphabet is not None:
        options = options.with_alphabet(args.alphabet)
    if args.min_length is not None:
        options = options.with_min_length(args.min_length)
    if args.no_blocklist:
        options = options.with_blocklist(())
    elif args.blocklist_file is not None:
        options = options.with_blocklist(_read_blocklist_file(args.blocklist_file))
    return options


def _run(args: argparse.Namespace, conductor: SqidConductor) -> int:
    if args.command == "encode":
        print(conductor.encode(args.numbers))
        return 0
    if args.command == "decode":
        numbers = conductor.decode(args.value)
        if not numbers:
            return 1
        print(" ".join(str(number) for number in numbers))
        return 0
    if args.command == "validate":
        valid = conductor.is_valid(args.value)
        print("valid" if valid else "invalid")
        return 0 if valid else 1
    if args.count < 1:
        raise SystemExit("--count must be >= 1")
    for _ in range(args.count):
        print(conductor.generate())
    return 0


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logger(
        args.log_file,
        console=not args.no_console_log,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    try:
        options = _resolve_options(args)
        conductor = Mint(options).sqid()
        return _run(args, conductor)
    except MintError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    raise SystemExit(main())
