# SPDX-License-Identifier: MIT
"""Command-line interface for encoding, decoding and key management."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Callable, Sequence

import logfire

from .alphabet import resolve_alphabet
from .encoder import generate_permutation
from .error_handler import LoggingErrorHandler
from .errors import SchrottIdError
from .loader import load_vectors, write_vectors
from .monitoring import init_logfire, level_from_verbosity
from .settings import Settings, load_settings


def _print_version() -> None:
    """Print the installed package version."""
    try:
        pkg_version = version("schrottid")
    except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
        pkg_version = "unknown"
    print(f"schrottid {pkg_version}")


def _cmd_encode(args: argparse.Namespace, settings: Settings) -> int:
    """Print the identifier for each value."""
    encoder = settings.encoder()
    for encoded in encoder.encode_many(args.values):
        print(encoded)
    return 0


def _cmd_decode(args: argparse.Namespace, settings: Settings) -> int:
    """Print the integer for each identifier."""
    encoder = settings.encoder()
    for decoded in encoder.decode_many(args.ids):
        print(decoded)
    return 0


def _cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    """Print a fresh permutation key for the configured alphabet."""
    print(generate_permutation(settings.alphabet))
    return 0


def _cmd_vectors(args: argparse.Namespace, settings: Settings) -> int:
    """Write a conformance vector file."""
    encoder = settings.encoder()
    write_vectors(encoder, args.output, args.count)
    logfire.info("Wrote conformance vectors", path=str(args.output), count=args.count)
    return 0


def _cmd_verify(args: argparse.Namespace, settings: Settings) -> int:
    """Check a vector file against the configured encoder."""
    encoder = settings.encoder()
    expected = load_vectors(args.file)
    if not expected:
        print(f"No vectors found in {args.file}", file=sys.stderr)
        logfire.warning("Empty vector file", path=str(args.file))
        return 1
    for value, identifier in enumerate(expected):
        actual = encoder.encode(value)
        if actual != identifier:
            print(
                f"Mismatch for {value}: expected {identifier!r}, got {actual!r}",
                file=sys.stderr,
            )
            logfire.warning("Vector mismatch", value=value)
            return 1
    print(f"{len(expected)} vectors match")
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add options shared by every subcommand."""
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file (default config/app.yaml)",
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        default=None,
        help=(
            "Alphabet symbols or one of base64, base58, base36, base32. "
            "Can also be set via the SCHROTTID_ALPHABET env variable."
        ),
    )
    parser.add_argument(
        "--permutation",
        type=str,
        default=None,
        help=(
            "Base64 permutation key. Prefer the SCHROTTID_PERMUTATION env "
            "variable so the key stays out of shell history."
        ),
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=None,
        help="Minimum identifier length",
    )
    parser.add_argument(
        "--round-formula",
        choices=["length_plus_alphabet", "length_times_three"],
        default=None,
        help="Round-count formula; length_times_three reads legacy identifiers",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease logging verbosity (repeatable)",
    )
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        prog="schrottid",
        description=(
            "Turn integers into short scrambled identifiers and back. "
            "Decoding needs the same alphabet, permutation and minimum length."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the schrottid version and exit.",
    )
    common = _add_common_args(argparse.ArgumentParser(add_help=False))
    subparsers = parser.add_subparsers(dest="command")

    encode = subparsers.add_parser(
        "encode", parents=[common], help="Encode integers to identifiers"
    )
    encode.add_argument("values", nargs="+", type=int, help="Integers to encode")
    encode.set_defaults(func=_cmd_encode)

    decode = subparsers.add_parser(
        "decode", parents=[common], help="Decode identifiers to integers"
    )
    decode.add_argument("ids", nargs="+", help="Identifiers to decode")
    decode.set_defaults(func=_cmd_decode)

    generate = subparsers.add_parser(
        "generate", parents=[common], help="Generate a permutation key"
    )
    generate.set_defaults(func=_cmd_generate)

    vectors = subparsers.add_parser(
        "vectors", parents=[common], help="Write a conformance vector file"
    )
    vectors.add_argument("output", type=Path, help="File to write")
    vectors.add_argument(
        "--count", type=int, default=10000, help="Number of values to encode"
    )
    vectors.set_defaults(func=_cmd_vectors)

    verify = subparsers.add_parser(
        "verify", parents=[common], help="Check a conformance vector file"
    )
    verify.add_argument("file", type=Path, help="Vector file to check")
    verify.set_defaults(func=_cmd_verify)
    return parser


def _apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> None:
    """Override settings fields based on CLI arguments."""
    arg_mapping: dict[str, tuple[str, Callable[[Any], Any] | None]] = {
        "alphabet": ("alphabet", resolve_alphabet),
        "permutation": ("permutation", None),
        "min_length": ("min_length", None),
        "round_formula": ("round_formula", None),
    }
    for arg_name, (attr, converter) in arg_mapping.items():
        value = getattr(args, arg_name, None)
        if value is not None:  # branch: override settings when flag provided
            setattr(settings, attr, converter(value) if converter else value)


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire based on verbosity flags."""
    level = level_from_verbosity(settings.log_level, args.verbose, args.quiet)
    init_logfire(settings.logfire_token, level)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        _print_version()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(1)

    handler = LoggingErrorHandler()
    try:
        settings = load_settings(args.config)
        _apply_args_to_settings(args, settings)
        _configure_logging(args, settings)
        code = args.func(args, settings)
    except (SchrottIdError, RuntimeError, FileNotFoundError) as exc:
        handler.handle(f"schrottid {args.command} failed", exc)
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    finally:
        logfire.force_flush()
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
