"""Command-line interface for typedef-gen."""

import argparse
import logging
import sys
from pathlib import Path

from typedef_gen.emitter import emit, write_output
from typedef_gen.enumeration import InvalidArity
from typedef_gen.generator import DEFAULT_MAX_ARITY, GENERATORS, generate
from typedef_gen.models import DEFAULT_SOURCE_URL, GeneratorConfig
from typedef_gen.naming import UnsupportedParameterCount
from typedef_gen.targets import TARGETS, UnknownTarget, get_target

logger = logging.getLogger(__name__)

HELP = {
    "partial": "Generate the overload intersection for partial application",
    "complement": "Generate one complement declaration per arity",
    "complement-tests": "Generate type tests for the complement declarations",
}


def setup_logging():
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per generator."""
    parser = argparse.ArgumentParser(
        prog="typedef-gen",
        description="Generate per-arity type declarations for variadic functions",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available generators")

    for kind in GENERATORS:
        sub = subparsers.add_parser(kind, help=HELP[kind])
        sub.add_argument(
            "--max-arity",
            "-n",
            type=int,
            default=DEFAULT_MAX_ARITY[kind],
            help=f"Generate arities below this value (default: {DEFAULT_MAX_ARITY[kind]})",
        )
        sub.add_argument(
            "--target",
            "-t",
            choices=sorted(TARGETS),
            default="flow",
            help="Type system syntax to emit (default: flow)",
        )
        sub.add_argument(
            "--output",
            "-o",
            help="Write to this file instead of stdout",
        )
        sub.add_argument(
            "--output-root",
            type=Path,
            default=Path.cwd(),
            help="Directory relative output paths resolve against (default: cwd)",
        )
        sub.add_argument(
            "--source-url",
            default=DEFAULT_SOURCE_URL,
            help="Project link quoted in the banner comment",
        )
        sub.add_argument(
            "--json",
            action="store_true",
            help="Output the fragments as JSON instead of code",
        )
        sub.add_argument(
            "--no-banner",
            action="store_true",
            help="Omit the begin/end banner comments",
        )

    return parser


def parse_args(args: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    return create_parser().parse_args(args)


def run_generate(parsed: argparse.Namespace) -> int:
    """Run one generator and write its output.

    Args:
        parsed: Parsed arguments for a generator subcommand

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        config = GeneratorConfig(
            max_arity=parsed.max_arity,
            target=get_target(parsed.target),
            source_url=parsed.source_url,
            output_root=parsed.output_root,
        )
        declaration = generate(parsed.command, config)
    except (InvalidArity, UnsupportedParameterCount, UnknownTarget) as e:
        logger.error(f"Generation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    banner = not parsed.no_banner
    if parsed.output is None:
        emit(declaration, config, sys.stdout, banner=banner, as_json=parsed.json)
        return 0

    try:
        path = write_output(
            declaration, config, parsed.output, banner=banner, as_json=parsed.json
        )
    except OSError as e:
        logger.error(f"Could not write {parsed.output}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Generated {len(declaration.fragments)} fragments. Written to: {path}",
        file=sys.stderr,
    )
    return 0


def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for fatal errors)
    """
    setup_logging()

    try:
        parsed = parse_args(args)
    except SystemExit as e:
        return 0 if e.code == 0 else (e.code or 1)

    if parsed.command is None:
        # No command - show help
        create_parser().print_help(sys.stderr)
        return 1

    return run_generate(parsed)


def main():
    """Entry point for the CLI."""
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
