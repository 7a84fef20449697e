"""
asminfo Command-Line Interface

Loads a JSON or YAML config, generates the assembly info file and writes it
(or prints it with --dry-run).

Usage:
    asminfo assemblyinfo.yaml
    asminfo assemblyinfo.json --output Properties/AssemblyInfo.vb --language vb
    asminfo assemblyinfo.yaml --dry-run
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from asminfo import __version__
from asminfo.errors import AssemblyInfoError
from asminfo.generator import generate
from asminfo.model import Language
from asminfo.serialization import load_config

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asminfo",
        description="Generate an AssemblyInfo source file (C# or VB.NET) from a config file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  asminfo assemblyinfo.yaml\n"
            "  asminfo assemblyinfo.json -o Properties/AssemblyInfo.vb -l vb\n"
            "  asminfo assemblyinfo.yaml --dry-run\n"
        ),
    )
    parser.add_argument(
        "config",
        help="Path to a .json, .yaml or .yml config file",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file path (overrides outputFile from the config)",
    )
    parser.add_argument(
        "-l", "--language",
        choices=[lang.value for lang in Language],
        default=None,
        help="Target language (overrides language from the config; default: cs)",
    )
    parser.add_argument(
        "--base-dir",
        default=None,
        help="Directory a relative output path is resolved against (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated file to stdout instead of writing it",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 = success, 1 = config or generation error)
    """
    args = create_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="[asminfo] %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("asminfo").setLevel(level)

    try:
        config = load_config(args.config)

        overrides = {}
        if args.output:
            overrides["output_file"] = args.output
        if args.language:
            overrides["language"] = args.language
        if overrides:
            config = dataclasses.replace(config, **overrides)

        output = generate(config)
    except AssemblyInfoError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.dry_run:
        print(output.text)
        return 0

    try:
        written = output.write(args.base_dir)
    except OSError as e:
        print(f"error: cannot write {output.path}: {e}", file=sys.stderr)
        return 1

    logger.info("wrote %s", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
