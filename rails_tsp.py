#!/usr/bin/env python3
"""
Rails schema.rb → TypeSpec CLI

Reads the nearest Rails db/schema.rb (plus enums declared in
app/models) and writes a TypeSpec document describing every table.
"""
import argparse
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from generator.command import generate_rails_tsp
from generator.config import GeneratorConfig
from generator.exceptions import GeneratorError
from generator.logging import ConsoleReporter, GeneratorLogger

console = Console()
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rails-tsp",
        description="Generate a TypeSpec document from a Rails db/schema.rb",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --out api/rails.tsp
  %(prog)s --force
  %(prog)s --append
        """
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the output file if it exists"
    )
    mode.add_argument(
        "--append",
        action="store_true",
        help="Append models missing from the existing output file"
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output file, relative to --cwd (default: rails.tsp)"
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Directory to search from (default: current directory)"
    )
    parser.add_argument(
        "--no-enums",
        action="store_true",
        help="Do not read enums from app/models"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and error traces"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = GeneratorConfig()
        if args.no_enums:
            config.include_enums = False
        if args.debug:
            config.log_level = "DEBUG"

        GeneratorLogger.configure(level=config.log_level, console=error_console)

        generate_rails_tsp(
            cwd=args.cwd or os.getcwd(),
            force=args.force,
            append=args.append,
            out=args.out,
            config=config,
            reporter=ConsoleReporter(console),
        )
        return 0
    except (GeneratorError, OSError) as e:
        error_console.print(f"[red]{escape(str(e))}[/red]")
        if args.debug:
            details = e.to_dict() if isinstance(e, GeneratorError) else {
                'error_type': type(e).__name__,
                'message': str(e),
            }
            GeneratorLogger.get_logger().error("Generation failed", details, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
