"""Command-line interface for tabstat."""

import argparse
import logging
import sys
from pathlib import Path

from tabstat import __version__
from tabstat.config import Settings, get_settings
from tabstat.core.errors import TabstatError
from tabstat.core.loader import read_file
from tabstat.demo import create_sample_data
from tabstat.interactive.prompts import ReadLine, Write
from tabstat.interactive.session import AnalysisSession

logger = logging.getLogger(__name__)

USAGE = """Available commands:
  analyze <path>  - analyze a CSV or Excel file
  demo            - generate sample data and analyze it
  help            - show this help
  exit            - quit

Features:
  - CSV/Excel loading
  - Descriptive statistics (mean, median, standard deviation, quartiles)
  - Frequency analysis
  - Charts (bar, pie, histogram, box, dot, Q-Q, stem-and-leaf)
  - t-tests (one-sample, independent-samples, paired-samples)
  - Column/row extraction and sampling"""


def analyze_file(
    path: str | Path,
    settings: Settings,
    read_line: ReadLine = input,
    write: Write = print,
) -> int:
    """Load a file and start an interactive session on it.

    Returns:
        Exit status: 0 on success, 1 if the file could not be loaded
    """
    write(f"Analyzing file: {path}")
    try:
        dataset = read_file(path)
    except (TabstatError, OSError, ValueError) as e:
        logger.error(f"Failed to load {path}: {e}")
        write(f"Error: could not load {path}: {e}")
        return 1

    AnalysisSession(dataset, settings, read_line, write).run()
    return 0


def run_demo(
    settings: Settings,
    read_line: ReadLine = input,
    write: Write = print,
) -> int:
    """Generate a sample CSV and analyze it."""
    write("=== tabstat demo ===")
    path = create_sample_data(settings.sample_dir)
    status = analyze_file(path, settings, read_line, write)
    write(f"\nSample data: {path}")
    write(f"Charts, subsets and samples: {settings.result_dir}/")
    return status


def run_shell(
    settings: Settings,
    read_line: ReadLine = input,
    write: Write = print,
) -> int:
    """Read commands until ``exit``, ``quit`` or end of input."""
    write("tabstat: interactive data analysis")
    write(USAGE)

    while True:
        try:
            line = read_line("\nCommand (help, analyze, demo, exit): ").strip()
        except EOFError:
            break
        if not line:
            continue

        command, _, argument = line.partition(" ")
        argument = argument.strip()

        if command == "analyze":
            if not argument:
                write("Usage: analyze <path>")
                continue
            analyze_file(argument, settings, read_line, write)
        elif command == "demo":
            run_demo(settings, read_line, write)
        elif command == "help":
            write(USAGE)
        elif command in ("exit", "quit"):
            break
        else:
            write(f"Unknown command: {command}")
            write("Available commands: help, analyze, demo, exit")

    write("Goodbye!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tabstat",
        description="Interactive descriptive statistics and t-tests for CSV and Excel data",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser("analyze", help="Analyze a CSV or Excel file")
    analyze.add_argument("file", help="Path to a .csv, .xlsx or .xlsm file")
    subparsers.add_parser("demo", help="Generate sample data and analyze it")

    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "analyze":
        return analyze_file(args.file, settings)
    if args.command == "demo":
        return run_demo(settings)
    return run_shell(settings)


if __name__ == "__main__":
    sys.exit(main())
