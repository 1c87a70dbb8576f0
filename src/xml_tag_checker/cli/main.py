"""Main CLI entry point for the xml-tag-checker command-line tool.

Provides the ``check`` command, which validates tag nesting in one or more
files, and the ``benchmark`` command, which times the matcher and its
containers.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from xml_tag_checker import __version__
from xml_tag_checker.api import check_file
from xml_tag_checker.matching.benchmarks import MatcherBenchmark
from xml_tag_checker.shared import (
    CheckerConfig,
    ConfigError,
    ValidationReport,
    configure_logging,
    get_logger,
)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-tag-checker",
        description="Report mismatched, unclosed and stray tags in markup files"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check tag nesting in files",
        epilog=(
            "Exit status is 0 whether or not the documents are well-formed, "
            "and 1 if any file could not be read or the configuration is invalid."
        ),
    )
    check_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files to check"
    )
    check_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        help="Output format (default: text)"
    )
    check_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path (JSON)"
    )
    check_parser.add_argument(
        "--encoding", "-e",
        help="File encoding (default: utf-8)"
    )
    check_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Replace undecodable bytes instead of failing"
    )

    # Benchmark command
    benchmark_parser = subparsers.add_parser(
        "benchmark", help="Benchmark the matcher and its containers"
    )
    benchmark_parser.add_argument(
        "--size", "-s",
        type=int,
        default=1000,
        help="Synthetic document size (default: 1000)"
    )
    benchmark_parser.add_argument(
        "--iterations", "-n",
        type=int,
        default=5,
        help="Timed runs per case (default: 5)"
    )
    benchmark_parser.add_argument(
        "--no-containers",
        action="store_true",
        help="Only benchmark the matcher"
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> CheckerConfig:
    """Build the checker configuration from a config file and command-line overrides.

    Raises:
        ConfigError: If the config file is unreadable or invalid
    """
    config = CheckerConfig.default()
    if args.config:
        config = CheckerConfig.from_file(args.config)

    overrides: Dict[str, Any] = {}
    if args.format:
        overrides["output_format"] = args.format
    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.lenient:
        overrides["decode_errors"] = "replace"
    if args.verbose:
        overrides["logging_level"] = "DEBUG"
    elif args.quiet:
        overrides["logging_level"] = "ERROR"

    return config.override(**overrides) if overrides else config


def format_reports(
    reports: List[ValidationReport],
    failures: Dict[str, str],
    format_type: str
) -> str:
    """Format check results for output.

    Args:
        reports: Reports for files that were read successfully
        failures: Error messages keyed by path for files that could not be read
        format_type: ``"text"`` or ``"json"``
    """
    if format_type == "json":
        entries: List[Dict[str, Any]] = [report.to_dict() for report in reports]
        entries.extend({"source": path, "error": error} for path, error in failures.items())
        return json.dumps(entries, indent=2)

    if len(reports) == 1:
        return reports[0].render()

    blocks = [f"==> {report.source} <==\n{report.render()}" for report in reports]
    return "\n\n".join(blocks)


def cmd_check(args: argparse.Namespace, config: CheckerConfig) -> int:
    """Handle check command.

    The exit status does not depend on whether documents are well-formed;
    it is 1 only when a file could not be read.
    """
    logger = get_logger(__name__, config.correlation_id, "cli")
    reports: List[ValidationReport] = []
    failures: Dict[str, str] = {}

    for path in args.paths:
        try:
            reports.append(check_file(path, config))
        except (OSError, UnicodeDecodeError) as e:
            failures[str(path)] = str(e)
            print(f"Error: {e}", file=sys.stderr)
            logger.debug("File skipped", extra={"path": str(path)})

    if reports or config.output_format == "json":
        print(format_reports(reports, failures, config.output_format))

    return 1 if failures else 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    """Handle benchmark command."""
    try:
        benchmark = MatcherBenchmark(
            document_size=args.size,
            benchmark_runs=args.iterations,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    suite = benchmark.run_benchmark(include_containers=not args.no_containers)
    print(json.dumps(suite.generate_report(), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "check":
            try:
                config = load_config(args)
            except ConfigError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            configure_logging(config.logging_level)
            return cmd_check(args, config)
        if args.command == "benchmark":
            configure_logging("DEBUG" if args.verbose else "ERROR" if args.quiet else "WARNING")
            return cmd_benchmark(args)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
