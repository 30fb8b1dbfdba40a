"""
Command-line interface for Cognitive Complexity analysis.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from cogcomplexity import __version__
from cogcomplexity.core.config import CONFIG_FILE_NAMES, Config, create_default_config, find_config
from cogcomplexity.core.engine import AnalysisEngine
from cogcomplexity.reporting import containers_over, format_json, format_text


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cogcomplexity",
        description="Cognitive Complexity scores for TypeScript and JavaScript sources.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cogcomplexity analyze ./src                  # Score a directory
  cogcomplexity analyze app.ts --format json   # Wire-format JSON
  cogcomplexity analyze . --fail-above 15      # Exit 1 if any container scores > 15
  cogcomplexity serve ./src --port 5555        # Serve results at /json
  cogcomplexity init                           # Create config file
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Score files")
    _add_common_arguments(analyze_parser)
    analyze_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (overrides config)",
    )
    analyze_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    analyze_parser.add_argument(
        "--fail-above",
        type=int,
        help="Exit with status 1 if any container scores above this value",
    )
    analyze_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    serve_parser = subparsers.add_parser("serve", help="Serve results as JSON over HTTP")
    _add_common_arguments(serve_parser)
    serve_parser.add_argument("--host", help="Bind address (overrides config)")
    serve_parser.add_argument("--port", type=int, help="Port (overrides config)")

    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "target",
        nargs="?",
        default=".",
        help="File or directory to analyze (default: current directory)",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of parallel workers",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging",
    )


def load_config(args: argparse.Namespace) -> Config:
    config_path = args.config or find_config(args.target)
    config = Config.load(config_path)
    if args.jobs is not None:
        config = config.with_overrides({"scan": {"max_workers": args.jobs}})
    return config


def cmd_analyze(args: argparse.Namespace) -> int:
    """Execute the analyze command."""
    config = load_config(args)
    report = AnalysisEngine(config).analyze(args.target)

    fmt = args.format or config.reporting().get("format", "text")
    if fmt == "json":
        output = format_json(report.files)
    else:
        use_color = not args.no_color and not args.output and sys.stdout.isatty()
        output = format_text(report.files, report.errors, use_color=use_color)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        if fmt == "text":
            print(f"Results written to {args.output}")
    else:
        print(output, end="")

    if report.errors:
        for error in report.errors:
            print(error, file=sys.stderr)
        return 2

    threshold = args.fail_above if args.fail_above is not None else config.fail_above()
    if threshold is not None and containers_over(report.files, threshold):
        return 1
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Execute the serve command."""
    from cogcomplexity.server import run_server

    config = load_config(args)
    report = AnalysisEngine(config).analyze(args.target)
    for error in report.errors:
        print(error, file=sys.stderr)

    server = config.server()
    run_server(
        report.files,
        host=args.host if args.host is not None else server.get("host", "127.0.0.1"),
        port=args.port if args.port is not None else int(server.get("port", 5555)),
    )
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    config_file = CONFIG_FILE_NAMES[0]

    if os.path.exists(config_file) and not args.force:
        print(f"Configuration file {config_file} already exists.")
        print("Use --force to overwrite.")
        return 1

    with open(config_file, "w", encoding="utf-8") as f:
        f.write(create_default_config())

    print(f"Created configuration file: {config_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    try:
        if args.command == "analyze":
            return cmd_analyze(args)
        elif args.command == "serve":
            return cmd_serve(args)
        elif args.command == "init":
            return cmd_init(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nAnalysis interrupted.")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
