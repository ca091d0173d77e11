#!/usr/bin/env python3
"""
dupescan CLI — command line interface for duplicate file detection.
Walks a directory, reports duplicate groups and wasted space. Never deletes anything.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
from pathlib import Path
from typing import Dict, Optional, NoReturn
import logging

from dupescan.core.models import (
    DuplicateGroup, RunStats, ScanParams, BucketMode, HashAlgorithmName, DEFAULT_MIN_SIZE)
from dupescan.commands import ScanCommand
from dupescan.report import render_json
from dupescan.utils.convert_utils import ConvertUtils
from dupescan.aliases import (
    BUCKET_ALIASES, BUCKET_CHOICES, BUCKET_HELP_TEXT,
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dupescan",
            description="dupescan — find duplicate files and the disk space they waste",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--dir", "-d",
            default="",
            type=str,
            help="Starting directory ('~' is expanded)"
        )
        parser.add_argument(
            "--minsize",
            default=str(DEFAULT_MIN_SIZE),
            type=str,
            metavar='',
            help="Minimum file size in bytes or human form (e.g. 500KB, 30MiB). "
                 "Only larger files are checked. Default: 30MiB"
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print duplicate groups as JSON to stdout"
        )
        parser.add_argument(
            "--exclude", "-e",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            help="Extra directory names (space separated) to skip, "
                 "in addition to .git, .terraform and node_modules"
        )
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="xxh64",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--bucket",
            choices=BUCKET_CHOICES,
            default="pairwise",
            type=str,
            help=BUCKET_HELP_TEXT
        )
        parser.add_argument(
            "--workers", "-w",
            default=1,
            type=int,
            metavar='',
            help="Number of threads used for hashing. Default: 1"
        )
        parser.add_argument(
            "--iec",
            action="store_true",
            help="Show wasted space in binary units (MiB) instead of SI units (MB)"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress the summary"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and progress"
        )
        return parser

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments. A missing directory prints usage and exits with 1."""
        parser = CLIApplication.build_parser()
        parsed = parser.parse_args(args)
        if not parsed.dir:
            parser.print_help(sys.stderr)
            sys.exit(1)
        return parsed

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        root_path = Path(ConvertUtils.expand_home(args.dir))
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.dir}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.dir}")

        if not ConvertUtils.is_valid_size_format(args.minsize):
            self.error_exit(f"Invalid size format: {args.minsize}")

        if args.workers < 1:
            self.error_exit("--workers must be at least 1")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=args.dir,
                min_size_str=args.minsize,
                extra_excluded=args.exclude,
                bucket_mode=BUCKET_ALIASES.get(args.bucket, BucketMode.PAIRWISE),
                algorithm=ALGORITHM_ALIASES.get(args.algorithm, HashAlgorithmName.XXH64),
                workers=args.workers,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files seen...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> tuple[Dict[str, DuplicateGroup], RunStats]:
        """Execute the scan workflow."""
        command = ScanCommand()
        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except RuntimeError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
        return groups, stats

    def output_summary(self, stats: RunStats, iec: bool = False) -> None:
        """Print the run summary to stderr so JSON on stdout stays clean."""
        if self.quiet:
            return
        formatter = ConvertUtils.bytes_to_iec if iec else ConvertUtils.bytes_to_si
        for line in stats.summary_lines(formatter):
            print(line, file=sys.stderr)

    @staticmethod
    def output_json(groups: Dict[str, DuplicateGroup]) -> None:
        print(render_json(groups))

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=LOG_FORMAT,
            force=True
        )

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(self.verbose)

        self.validate_args(args)
        params = self.create_params(args)

        if self.verbose:
            print(f"Scanning directory: {params.root_dir}", file=sys.stderr)

        groups, stats = self.run_scan(params)

        self.output_summary(stats, iec=args.iec)
        if args.json:
            self.output_json(groups)


def main(argv=None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
