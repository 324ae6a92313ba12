from __future__ import annotations

"""urlsort command-line interface entrypoint."""

import argparse
import os
import sys

from urlsort.adapters.line_sink_fs import FileSystemLineSink, LineSinkError
from urlsort.adapters.line_source_fs import FileSystemLineSource, LineSourceError
from urlsort.core.compare import run_sort
from urlsort.core.config import Config, ConfigError
from urlsort.core.version import get_urlsort_version


DESCRIPTION = (
    "Sorts URLs based on the components of the URL.\n\n"
    "Reads URLs from standard input or the given files (use - for standard\n"
    "input), sorts them and writes the output.\n\n"
    "Sorts by domain (reversed labels), port, scheme, path, query string,\n"
    "then fragment."
)


def _env_path(name: str) -> str | None:
    """Read an optional path from the environment, ignoring blank values."""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value


def _parse_jobs(value: str) -> int:
    try:
        jobs = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid job count: {value}") from exc
    if jobs < 1:
        raise argparse.ArgumentTypeError(f"job count must be >= 1: {value}")
    return jobs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlsort",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input files (- reads standard input)")
    parser.add_argument("-o", "--output-file", default=None, help="Write output to file")
    parser.add_argument(
        "-c",
        "--config",
        default=_env_path("URLSORT_CONFIG"),
        help="Path to a YAML/JSON config file (default: $URLSORT_CONFIG)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=_parse_jobs,
        default=None,
        help="Worker threads used for key extraction",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_urlsort_version()}")
    return parser


def sort_command(args: argparse.Namespace) -> int:
    """Read every input, sort by URL components and write the original lines."""
    config = Config()
    if args.config:
        try:
            config = Config.from_file(args.config)
        except ConfigError as exc:
            print(str(exc), file=sys.stderr)
            return 2

    source = FileSystemLineSource(stdin=sys.stdin.buffer, paths=list(args.files))
    sink = FileSystemLineSink(stdout=sys.stdout.buffer, path=args.output_file)
    jobs = args.jobs or config.jobs or 1
    try:
        run_sort(source, sink, defaults=config.scheme_ports, jobs=jobs)
    except (LineSourceError, LineSinkError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


def main() -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args()
    return sort_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
