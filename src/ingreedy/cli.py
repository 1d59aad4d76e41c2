"""Command-line entry point: parse ingredient lines and print JSON.

Run with: ingreedy "2 (28 ounce) can crushed tomatoes"
Parse a file: ingreedy --file ingredients.txt
"""

import argparse
import json
import sys
from pathlib import Path

from ingreedy.config import get_settings
from ingreedy.exceptions import ParseError
from ingreedy.logging_config import LoggingContext, configure_logging, get_logger
from ingreedy.parse import MultipartPolicy, ParseOptions, parse

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ingreedy",
        description="Parse recipe ingredient lines into quantities, units and ingredient text",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("input", nargs="?", help="A single ingredient line")
    source.add_argument(
        "--file",
        type=Path,
        help="File with one ingredient line per line; prints a JSON list",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in MultipartPolicy],
        default=None,
        help="How consecutive quantity fragments combine (default: from settings)",
    )
    parser.add_argument(
        "--strip-of",
        action="store_true",
        default=None,
        help='Drop a leading "of" from the ingredient text',
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: from settings)")
    return parser


def _options_from_args(args: argparse.Namespace) -> ParseOptions:
    options = get_settings().parse_options
    updates = {}
    if args.policy is not None:
        updates["multipart_policy"] = MultipartPolicy(args.policy)
    if args.strip_of is not None:
        updates["strip_of_prefix"] = args.strip_of
    return options.model_copy(update=updates)


def _parse_file(path: Path, options: ParseOptions) -> list[dict]:
    results = []
    with path.open(encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            with LoggingContext(source=path.name, line_number=line_number):
                results.append(parse(line, options).to_dict())
    logger.info(f"Parsed {len(results)} ingredient lines from {path}")
    return results


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(log_level=args.log_level or settings.log_level, log_file=settings.log_file)
    options = _options_from_args(args)

    try:
        if args.file is not None:
            output = _parse_file(args.file, options)
        else:
            output = parse(args.input, options).to_dict()
    except ParseError as e:
        logger.error(f"Failed to parse ingredient: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Failed to read {args.file}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
