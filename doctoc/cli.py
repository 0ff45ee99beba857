"""CLI entrypoint for doctoc."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import CONFIG_FILENAME, TocOptions, load_config, validate_max_level
from .errors import ConfigError, InvalidConfigurationError
from .logging import configure_logging
from .platforms import DEFAULT_PLATFORM, Platform
from .runner import TocRunner


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doctoc",
        description="Generate tables of contents for Markdown files inside local git repositories.",
        epilog=f"Defaults to '{DEFAULT_PLATFORM.value}' anchors.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="path",
        help="A directory (e.g. .) or a file (e.g. README.md).",
    )

    platforms = parser.add_mutually_exclusive_group()
    for platform in Platform:
        platforms.add_argument(
            f"--{platform.flag}",
            dest="platform",
            action="store_const",
            const=platform,
            default=None,
            help=f"Generate anchors compatible with {platform.value}.",
        )

    titles = parser.add_mutually_exclusive_group()
    titles.add_argument("-t", "--title", default=None, help="Use a custom TOC title.")
    titles.add_argument(
        "-T",
        "--notitle",
        action="store_true",
        default=None,
        help="Omit the TOC title.",
    )

    parser.add_argument(
        "-m",
        "--maxlevel",
        default=None,
        help="Limit the depth of headings included in the TOC.",
    )
    parser.add_argument(
        "--entryprefix",
        default=None,
        help="Character used in front of each entry (defaults to '-').",
    )
    parser.add_argument(
        "-s",
        "--stdout",
        action="store_true",
        default=None,
        help="Print the generated TOCs instead of updating files.",
    )
    parser.add_argument(
        "--main",
        default=None,
        metavar="FILE",
        help="Collect the headers of all paths into one TOC written to FILE.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Path to a config file (defaults to ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


def _resolve_options(args: argparse.Namespace) -> TocOptions:
    options = load_config(args.config if args.config is not None else Path.cwd())
    if args.platform is not None:
        options = replace(options, platform=args.platform)
    if args.maxlevel is not None:
        options = replace(options, max_header_level=validate_max_level(args.maxlevel))
    if args.title is not None:
        options = replace(options, title=args.title, notitle=False)
    if args.notitle:
        options = replace(options, title=None, notitle=True)
    if args.entryprefix is not None:
        options = replace(options, entry_prefix=args.entryprefix)
    if args.stdout:
        options = replace(options, stdout=True)
    return options


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for doctoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    try:
        options = _resolve_options(args)
    except InvalidConfigurationError as exc:
        parser.exit(2, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(2, f"doctoc: {exc}\n")

    report = TocRunner(options).run(args.paths, main=args.main)

    for _, toc in report.tocs:
        print(toc)
    if options.stdout:
        for path in report.changed:
            print(f'==================\n\n"{path}" should be updated')

    if report.failures:
        parser.exit(
            1,
            f"doctoc failed for {len(report.failures)} file(s). Run with --verbose for more details.\n",
        )
    print("\nEverything is OK.")


if __name__ == "__main__":
    main(sys.argv[1:])
