"""Factory for constructing the CLI argument parser."""

import argparse

from .tree.expander import DEFAULT_MAX_NODES

DESCRIPTION = """\
dirlayout - generate directory structures from a one-line layout.

Syntax:
  name            a single directory called "name"
  name:N          N directories: "name 1" .. "name N"
  name:x          a lettered range: "name a" .. "name x" (or "A" .. "X")
  a > b           nest b inside every a
  [a, b > c, d]   siblings; each entry may nest further

Examples:
  site:5 > tree:10
      5 "site" directories, each holding 10 "tree" directories
  [src > app:2, docs] > draft
      src/app 1/draft, src/app 2/draft and docs/draft
  chapter:3 > section:c
      chapter 1/section a .. chapter 3/section c
"""


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must not be negative")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="dirlayout",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-l",
        "--layout",
        type=str,
        default="",
        help="Layout string describing the directory structure (e.g., 'site:5 > tree:10')",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=".",
        help="Base path where the directories will be created (default: .)",
    )

    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Show the expanded tree without creating anything",
    )

    parser.add_argument(
        "--tokens",
        dest="show_tokens",
        action="store_true",
        help="Print the token stream of the layout string",
    )

    parser.add_argument(
        "--ast",
        dest="show_ast",
        action="store_true",
        help="Print the parsed layout",
    )

    parser.add_argument(
        "--tree",
        dest="show_tree",
        action="store_true",
        help="Print the expanded directory tree (always on with --dry-run)",
    )

    parser.add_argument(
        "--max-dirs",
        dest="max_dirs",
        type=_non_negative_int,
        default=DEFAULT_MAX_NODES,
        help=f"Refuse layouts expanding to more directories than this, 0 for no limit (default: {DEFAULT_MAX_NODES})",
    )

    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output (also enabled by the NO_COLOR environment variable)",
    )

    return parser
