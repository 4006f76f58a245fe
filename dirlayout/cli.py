"""Command-line interface for dirlayout."""

import argparse
import os
import sys
from typing import Optional

from .cli_builder import build_arg_parser
from .formatters.output import OutputFormatter
from .parser.errors import LayoutSyntaxError
from .parser.layout_parser import parse
from .parser.lexer import tokenize
from .tree.expander import ExpansionError, expand
from .tree.materializer import MaterializationError, materialize


class CLI:
    """Command-line interface for dirlayout."""

    def __init__(self):
        self.parser = build_arg_parser()

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code
        """
        args = self.parser.parse_args(argv)
        self._apply_environment_defaults(args)
        output = OutputFormatter(no_color=args.no_color)
        symbols = output.symbols

        layout = args.layout.strip()
        if not layout:
            output.print_error(
                "Error:", "No layout string provided. Use the --layout flag to specify a layout."
            )
            return 1

        max_nodes = args.max_dirs or None

        try:
            if args.show_tokens:
                output.print_heading(symbols.Clipboard, "Tokens:")
                output.print(output.layout.format_tokens(tokenize(layout, keep_whitespace=True)))

            expression = parse(layout)
            if args.show_ast:
                output.print_heading(symbols.Gear, "Parsed layout:")
                output.print(output.layout.format_ast(expression))

            tree = expand(expression, max_nodes=max_nodes)
            if args.show_tree or args.dry_run:
                output.print_heading(symbols.Tree, "Directory tree:")
                output.print(output.layout.format_directory_tree(tree, args.output))

            if tree.count() == 0:
                output.print_warning("Layout expands to no directories")

            result = materialize(tree, args.output, dry_run=args.dry_run)

        except LayoutSyntaxError as e:
            output.print_error("Syntax error:", str(e))
            return 1
        except ExpansionError as e:
            output.print_error("Expansion error:", str(e))
            return 1
        except MaterializationError as e:
            output.print_error("Filesystem error:", str(e))
            return 1

        if args.dry_run:
            output.print(f"{symbols.Info} Dry run - no directories created")
        else:
            output.print_success("Directory layout created successfully!")
        output.print(output.layout.format_summary(result))
        return 0

    def _apply_environment_defaults(self, args: argparse.Namespace) -> None:
        """Apply defaults taken from the environment."""
        if os.environ.get("NO_COLOR") and not args.no_color:
            args.no_color = True


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
