#!/usr/bin/env python3
"""Demo entry point for prettui."""

import argparse
import logging
import sys

from .errors import PrettuiError, TerminalUnavailableError
from .io import read_input, write_output
from .models import InputConfig, ListConfig, OutputConfig
from .ui import choose_by_number, choose_from_list
from .utils.colors import Color, Fore, Style

HELP_LINE = "Use arrows/PageUp/PageDown to navigate, type digits, Backspace to delete, Enter to confirm, Esc to cancel."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prettui", description="Pick an item from a paginated list.")
    parser.add_argument("-n", "--count", type=int, default=100, help="number of demo items (default: 100)")
    parser.add_argument("--per-row", type=int, default=1, help="items per row (default: 1)")
    parser.add_argument("--rows", type=int, default=10, help="rows per page (default: 10)")
    parser.add_argument("--cell-width", type=int, default=30, help="cell width in columns (default: 30)")
    parser.add_argument("--normal", type=Color.parse, default=Color.DARK_GREY, help="color of normal items")
    parser.add_argument("--highlight", type=Color.parse, default=Color.GREEN, help="color of the selected item")
    parser.add_argument("--prompt-demo", action="store_true", help="also demo the styled input/output helpers")
    parser.add_argument("--log-file", help="write debug logs to this file")
    return parser


def run_prompt_demo() -> None:
    name = read_input(InputConfig(input_text_color=Color.BLUE))
    write_output(OutputConfig(), f"Hello, {name}!")
    write_output(OutputConfig(log_level="DEBUG"), "This is a debug message.")


def main(argv=None) -> int:
    """Main entry point for the prettui demo."""
    args = build_parser().parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    items = [f"Item {i}" for i in range(1, args.count + 1)]
    config = ListConfig(
        items_per_row=args.per_row,
        rows_per_page=args.rows,
        cell_width=args.cell_width,
        normal_fg=args.normal,
        highlight_fg=args.highlight,
    )

    print("Example of using")
    print(HELP_LINE)
    try:
        try:
            idx = choose_from_list(items, config)
        except TerminalUnavailableError:
            # Non-interactive fallback
            idx = choose_by_number(items)

        if idx is not None:
            print(f"You chose: {items[idx]}")
        else:
            print("Selection cancelled.")

        if args.prompt_demo:
            run_prompt_demo()
    except KeyboardInterrupt:
        print()
        return 130
    except EOFError:
        print()
        return 1
    except PrettuiError as e:
        print(Fore.RED + Style.BRIGHT + f"[!] {e}" + Style.RESET_ALL, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
