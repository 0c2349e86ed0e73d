#!/usr/bin/env python3
"""
Recipe Book Command Line
========================

Loads a recipe CSV into a RecipeBook and runs one command against it.
Nothing is written back to the CSV.

Usage:
    python recipe_book_cli.py recipes.csv show
    python recipe_book_cli.py recipes.csv list
    python recipe_book_cli.py recipes.csv find "Beef Wellington"
    python recipe_book_cli.py recipes.csv mastery "Beef Wellington"
    python recipe_book_cli.py recipes.csv remove "Pancakes"
    python recipe_book_cli.py recipes.csv balance
    python recipe_book_cli.py recipes.csv stats

Exit codes: 0 success, 1 recipe/file not found or bad input, 2 usage error.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from recipe_book import RecipeBook, load_book
from tools.book_ui import ui
from tools.logging_utils import get_logger, set_console_level
from utils.recipe_csv import MalformedRecipeRow, RecipeBookError

logger = get_logger(__name__)

COMMANDS_WITH_NAME = ("find", "mastery", "remove")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query a recipe book loaded from CSV.")
    parser.add_argument("csv_file", help="Recipe CSV (name,difficulty_level,description,mastered)")
    parser.add_argument("--strict", action="store_true", help="Fail on the first malformed row instead of skipping it")
    parser.add_argument("--balance", action="store_true", help="Rebalance the tree right after loading")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on the console")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Print every recipe in pre-order")
    sub.add_parser("list", help="Table of recipes sorted by name")
    sub.add_parser("stats", help="Size, height and balance of the tree")
    sub.add_parser("balance", help="Rebalance, then print pre-order and stats")
    for command in COMMANDS_WITH_NAME:
        cmd = sub.add_parser(command, help=f"{command.capitalize()} a recipe by name")
        cmd.add_argument("name", help="Recipe name (exact, case-sensitive)")
    return parser


def _show_stats(book: RecipeBook, title: str = "Recipe Book"):
    ui.show_tree_stats(len(book), book.get_height(), book.is_balanced(), title=title)


def run_command(book: RecipeBook, args: argparse.Namespace) -> int:
    """Run one parsed command against a loaded book. Returns the exit code."""
    if args.command == "show":
        book.preorder_display(sys.stdout)
        return 0

    if args.command == "list":
        ui.show_recipe_table(book.inorder())
        return 0

    if args.command == "stats":
        _show_stats(book)
        return 0

    if args.command == "balance":
        book.balance()
        book.preorder_display(sys.stdout)
        _show_stats(book, title="After balance")
        return 0

    if args.command == "find":
        recipe = book.find_recipe(args.name)
        if recipe is None:
            ui.show_status(f"Recipe not found: {args.name}", "error")
            return 1
        ui.show_recipe(recipe)
        return 0

    if args.command == "mastery":
        points = book.calculate_mastery_points(args.name)
        if points is None:
            ui.show_status(f"Recipe not found: {args.name}", "error")
            return 1
        ui.show_mastery(args.name, points)
        return 0

    if args.command == "remove":
        if not book.remove_recipe(args.name):
            ui.show_status(f"Recipe not found: {args.name}", "error")
            return 1
        ui.show_status(f"Removed '{args.name}'. {len(book)} recipes left.")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: List[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_console_level("DEBUG")

    try:
        book = load_book(args.csv_file, strict=args.strict or None, balance=args.balance or None)
    except OSError as e:
        logger.error(f"Could not open file {args.csv_file}: {e}")
        ui.show_status(f"Could not open file {args.csv_file}", "error")
        return 1
    except MalformedRecipeRow as e:
        logger.error(str(e))
        ui.show_status(f"Line {e.line_number}: {e.reason}", "error")
        return 1
    except RecipeBookError as e:
        logger.error(str(e))
        ui.show_status(e.message, "error")
        return 1

    return run_command(book, args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
