"""
Recipe Book
===========

A binary search tree of Recipes keyed by name, with the domain operations
on top:
- add_recipe(): the only place duplicate names are rejected
- calculate_mastery_points(): how much work stands between you and a recipe
- balance(): one-shot rebuild from the sorted recipes
- preorder_display(): the book in pre-order, one block per recipe

Usage:
    from recipe_book import RecipeBook

    book = RecipeBook("recipes.csv")
    book.calculate_mastery_points("Beef Wellington")   # None if not in the book
    book.balance()
    book.preorder_display()
"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from binary_search_tree import BinarySearchTree
from config import BOOK_CONFIG
from recipe import Recipe, recipe_key
from tools.logging_utils import get_logger
from utils.recipe_csv import LoadReport, read_recipes

logger = get_logger(__name__)


class RecipeBook(BinarySearchTree[Recipe]):
    """
    Recipes ordered by name.

    Args:
        filename: Optional CSV file to load on construction. A file that cannot
            be opened (missing, a directory, unreadable) is logged and leaves the
            book empty.
    """

    def __init__(self, filename: Union[str, Path, None] = None, strict: bool = None):
        super().__init__(key=recipe_key)
        if filename is not None:
            try:
                self.load_csv(filename, strict=strict)
            except OSError as e:
                logger.error(f"Could not open file {filename}: {e}")

    @classmethod
    def from_csv(cls, filename: Union[str, Path], strict: bool = None) -> "RecipeBook":
        """Build a book from a CSV file. Unlike the constructor, a file that cannot be opened raises."""
        book = cls()
        book.load_csv(filename, strict=strict)
        return book

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_csv(self, filename: Union[str, Path], strict: bool = None) -> LoadReport:
        """
        Add every recipe in a CSV file through add_recipe().

        Duplicates (within the file or against the book) are skipped and reported.

        Raises:
            OSError: If the file cannot be opened
            MalformedRecipeRow: In strict mode, on the first bad row
        """
        report = LoadReport()
        for line_number, recipe in read_recipes(filename, strict=strict, malformed=report.malformed):
            if self.add_recipe(recipe):
                report.added += 1
            else:
                logger.warning(f"Duplicate recipe '{recipe.name}' on line {line_number} of {filename}, skipped")
                report.duplicates.append(recipe.name)

        logger.info(
            f"Loaded {report.added} recipes from {filename} "
            f"({len(report.duplicates)} duplicates, {len(report.malformed)} malformed)"
        )
        return report

    # -------------------------------------------------------------------------
    # Recipe operations
    # -------------------------------------------------------------------------

    def find_recipe(self, name: str) -> Optional[Recipe]:
        """Return the recipe with this name, or None."""
        node = self.search(name)
        return node.item if node is not None else None

    def add_recipe(self, recipe: Recipe) -> bool:
        """
        Add a recipe unless one with the same name is already in the book.

        Returns:
            True if added, False for a duplicate name
        """
        if self.search(recipe.name) is not None:
            logger.debug(f"Rejected duplicate recipe '{recipe.name}'")
            return False
        return self.add(recipe)

    def remove_recipe(self, name: str) -> bool:
        """Remove the recipe with this name. Returns False if it was not in the book."""
        removed = self.remove(name)
        if removed:
            logger.debug(f"Removed recipe '{name}'")
        return removed

    def set_mastered(self, name: str, mastered: bool = True) -> bool:
        """Flip a recipe's mastered flag in place. Returns False if not found."""
        node = self.search(name)
        if node is None:
            return False
        node.item = node.item.with_mastered(mastered)
        return True

    def recipes(self) -> List[Recipe]:
        """All recipes sorted by name."""
        return list(self.inorder())

    def names(self) -> List[str]:
        return [recipe.name for recipe in self.inorder()]

    # -------------------------------------------------------------------------
    # Mastery
    # -------------------------------------------------------------------------

    def calculate_mastery_points(self, name: str) -> Optional[int]:
        """
        Points needed to master a recipe.

        Mastering a recipe means first mastering every easier recipe that is
        not mastered yet, plus the recipe itself. The tree is ordered by name,
        not difficulty, so every recipe has to be inspected.

        Returns:
            None if the recipe is not in the book,
            0 if it is already mastered,
            otherwise 1 + the number of unmastered recipes with a lower difficulty
        """
        target = self.find_recipe(name)
        if target is None:
            return None

        if target.mastered:
            return 0

        points = 1
        for recipe in self.inorder():
            if recipe.difficulty_level < target.difficulty_level and not recipe.mastered:
                points += 1
        return points

    # -------------------------------------------------------------------------
    # Balancing
    # -------------------------------------------------------------------------

    def balance(self):
        """
        Rebuild the tree so no node's subtree heights differ by more than 1.

        Collects the recipes in order, discards the tree, then re-adds the
        median of each sorted span before its left and right halves.
        """
        sorted_recipes = self.recipes()
        height_before = self.get_height()
        self.clear()
        self._build_balanced_tree(sorted_recipes, 0, len(sorted_recipes) - 1)
        logger.info(
            f"Balanced recipe book: {len(sorted_recipes)} recipes, "
            f"height {height_before} -> {self.get_height()}"
        )

    def _build_balanced_tree(self, recipes: List[Recipe], start: int, end: int):
        if start > end:
            return

        mid = start + (end - start) // 2
        self.add_recipe(recipes[mid])

        self._build_balanced_tree(recipes, start, mid - 1)
        self._build_balanced_tree(recipes, mid + 1, end)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def preorder_display(self, stream: Optional[TextIO] = None):
        """
        Write every recipe in pre-order, one block per recipe:

            Name: [name]
            Difficulty Level: [difficulty_level]
            Description: [description]
            Mastered: [Yes/No]

        followed by an empty line.
        """
        stream = stream or sys.stdout
        for recipe in self.preorder():
            stream.write(recipe.format_display() + "\n\n")


def load_book(filename: Union[str, Path], strict: bool = None, balance: bool = None) -> RecipeBook:
    """Load a book from CSV, rebalancing afterwards if configured to."""
    book = RecipeBook.from_csv(filename, strict=strict)
    balance = BOOK_CONFIG["auto_balance_on_load"] if balance is None else balance
    if balance:
        book.balance()
    return book
