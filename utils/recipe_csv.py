"""
Recipe CSV ingestion.

File format (first line is a header and is discarded):

    name,difficulty_level,description,mastered
    Pancakes,1,Fluffy breakfast pancakes,1
    Beef Wellington,5,Puff pastry wrapped beef,0

`mastered` is true only for the configured true value ("1" by default).

Usage:
    from utils.recipe_csv import read_recipes

    for line_number, recipe in read_recipes("recipes.csv"):
        book.add_recipe(recipe)
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from config import BOOK_CONFIG
from recipe import Recipe
from utils.recipe_validation import is_mastered_flag, is_valid_recipe_row

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class RecipeBookError(Exception):
    """
    Base exception for recipe book errors.

    Attributes:
        message: Human-readable error description
        operation: The operation that failed (e.g., "load_csv")
        details: Additional context (e.g., line number, raw row)
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.operation = operation
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        parts = [self.message]
        if self.operation:
            parts.insert(0, f"[{self.operation}]")
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"({detail_str})")
        return " ".join(parts)


class MalformedRecipeRow(RecipeBookError):
    """Raised in strict mode for a CSV row that cannot become a Recipe."""

    def __init__(self, reason: str, line_number: int, row: List[str], source: Optional[str] = None):
        details = {"line": line_number, "row": row}
        if source:
            details["source"] = source
        super().__init__(reason, "load_csv", details)
        self.reason = reason
        self.line_number = line_number
        self.row = row


# =============================================================================
# PARSING
# =============================================================================

@dataclass
class LoadReport:
    """Outcome of loading one CSV file into a book."""
    added: int = 0
    duplicates: List[str] = field(default_factory=list)
    malformed: List[Tuple[int, str]] = field(default_factory=list)  # (line, reason)

    @property
    def total_rows(self) -> int:
        return self.added + len(self.duplicates) + len(self.malformed)


def parse_recipe_row(fields: List[str], true_value: str = None) -> Recipe:
    """
    Build a Recipe from a split row. The row must already be valid.

    Extra fields after the mastered flag are ignored.
    """
    true_value = true_value if true_value is not None else BOOK_CONFIG["mastered_true_value"]
    name = fields[0]
    difficulty = int(fields[1].strip())
    description = fields[2] if len(fields) > 2 else ""
    mastered = is_mastered_flag(fields[3], true_value) if len(fields) > 3 else False
    return Recipe(name, difficulty, description, mastered)


def read_recipes(
    path: Union[str, Path],
    strict: bool = None,
    delimiter: str = None,
    skip_header: bool = None,
    encoding: str = None,
    malformed: Optional[List[Tuple[int, str]]] = None,
) -> Iterator[Tuple[int, Recipe]]:
    """
    Yield (line_number, Recipe) for each usable row in a CSV file.

    Args:
        path: CSV file to read
        strict: Raise MalformedRecipeRow instead of skipping bad rows
        delimiter: Field separator (BOOK_CONFIG["csv_delimiter"] by default)
        skip_header: Discard the first line (BOOK_CONFIG["skip_header"] by default)
        encoding: File encoding (BOOK_CONFIG["csv_encoding"] by default). Bytes that
            do not decode become U+FFFD instead of aborting the load.
        malformed: If given, (line_number, reason) is appended for every skipped row

    Raises:
        OSError: If path cannot be opened (missing, a directory, unreadable)
        MalformedRecipeRow: In strict mode, on the first bad row
    """
    strict = BOOK_CONFIG["strict_csv"] if strict is None else strict
    delimiter = delimiter or BOOK_CONFIG["csv_delimiter"]
    skip_header = BOOK_CONFIG["skip_header"] if skip_header is None else skip_header
    encoding = encoding or BOOK_CONFIG["csv_encoding"]

    with open(path, "r", encoding=encoding, errors="replace", newline="") as f:
        reader = csv.reader(f, delimiter=delimiter)
        for row in reader:
            line_number = reader.line_num
            if skip_header and line_number == 1:
                continue
            if not row or all(not cell.strip() for cell in row):
                continue

            is_valid, reason = is_valid_recipe_row(row)
            if not is_valid:
                if strict:
                    raise MalformedRecipeRow(reason, line_number, row, source=str(path))
                logger.warning(f"Skipping malformed row {line_number} in {path}: {reason}")
                if malformed is not None:
                    malformed.append((line_number, reason))
                continue

            yield line_number, parse_recipe_row(row)
