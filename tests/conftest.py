"""
Pytest Configuration and Fixtures
=================================

Provides shared fixtures for the test suite:
- Sample recipes and pre-built books
- Temporary CSV files

Runtime data (logs, config.yaml) is redirected to a temporary directory so
tests never read a developer's data/config.yaml or write into data/logs.
"""

import os
import tempfile

os.environ.setdefault("RECIPE_BOOK_DATA_DIR", tempfile.mkdtemp(prefix="recipe_book_test_"))

import pytest

from recipe import Recipe
from recipe_book import RecipeBook


CSV_HEADER = "name,difficulty_level,description,mastered\n"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mastery_book():
    """A(1, mastered), B(2), C(3) - the canonical mastery example."""
    book = RecipeBook()
    book.add_recipe(Recipe("A", 1, "Easy", True))
    book.add_recipe(Recipe("B", 2, "Medium", False))
    book.add_recipe(Recipe("C", 3, "Hard", False))
    return book


@pytest.fixture
def mbt_book():
    """Root M with left child B and right child T."""
    book = RecipeBook()
    book.add_recipe(Recipe("M", 2, "Middle", False))
    book.add_recipe(Recipe("B", 1, "Before", True))
    book.add_recipe(Recipe("T", 3, "Top", False))
    return book


@pytest.fixture
def sorted_book():
    """Fifteen recipes added in name order - a degenerate right spine."""
    book = RecipeBook()
    for i, letter in enumerate("ABCDEFGHIJKLMNO"):
        book.add_recipe(Recipe(letter, i % 5, f"Recipe {letter}", i % 3 == 0))
    return book


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV body lines (header added) to a temp file and return its path."""
    def _write(*lines, header=True, name="recipes.csv"):
        path = tmp_path / name
        body = "".join(line + "\n" for line in lines)
        path.write_text((CSV_HEADER if header else "") + body, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_csv(write_csv):
    return write_csv(
        "Pancakes,1,Fluffy breakfast pancakes,1",
        "Omelette,2,Three egg omelette,0",
        "Risotto,4,Creamy rice,0",
        "Souffle,5,Cheese souffle,0",
        "Bread,3,Sourdough loaf,1",
    )


# =============================================================================
# Test Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "readonly: marks test as read-only (no tree mutation)"
    )
    config.addinivalue_line(
        "markers", "slow: marks test as slow (large trees)"
    )
