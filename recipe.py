"""
Recipe value type.

A Recipe is identified by its name alone: equality, hashing and ordering all
look only at `name`. The other fields ride along as payload.

Lookups never build a half-empty Recipe to search with. The tree is keyed by
`recipe_key()`, so callers search with the plain name string.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Recipe:
    """A recipe in the book.

    Attributes:
        name: Unique name, the ordering key
        difficulty_level: Higher is harder
        description: Free text
        mastered: Whether the cook has already mastered it
    """
    name: str
    difficulty_level: int = field(default=0, compare=False)
    description: str = field(default="", compare=False)
    mastered: bool = field(default=False, compare=False)

    def __lt__(self, other: "Recipe") -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name < other.name

    def with_mastered(self, mastered: bool = True) -> "Recipe":
        """Return a copy with the mastered flag changed."""
        return replace(self, mastered=mastered)

    def format_display(self) -> str:
        """Render the four-line display block (no trailing blank line)."""
        return (
            f"Name: {self.name}\n"
            f"Difficulty Level: {self.difficulty_level}\n"
            f"Description: {self.description}\n"
            f"Mastered: {'Yes' if self.mastered else 'No'}"
        )

    def __str__(self) -> str:
        return self.format_display()


def recipe_key(recipe: Recipe) -> str:
    """Key function used by the recipe tree."""
    return recipe.name
