#!/usr/bin/env python3
"""
Rich Console UI for the Recipe Book
===================================

Terminal views for the CLI: recipe tables, single recipes, tree statistics.
The plain pre-order block format lives in RecipeBook.preorder_display();
this module is only for the human-friendly views.
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from recipe import Recipe


class RecipeBookUI:
    """
    Rich terminal views for recipe book commands.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_recipe_table(self, recipes: Iterable[Recipe], title: str = "Recipes"):
        """Render recipes as a table, in the order given."""
        table = Table(title=title)
        table.add_column("Name", style="bold")
        table.add_column("Difficulty", justify="right")
        table.add_column("Description")
        table.add_column("Mastered", justify="center")

        count = 0
        for recipe in recipes:
            table.add_row(
                escape(recipe.name),
                str(recipe.difficulty_level),
                escape(recipe.description),
                "[green]Yes[/green]" if recipe.mastered else "[red]No[/red]",
            )
            count += 1

        if count == 0:
            self.console.print("No recipes in the book.")
            return
        self.console.print(table)

    def show_recipe(self, recipe: Recipe):
        """Show one recipe in a panel."""
        self.console.print(Panel(escape(recipe.format_display()), title=escape(recipe.name), border_style="blue"))

    def show_tree_stats(self, size: int, height: int, balanced: bool, title: str = "Recipe Book"):
        """Show size/height/balance of the tree."""
        table = Table(title=title, show_header=False)
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Recipes", str(size))
        table.add_row("Height", str(height))
        table.add_row("Balanced", "Yes" if balanced else "No")
        self.console.print(table)

    def show_mastery(self, name: str, points: int):
        if points == 0:
            self.console.print(f"✅ '{name}' is already mastered.", markup=False)
        else:
            self.console.print(f"📊 Mastery points needed for '{name}': {points}", markup=False)

    def show_status(self, message: str, style: str = "info"):
        """Show clean status message."""
        if style == "error":
            self.console.print(f"Error: {message}", style="red", markup=False)
        elif style == "warning":
            self.console.print(f"Warning: {message}", style="yellow", markup=False)
        else:
            self.console.print(message, markup=False)


# Global UI instance for easy access
ui = RecipeBookUI()
