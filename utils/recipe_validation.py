"""Recipe row validation shared by the CSV loader and the CLI."""

from typing import List

# Minimum fields for a usable row: name and difficulty level.
# Description and mastered flag default to "" and False when missing.
MIN_FIELDS = 2


def _parse_int(text: str):
    """Parse an integer difficulty, returning None if it is not one."""
    try:
        return int(text.strip())
    except (ValueError, AttributeError):
        return None


def is_mastered_flag(value: str, true_value: str = "1") -> bool:
    """Only the configured true value (default "1") means mastered. Anything else is False."""
    if value is None:
        return False
    return value.strip() == true_value


def is_valid_recipe_row(fields: List[str]) -> tuple[bool, str]:
    """
    Validate one split CSV row before it becomes a Recipe.

    A valid row must have:
    - A non-blank name
    - An integer difficulty level

    Args:
        fields: Row already split on the delimiter

    Returns:
        Tuple of (is_valid: bool, reason: str)
    """
    if not fields or all(not f.strip() for f in fields):
        return False, "Empty row"

    if len(fields) < MIN_FIELDS:
        return False, f"Expected at least {MIN_FIELDS} fields, got {len(fields)}"

    if not fields[0].strip():
        return False, "Missing recipe name"

    if _parse_int(fields[1]) is None:
        return False, f"Difficulty level is not an integer: {fields[1]!r}"

    return True, "Valid recipe row"
