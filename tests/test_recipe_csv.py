"""
Tests for CSV ingestion and row validation.

Run: pytest tests/test_recipe_csv.py -v
"""

import pytest

from recipe import Recipe
from utils.recipe_csv import (
    LoadReport,
    MalformedRecipeRow,
    RecipeBookError,
    parse_recipe_row,
    read_recipes,
)
from utils.recipe_validation import is_mastered_flag, is_valid_recipe_row


class TestIsValidRecipeRow:
    """Tests for is_valid_recipe_row()"""

    def test_valid_full_row(self):
        is_valid, reason = is_valid_recipe_row(["Soup", "2", "Tomato", "1"])
        assert is_valid is True
        assert reason == "Valid recipe row"

    def test_valid_minimal_row(self):
        is_valid, _ = is_valid_recipe_row(["Soup", " 2 "])
        assert is_valid is True

    def test_empty_row(self):
        is_valid, reason = is_valid_recipe_row(["", "  "])
        assert is_valid is False
        assert reason == "Empty row"

    def test_too_few_fields(self):
        is_valid, reason = is_valid_recipe_row(["Soup"])
        assert is_valid is False
        assert "at least 2 fields" in reason

    def test_missing_name(self):
        is_valid, reason = is_valid_recipe_row(["  ", "2", "x", "0"])
        assert is_valid is False
        assert "name" in reason

    def test_non_integer_difficulty(self):
        is_valid, reason = is_valid_recipe_row(["Soup", "hard", "x", "0"])
        assert is_valid is False
        assert "'hard'" in reason

    def test_float_difficulty_rejected(self):
        is_valid, _ = is_valid_recipe_row(["Soup", "2.5", "x", "0"])
        assert is_valid is False


class TestIsMasteredFlag:

    @pytest.mark.parametrize("value,expected", [
        ("1", True),
        (" 1 ", True),
        ("0", False),
        ("yes", False),
        ("true", False),
        ("", False),
        (None, False),
    ])
    def test_default_true_value(self, value, expected):
        assert is_mastered_flag(value) is expected

    def test_custom_true_value(self):
        assert is_mastered_flag("Y", true_value="Y") is True
        assert is_mastered_flag("1", true_value="Y") is False


class TestParseRecipeRow:

    def test_full_row(self):
        recipe = parse_recipe_row(["Soup", "2", "Tomato", "1"])
        assert recipe == Recipe("Soup")
        assert recipe.difficulty_level == 2
        assert recipe.description == "Tomato"
        assert recipe.mastered is True

    def test_missing_optional_fields(self):
        recipe = parse_recipe_row(["Toast", "1"])
        assert recipe.description == ""
        assert recipe.mastered is False

    def test_extra_fields_ignored(self):
        recipe = parse_recipe_row(["Soup", "2", "Tomato", "0", "extra"])
        assert recipe.mastered is False


class TestReadRecipes:

    def test_skips_header(self, sample_csv):
        rows = list(read_recipes(sample_csv))
        assert [r.name for _, r in rows] == ["Pancakes", "Omelette", "Risotto", "Souffle", "Bread"]
        assert rows[0][0] == 2  # line numbers count the header

    def test_no_header(self, write_csv):
        path = write_csv("Soup,1,x,0", header=False)
        rows = list(read_recipes(path, skip_header=False))
        assert [r.name for _, r in rows] == ["Soup"]

    def test_quoted_description_with_delimiter(self, write_csv):
        path = write_csv('Stew,3,"Rich, hearty",0')
        [(_, recipe)] = list(read_recipes(path))
        assert recipe.description == "Rich, hearty"
        assert recipe.mastered is False

    def test_blank_lines_skipped(self, write_csv):
        path = write_csv("Soup,1,x,0", "", "Stew,2,y,1")
        assert [r.name for _, r in read_recipes(path)] == ["Soup", "Stew"]

    def test_malformed_rows_skipped_by_default(self, write_csv):
        path = write_csv("Soup,1,x,0", "Bad,notanumber,x,0", "Stew,2,y,1")
        malformed = []
        rows = list(read_recipes(path, strict=False, malformed=malformed))
        assert [r.name for _, r in rows] == ["Soup", "Stew"]
        assert malformed[0][0] == 3
        assert "not an integer" in malformed[0][1]

    def test_malformed_row_logged(self, write_csv, caplog):
        path = write_csv("Bad,notanumber,x,0")
        with caplog.at_level("WARNING"):
            list(read_recipes(path, strict=False))
        assert "Skipping malformed row 2" in caplog.text

    def test_strict_raises(self, write_csv):
        path = write_csv("Soup,1,x,0", "Bad,notanumber,x,0")
        with pytest.raises(MalformedRecipeRow) as exc_info:
            list(read_recipes(path, strict=True))
        err = exc_info.value
        assert isinstance(err, RecipeBookError)
        assert err.line_number == 3
        assert err.row == ["Bad", "notanumber", "x", "0"]
        assert str(err).startswith("[load_csv]")
        assert "line=3" in str(err)

    def test_custom_delimiter(self, tmp_path):
        path = tmp_path / "recipes.tsv"
        path.write_text("name\tlevel\tdesc\tm\nSoup\t1\tHot, spicy\t1\n", encoding="utf-8")
        [(_, recipe)] = list(read_recipes(path, delimiter="\t"))
        assert recipe.description == "Hot, spicy"
        assert recipe.mastered is True

    def test_undecodable_bytes_replaced(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"name,d,desc,m\nCr\xe8me,1,x,0\n")
        [(_, recipe)] = list(read_recipes(path))
        assert recipe.name == "Cr\ufffdme"
        assert recipe.difficulty_level == 1

    def test_explicit_encoding(self, tmp_path):
        path = tmp_path / "cp1252.csv"
        path.write_bytes("name,d,desc,m\nCr\u00e8me br\u00fbl\u00e9e,2,x,1\n".encode("cp1252"))
        [(_, recipe)] = list(read_recipes(path, encoding="cp1252"))
        assert recipe.name == "Cr\u00e8me br\u00fbl\u00e9e"
        assert recipe.mastered is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(read_recipes(tmp_path / "nope.csv"))


class TestLoadReport:

    def test_total_rows(self):
        report = LoadReport(added=3, duplicates=["a"], malformed=[(4, "bad")])
        assert report.total_rows == 5
