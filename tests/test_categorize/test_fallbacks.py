"""Tests for fallback rules."""

from src.categorize.fallbacks import match_first_category, match_named_fallback
from src.models import Category
from tests.conftest import cats_without_other, default_cats


class TestNamedFallback:
    def test_finds_other(self):
        result = match_named_fallback(default_cats())
        assert result is not None
        assert result.category_id == 5
        assert result.method == "named_fallback"

    def test_missing_other(self):
        assert match_named_fallback(cats_without_other()) is None

    def test_empty_list(self):
        assert match_named_fallback([]) is None

    def test_first_other_in_input_order_wins(self):
        cats = [Category(8, "其他"), Category(9, "其他")]
        assert match_named_fallback(cats).category_id == 8

    def test_exact_name_only(self):
        cats = [Category(8, "其他支出")]
        assert match_named_fallback(cats) is None

    def test_custom_name(self):
        cats = [Category(1, "餐饮"), Category(6, "杂项")]
        assert match_named_fallback(cats, "杂项").category_id == 6


class TestFirstCategory:
    def test_returns_first(self):
        result = match_first_category(cats_without_other())
        assert result is not None
        assert result.category_id == 10
        assert result.method == "first_category"

    def test_empty_list(self):
        assert match_first_category([]) is None
