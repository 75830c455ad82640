"""Tests for src.config — YAML configuration loader."""

import logging

import pytest

from src.config import Config
from src.models import Category
from tests.conftest import FIXTURE_CONFIG_DIR, default_cats


class TestConfigInit:
    def test_loads_from_config_dir(self):
        config = Config(FIXTURE_CONFIG_DIR)
        assert config.config_dir == FIXTURE_CONFIG_DIR

    def test_raises_on_missing_directory(self):
        with pytest.raises(FileNotFoundError, match="Config directory not found"):
            Config("/nonexistent/path")

    def test_raises_on_file_not_directory(self, tmp_path):
        f = tmp_path / "not_a_dir.yaml"
        f.write_text("test: true")
        with pytest.raises(FileNotFoundError, match="Config directory not found"):
            Config(f)


class TestConfigCategories:
    def test_loads_5_categories(self):
        config = Config(FIXTURE_CONFIG_DIR)
        assert len(config.categories) == 5

    def test_category_list(self):
        config = Config(FIXTURE_CONFIG_DIR)
        assert config.category_list() == default_cats()

    def test_lazy_loading(self):
        config = Config(FIXTURE_CONFIG_DIR)
        assert config._categories is None
        _ = config.categories
        assert config._categories is not None

    def test_caches_after_first_load(self):
        config = Config(FIXTURE_CONFIG_DIR)
        assert config.categories is config.categories

    def test_top_level_list(self, tmp_path):
        (tmp_path / "categories.yaml").write_text(
            "- {id: 1, name: 交通}\n- {id: 2, name: 其他}\n", encoding="utf-8",
        )
        config = Config(tmp_path)
        assert config.category_list() == [Category(1, "交通"), Category(2, "其他")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Config(tmp_path).categories

    def test_empty_file(self, tmp_path):
        (tmp_path / "categories.yaml").write_text("")
        with pytest.raises(ValueError, match="Empty config file"):
            Config(tmp_path).categories

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "categories.yaml").write_text("categories: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            Config(tmp_path).categories

    def test_not_a_list(self, tmp_path):
        (tmp_path / "categories.yaml").write_text("categories: 5")
        with pytest.raises(ValueError, match="must hold a list"):
            Config(tmp_path).categories

    def test_bad_entry_raises(self, tmp_path):
        (tmp_path / "categories.yaml").write_text("- {name: 交通}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="needs 'id' and 'name'"):
            Config(tmp_path).category_list()

    def test_skips_non_mapping_entries(self, tmp_path, caplog):
        (tmp_path / "categories.yaml").write_text(
            "- {id: 1, name: 交通}\n- just a string\n", encoding="utf-8",
        )
        with caplog.at_level(logging.WARNING, logger="src.config"):
            cats = Config(tmp_path).category_list()
        assert cats == [Category(1, "交通")]
        assert "Skipping non-mapping" in caplog.text

    def test_duplicate_names_warn(self, tmp_path, caplog):
        (tmp_path / "categories.yaml").write_text(
            "- {id: 1, name: 交通}\n- {id: 2, name: 交通}\n", encoding="utf-8",
        )
        with caplog.at_level(logging.WARNING, logger="src.config"):
            cats = Config(tmp_path).category_list()
        assert len(cats) == 2
        assert "Duplicate category name" in caplog.text


class TestConfigRules:
    def test_fixture_rules(self):
        config = Config(FIXTURE_CONFIG_DIR)
        assert config.fallback_name == "其他"
        assert config.match_order == "sorted"

    def test_defaults_without_rules_file(self, tmp_path):
        config = Config(tmp_path)
        assert config.rules == {}
        assert config.fallback_name == "其他"
        assert config.match_order == "sorted"

    def test_custom_rules(self, tmp_path):
        (tmp_path / "rules.yaml").write_text(
            "fallback_name: 杂项\nmatch_order: input\n", encoding="utf-8",
        )
        config = Config(tmp_path)
        assert config.fallback_name == "杂项"
        assert config.match_order == "input"

    def test_invalid_match_order(self, tmp_path):
        (tmp_path / "rules.yaml").write_text("match_order: random\n")
        with pytest.raises(ValueError, match="Invalid match_order"):
            Config(tmp_path).match_order

    def test_rules_must_be_mapping(self, tmp_path):
        (tmp_path / "rules.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            Config(tmp_path).rules
