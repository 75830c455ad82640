"""YAML configuration loader for account-book.

Loads seed config files from the config/ directory:
  categories.yaml  — category list (required)
  rules.yaml       — recognition settings (optional)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from src.categorize.keyword_match import MATCH_ORDERS
from src.models import OTHER_CATEGORY_NAME, Category

logger = logging.getLogger(__name__)


class Config:
    """Loads and provides access to the YAML configuration files."""

    def __init__(self, config_dir: Path | str = "config"):
        self.config_dir = Path(config_dir)
        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"Config directory not found: {self.config_dir}")

        self._categories: list[dict] | None = None
        self._rules: dict | None = None

    def _load(self, filename: str) -> dict | list:
        path = self.config_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            raise ValueError(f"Empty config file: {path}")
        return data

    @property
    def categories(self) -> list[dict]:
        if self._categories is None:
            data = self._load("categories.yaml")
            if isinstance(data, dict):
                data = data.get("categories", [])
            if not isinstance(data, list):
                raise ValueError(
                    f"categories.yaml must hold a list of categories: {self.config_dir}"
                )
            self._categories = data
        return self._categories

    @property
    def rules(self) -> dict:
        """Load rules.yaml, or an empty dict when the file is absent."""
        if self._rules is None:
            if (self.config_dir / "rules.yaml").exists():
                data = self._load("rules.yaml")
                if not isinstance(data, dict):
                    raise ValueError(f"rules.yaml must be a mapping: {self.config_dir}")
                self._rules = data
            else:
                self._rules = {}
        return self._rules

    @property
    def fallback_name(self) -> str:
        """Name of the catch-all category. Default: '其他'."""
        return str(self.rules.get("fallback_name", OTHER_CATEGORY_NAME))

    @property
    def match_order(self) -> str:
        """Keyword scan order, 'sorted' or 'input'. Default: 'sorted'."""
        order = self.rules.get("match_order", "sorted")
        if order not in MATCH_ORDERS:
            raise ValueError(
                f"Invalid match_order '{order}' in rules.yaml, "
                f"expected one of {MATCH_ORDERS}"
            )
        return order

    def category_list(self) -> list[Category]:
        """Parse categories.yaml into Category objects.

        Entries that are not mappings are skipped with a warning. Duplicate
        names are kept but logged, since keyword matching keeps only the
        last id for a repeated name.
        """
        result: list[Category] = []
        seen: dict[str, int] = {}
        for entry in self.categories:
            if not isinstance(entry, dict):
                logger.warning("Skipping non-mapping category entry: %r", entry)
                continue
            cat = Category.from_dict(entry)
            if cat.name in seen:
                logger.warning(
                    "Duplicate category name '%s' (ids %s and %s); keyword matches use %s",
                    cat.name, seen[cat.name], cat.id, cat.id,
                )
            seen[cat.name] = cat.id
            result.append(cat)
        return result
