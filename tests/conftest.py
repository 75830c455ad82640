"""Shared test fixtures."""

from pathlib import Path

from src.models import Category

# Test fixture config directory with synthetic data
FIXTURE_CONFIG_DIR = Path(__file__).parent / "fixtures" / "config"


def default_cats() -> list[Category]:
    return [
        Category(1, "餐饮", "饮食相关"),
        Category(2, "娱乐", "娱乐消费"),
        Category(3, "水电费", "生活缴费"),
        Category(4, "工资", "收入"),
        Category(5, "其他", "其他"),
    ]


def cats_without_other() -> list[Category]:
    return [
        Category(10, "餐饮", ""),
        Category(11, "娱乐", ""),
    ]
