"""Dataclass models for categories and processed transactions.

Both are frozen: a Category is owned by the caller and only read during
recognition, and a ProcessedTransaction is built once per assembly call.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

# Name of the catch-all category used when no keyword matches
OTHER_CATEGORY_NAME = "其他"

# Returned when there are no categories at all; never a valid category id
NO_CATEGORY_ID = 0


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Category:
        """Build a Category from a config mapping.

        Raises ValueError if id or name is missing, id is not an integer,
        or name is not a non-empty string.
        """
        if "id" not in data or "name" not in data:
            raise ValueError(f"Category entry needs 'id' and 'name': {data!r}")
        cat_id = data["id"]
        # bool is an int subclass; reject it explicitly
        if isinstance(cat_id, bool) or not isinstance(cat_id, int):
            raise ValueError(f"Category id must be an integer: {cat_id!r}")
        name = data["name"]
        if not isinstance(name, str):
            raise ValueError(f"Category {cat_id} name must be a string: {name!r}")
        if not name:
            raise ValueError(f"Category {cat_id} has an empty name")
        return cls(
            id=cat_id,
            name=name,
            description=str(data.get("description") or ""),
        )


@dataclass(frozen=True)
class ProcessedTransaction:
    date: str
    category_id: int
    note: str

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(1, "餐饮", "饮食相关"),
    Category(2, "娱乐", "娱乐消费"),
    Category(3, "水电费", "生活缴费"),
    Category(4, "工资", "收入"),
    Category(5, OTHER_CATEGORY_NAME, "其他"),
)
