from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from logger import get_logger

logger = get_logger(__name__)


class MenuError(Exception):
    """Base error for menu catalog operations."""
    pass


class DuplicateItemError(MenuError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"menu item already exists: {name}")


@dataclass(frozen=True)
class MenuItem:
    """Read-only once built; only the catalog decides which items exist."""
    name: str
    prices: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))
        for size, price in self.prices.items():
            if price < 0:
                raise ValueError(f"Price for '{self.name}' ({size}) must not be negative, got {price}")


class MenuCatalog:
    """
    Ordered, in-memory collection of menu items for one session.
    Names are unique; comparison is exact and case-sensitive after trimming.
    """

    def __init__(self):
        self._items: List[MenuItem] = []

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "MenuCatalog":
        catalog = cls()
        for record in records:
            catalog.append(record["name"], record.get("prices"))
        return catalog

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)

    def list(self) -> List[MenuItem]:
        return self._items.copy()

    def append(self, raw_name: str, prices: Optional[Mapping[str, float]] = None) -> MenuItem:
        name = raw_name.strip()
        for item in self._items:
            if item.name == name:
                logger.warning("Rejected duplicate menu item %r", name)
                raise DuplicateItemError(name)

        item = MenuItem(name=name, prices=prices or {})
        self._items.append(item)
        logger.info("Added menu item %r (%d sizes)", name, len(item.prices))
        return item
