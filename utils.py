from typing import Iterable

from menu import MenuItem

SEPARATOR = "-" * 10


def format_item(item: MenuItem) -> str:
    """
    Item name, a dashed separator, then one right-aligned line per size.
    Sizes keep the order they were added in.
    """
    lines = [item.name, SEPARATOR]
    for size, price in item.prices.items():
        lines.append(f"\t{size:>10}{price:>10.2f}")
    return "\n".join(lines)


def format_menu(items: Iterable[MenuItem]) -> str:
    blocks = [format_item(item) for item in items]
    if not blocks:
        return "The menu is empty."
    return "\n".join(blocks)
