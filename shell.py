import sys
from typing import Optional, TextIO

from data import OPTION_TITLES
from logger import get_logger
from menu import MenuCatalog, MenuError, MenuItem
from utils import format_menu

logger = get_logger(__name__)


def options_prompt() -> str:
    lines = ["Please select an option"]
    lines.extend(f"{key}) {title}" for key, title in OPTION_TITLES.items())
    return "\n".join(lines)


def _say(stdout: TextIO, text: str) -> None:
    stdout.write(text + "\n")
    stdout.flush()


def print_menu(catalog: MenuCatalog, stdout: TextIO = sys.stdout) -> None:
    _say(stdout, format_menu(catalog.list()))


def add_item(
    catalog: MenuCatalog,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> Optional[MenuItem]:
    """
    Ask for a name and append it to the catalog.

    A rejected name is reported to the user and the session goes on;
    returns None in that case.
    """
    _say(stdout, "Please enter the name of the new item")
    name = stdin.readline()
    if not name:
        logger.debug("Input closed before an item name was entered")
        return None

    try:
        return catalog.append(name)
    except MenuError as exc:
        _say(stdout, f"invalid input: {exc}")
        return None


def operate(
    catalog: MenuCatalog,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> None:
    while True:
        _say(stdout, options_prompt())
        line = stdin.readline()
        if not line:
            logger.info("Input closed, leaving the menu shell")
            break

        choice = line.strip()
        if choice == "1":
            print_menu(catalog, stdout)
        elif choice == "2":
            add_item(catalog, stdin, stdout)
        elif choice == "q":
            break
        else:
            logger.debug("Unknown option %r", choice)
            _say(stdout, "Unknown option")
