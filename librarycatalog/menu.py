from __future__ import annotations

from typing import Dict, Iterable, Optional

from librarycatalog.catalog import ALL_CATEGORIES, Catalog
from librarycatalog.prompts import CancelToken, Console, get_parsed_input, get_validated_input
from librarycatalog.types import LibraryItem, T
from librarycatalog.validators import (
    DEFAULT_DATE_FORMAT,
    date_parser,
    is_non_empty,
    is_yes,
    is_yes_no,
    parse_choice,
)

MENU_PROMPT = "Choose an action: (1) Add Item, (2) Remove Item, (3) Display Catalog, (4) Exit"
MENU_ACTIONS = {1: "add", 2: "remove", 3: "display", 4: "exit"}


def index_categories(categories: Iterable[T]) -> Dict[int, T]:
    # 1-based, rebuilt for every selection prompt
    return {i: c for i, c in enumerate(categories, start=1)}


def _format_hint(date_format: str) -> str:
    return (
        date_format.replace("%Y", "YYYY")
        .replace("%m", "MM")
        .replace("%d", "DD")
    )


class CatalogMenu:
    """
    Console front end over a Catalog. All state is passed in; the entry
    point owns both the console and the catalog.
    """

    def __init__(
        self,
        console: Console,
        catalog: Catalog[str],
        date_format: str = DEFAULT_DATE_FORMAT,
        cancel: Optional[CancelToken] = None,
    ) -> None:
        self.console = console
        self.catalog = catalog
        self.date_format = date_format
        self.cancel = cancel

    def _ask(self, prompt: str, validate, error_message: str) -> str:
        return get_validated_input(self.console, prompt, validate, error_message, self.cancel)

    def _ask_parsed(self, prompt: str, parse, error_message: str):
        return get_parsed_input(self.console, prompt, parse, error_message, self.cancel)

    def run(self) -> None:
        while True:
            choice = self._ask_parsed(MENU_PROMPT, parse_choice(MENU_ACTIONS), "Invalid choice.")
            action = MENU_ACTIONS[choice]
            if action == "exit":
                return
            if action == "add":
                self.add_item()
            elif action == "remove":
                self.remove_item()
            else:
                self.display_catalog()

    def add_item(self) -> LibraryItem[str]:
        title = self._ask("Enter title:", is_non_empty, "Title must not be empty.")
        author = self._ask("Enter author:", is_non_empty, "Author must not be empty.")
        category = self._ask("Enter category:", is_non_empty, "Category must not be empty.")
        hint = _format_hint(self.date_format)
        release_date = self._ask_parsed(
            f"Enter release date ({hint}):",
            date_parser(self.date_format),
            f"Invalid date format. Please use {hint}.",
        )

        item = LibraryItem(title=title, author=author, category=category, release_date=release_date)
        self.catalog.add_item(item)
        self.console.write(f"Item added with ID {item.item_id}")
        return item

    def remove_item(self) -> str:
        item_id = self._ask(
            "Enter item ID to remove:",
            lambda s: is_non_empty(s) and self.catalog.has_item(s),
            "Item ID does not exist or is invalid. Please enter a valid ID.",
        )
        self.catalog.remove_item(item_id)
        self.console.write("Item removed successfully.")
        return item_id

    def display_catalog(self) -> list:
        answer = self._ask(
            "Do you want to view by category? (yes/no)",
            is_yes_no,
            "Please answer 'yes' or 'no'.",
        )
        if not is_yes(answer):
            return self.catalog.display_catalog(ALL_CATEGORIES, write=self.console.write)

        indexed = index_categories(self.catalog.get_categories())
        if not indexed:
            self.console.write("No categories available.")
            return []

        self.console.write("Categories:")
        for index, category in indexed.items():
            self.console.write(f"{index}: {category}")

        choice = self._ask_parsed(
            "Enter the number for the category:",
            parse_choice(indexed),
            "Invalid category number. Please enter a valid number.",
        )
        return self.catalog.display_catalog(indexed[choice], write=self.console.write)
