from datetime import date

from librarycatalog.__main__ import main
from librarycatalog.catalog import Catalog
from librarycatalog.menu import CatalogMenu, index_categories


def add_lines(title, author, category, released):
    return [title, author, category, released]


def test_index_categories_is_one_based():
    assert index_categories(["SciFi"]) == {1: "SciFi"}
    assert sorted(index_categories({"a", "b"})) == [1, 2]


def test_add_item_end_to_end(scripted):
    catalog = Catalog()
    console = scripted(["", "Dune", "Herbert", "SciFi", "1965/06/01", "1965-06-01"])
    menu = CatalogMenu(console, catalog)

    item = menu.add_item()

    assert item.item_id
    assert item.date_added == date.today()
    assert item.release_date == date(1965, 6, 1)
    assert catalog.get_item(item.item_id) is item
    assert "Title must not be empty." in console.output
    assert "Invalid date format. Please use YYYY-MM-DD." in console.output
    assert catalog.get_categories() == {"SciFi"}
    assert catalog.display_catalog("SciFi", write=lambda _line: None) == [item]
    assert catalog.display_catalog("Fantasy", write=lambda _line: None) == []


def test_add_item_with_configured_date_format(scripted):
    console = scripted(["Emma", "Austen", "Classic", "23/12/1815"])
    menu = CatalogMenu(console, Catalog(), date_format="%d/%m/%Y")

    item = menu.add_item()

    assert item.release_date == date(1815, 12, 23)
    assert "Enter release date (DD/MM/YYYY):" in console.output


def test_remove_requires_existing_id(scripted):
    catalog = Catalog()
    menu = CatalogMenu(scripted(add_lines("Dune", "Herbert", "SciFi", "1965-06-01")), catalog)
    item = menu.add_item()

    console = scripted(["", "unknown", item.item_id])
    menu.console = console

    assert menu.remove_item() == item.item_id
    assert not catalog.has_item(item.item_id)
    assert console.output.count("Item ID does not exist or is invalid. Please enter a valid ID.") == 2
    assert console.output[-1] == "Item removed successfully."


def test_display_by_category(scripted):
    catalog = Catalog()
    menu = CatalogMenu(
        scripted(add_lines("Dune", "Herbert", "SciFi", "1965-06-01")
                 + add_lines("The Hobbit", "Tolkien", "Fantasy", "1937-09-21")),
        catalog,
    )
    menu.add_item()
    hobbit = menu.add_item()

    fantasy = next(i for i, c in index_categories(catalog.get_categories()).items() if c == "Fantasy")
    console = scripted(["maybe", "yes", "0", str(fantasy)])
    menu.console = console

    shown = menu.display_catalog()

    assert shown == [hobbit]
    assert "Please answer 'yes' or 'no'." in console.output
    assert f"{fantasy}: Fantasy" in console.output
    assert "Invalid category number. Please enter a valid number." in console.output


def test_display_all(scripted):
    catalog = Catalog()
    menu = CatalogMenu(scripted(add_lines("Dune", "Herbert", "SciFi", "1965-06-01")), catalog)
    dune = menu.add_item()

    menu.console = scripted(["NO"])

    assert menu.display_catalog() == [dune]


def test_display_without_categories(scripted):
    console = scripted(["yes"])
    menu = CatalogMenu(console, Catalog())

    assert menu.display_catalog() == []
    assert console.output[-1] == "No categories available."


def test_run_session(scripted):
    console = scripted(
        ["9", "add"]
        + ["1"] + add_lines("Dune", "Herbert", "SciFi", "1965-06-01")
        + ["3", "no"]
        + ["4"]
    )

    assert main(["--log-level", "DEBUG"], console=console) == 0
    assert console.output.count("Invalid choice.") == 2
    assert any(line.startswith("Item added with ID ") for line in console.output)
    assert any("| SciFi " in line and "Dune" in line for line in console.output)


def test_run_session_end_of_input(scripted):
    console = scripted(["1", "Dune"])

    assert main([], console=console) == 1
