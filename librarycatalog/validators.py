from __future__ import annotations

import logging
import re
from collections.abc import Collection
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d"

E = TypeVar("E")
K = TypeVar("K")

_LETTERS = re.compile(r"[a-zA-Z]")
_DIGITS = re.compile(r"\d")
_SPECIAL = re.compile(r"[^a-zA-Z0-9\s]")

# fixed-width shapes for strict date matching; other directives match loosely
_DATE_DIRECTIVES = {
    "Y": r"\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "d": r"\d{2}",
    "j": r"\d{3}",
    "%": "%",
}


def is_non_empty(value: Any) -> bool:
    if value is None:
        logger.debug("Input must not be None.")
        return False
    if isinstance(value, str):
        if not value.strip():
            logger.debug("Input must not be empty.")
            return False
        return True
    if isinstance(value, Collection) and len(value) == 0:
        logger.debug("Collection must not be empty.")
        return False
    return True


def is_yes_no(text: str) -> bool:
    return text.casefold() in ("yes", "no")


def is_yes(text: str) -> bool:
    return text.casefold() == "yes"


def _date_shape(fmt: str) -> re.Pattern:
    parts = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            parts.append(_DATE_DIRECTIVES.get(fmt[i + 1], r".+?"))
            i += 2
        else:
            parts.append(re.escape(fmt[i]))
            i += 1
    return re.compile("".join(parts))


def parse_date(text: str, *formats: str) -> date:
    """
    Parses `text` with the first matching format (default YYYY-MM-DD).

    Matching is strict: numeric fields must have their full width, so
    "1965-6-1" is not accepted as "%Y-%m-%d" but "0999-01-01" is.
    """
    fmts = formats or (DEFAULT_DATE_FORMAT,)
    for fmt in fmts:
        if not _date_shape(fmt).fullmatch(text):
            continue
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"{text!r} does not match any of {list(fmts)}")


def date_parser(*formats: str) -> Callable[[str], date]:
    def parse(text: str) -> date:
        return parse_date(text, *formats)

    return parse


def parse_choice(choices: Dict[int, Any]) -> Callable[[str], int]:
    def parse(text: str) -> int:
        choice = int(text)
        if choice not in choices:
            raise ValueError(f"{choice} is not one of {sorted(choices)}")
        return choice

    return parse


def validate_date(
    value: date | str,
    must_be_past: bool = False,
    must_be_future: bool = False,
    formats: Iterable[str] = (),
) -> bool:
    if isinstance(value, str):
        try:
            value = parse_date(value, *formats)
        except ValueError:
            logger.debug("Invalid date format: %r", value)
            return False

    today = date.today()
    if must_be_past and value > today:
        logger.debug("Date must be in the past: %s", value)
        return False
    if must_be_future and value < today:
        logger.debug("Date must be in the future: %s", value)
        return False
    return True


def is_unique(value: K, collection: Iterable[E], key: Callable[[E], K]) -> bool:
    return all(key(e) != value for e in collection)


def _presence(pattern: re.Pattern, what: str, value: Any, should_include: bool) -> bool:
    found = pattern.search(str(value)) is not None
    if should_include and not found:
        logger.debug("Input must contain %s.", what)
        return False
    if not should_include and found:
        logger.debug("Input must not contain %s.", what)
        return False
    return True


def contains_letters(value: Any, should_include: bool) -> bool:
    return _presence(_LETTERS, "alphabetical characters", value, should_include)


def contains_digits(value: Any, should_include: bool) -> bool:
    return _presence(_DIGITS, "numbers", value, should_include)


def contains_special(value: Any, should_include: bool) -> bool:
    return _presence(_SPECIAL, "special characters", value, should_include)
