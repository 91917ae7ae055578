from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")


class InputCancelled(RuntimeError):
    pass


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


class Console:
    """
    Line-oriented console handle, built once by the entry point and passed
    to every flow. Reading past end of input raises EOFError.
    """

    def __init__(
        self,
        read_line: Callable[[], str] = input,
        write: Callable[[str], object] = print,
    ) -> None:
        self._read_line = read_line
        self._write = write

    def read_line(self) -> str:
        return self._read_line()

    def write(self, text: str) -> None:
        self._write(text)


def _check_cancel(cancel: Optional[CancelToken]) -> None:
    if cancel is not None and cancel.is_set():
        raise InputCancelled("input cancelled")


def get_validated_input(
    console: Console,
    prompt: str,
    validate: Callable[[str], bool],
    error_message: str,
    cancel: Optional[CancelToken] = None,
) -> str:
    """
    Prompts until `validate` accepts the line, then returns it untouched.
    There is no attempt cap; `cancel` is the only way out besides EOF.
    """
    while True:
        _check_cancel(cancel)
        console.write(prompt)
        line = console.read_line()
        if validate(line):
            return line
        console.write(error_message)


def get_parsed_input(
    console: Console,
    prompt: str,
    parse: Callable[[str], R],
    error_message: str,
    cancel: Optional[CancelToken] = None,
) -> R:
    """
    Prompts until `parse` returns without raising, then returns its result.

    Every parser failure shows the same `error_message`; the exception itself
    only goes to the debug log.
    """
    while True:
        _check_cancel(cancel)
        console.write(prompt)
        line = console.read_line()
        try:
            return parse(line)
        except Exception as e:
            logger.debug("Rejected %r: %s: %s", line, type(e).__name__, e)
            console.write(error_message)
