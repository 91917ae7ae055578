import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


def _new_item_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class LibraryItem(Generic[T]):
    title: str
    author: str
    category: T                    # grouping key, e.g. "SciFi"
    release_date: date
    # generated once, not constructor arguments
    item_id: str = field(default_factory=_new_item_id, init=False)
    date_added: date = field(default_factory=date.today, init=False)
