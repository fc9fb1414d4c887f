"""
Ordered collections of repeatable form rows (professionals, procedures).

Rows are addressed by a stable id assigned on creation, never by position.
"""

import itertools
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

from utils.logging_config import setup_logging

logger = setup_logging(name=__name__)

T = TypeVar("T", bound=BaseModel)


class IdSequence:
    """Session-wide id source. Ids are never reused, even across resets."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return str(next(self._counter))


class EntityList(Generic[T]):
    """
    Arena of rows keyed by id, iterated in insertion order.

    At least one row always exists: the list starts with a stub and
    refuses to remove its last row.
    """

    def __init__(self, factory: Callable[[str], T], ids: Optional[IdSequence] = None):
        """
        Args:
            factory: Builds an empty row for a given id
            ids: Id source (shared with other lists if desired)
        """
        self._factory = factory
        self._ids = ids or IdSequence()
        self._rows: Dict[str, T] = {}
        self.add()

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._rows.values()))

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, row_id: str) -> bool:
        return row_id in self._rows

    def get(self, row_id: str) -> Optional[T]:
        return self._rows.get(row_id)

    def ids(self) -> List[str]:
        return list(self._rows)

    def add(self) -> str:
        """Append an empty row and return its id."""
        row_id = self._ids.next_id()
        self._rows[row_id] = self._factory(row_id)
        return row_id

    def remove(self, row_id: str) -> bool:
        """
        Remove a row.

        Returns:
            True if removed; False if the id is unknown or it is the last row
        """
        if row_id not in self._rows:
            return False
        if len(self._rows) == 1:
            logger.warning(f"Refusing to remove last row {row_id}")
            return False
        del self._rows[row_id]
        return True

    def update(self, row_id: str, field: str, value) -> bool:
        """
        Set one field of a row. Unknown ids are ignored.

        Returns:
            True if the row exists and was updated

        Raises:
            ValueError: If the field does not exist, is the id, or the
                value fails the row's validation
        """
        row = self._rows.get(row_id)
        if row is None:
            return False
        if field == "id" or field not in type(row).model_fields:
            raise ValueError(f"Cannot update field {field!r} of {type(row).__name__}")
        setattr(row, field, value)
        return True

    def reset(self) -> None:
        """Drop every row and start again from a single stub."""
        self._rows.clear()
        self.add()

    def submittable(self) -> List[T]:
        """Rows that are not drafts, in order."""
        return [row for row in self._rows.values() if not row.is_draft()]


class SlugField:
    """
    Slug derived from the business name until the user edits it.

    Once `touched`, name changes no longer overwrite the slug.
    """

    def __init__(self):
        self.value = ""
        self.touched = False

    def derive(self, slug: str) -> bool:
        """Apply a name-derived slug unless the user has edited it."""
        if self.touched:
            return False
        self.value = slug
        return True

    def edit(self, value: str) -> None:
        """Manual edit; makes the slug sticky."""
        self.value = value
        self.touched = True

    def reset(self) -> None:
        self.value = ""
        self.touched = False
