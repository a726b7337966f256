from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Ordered items plus an optional highlighted index that wraps at both ends."""

    def __init__(self, items: Optional[List[T]] = None):
        self._items: List[T] = list(items or [])
        self._cursor: Optional[int] = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @property
    def elements(self) -> List[T]:
        return list(self._items)

    def highlighted_index(self) -> Optional[int]:
        return self._cursor

    def highlighted(self) -> Optional[T]:
        if self._cursor is None:
            return None
        return self.get(self._cursor)

    def get(self, index: Optional[int]) -> Optional[T]:
        if index is None or index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def set_first(self):
        if not self._items:
            return
        self._cursor = 0

    def clear_highlight(self):
        self._cursor = None

    def wrap_next(self):
        if not self._items:
            return
        if self._cursor is None:
            self._cursor = 0
            return
        self._cursor = (self._cursor + 1) % len(self._items)

    def wrap_previous(self):
        if not self._items:
            return
        if self._cursor is None:
            self._cursor = 0
            return
        self._cursor = (self._cursor - 1) % len(self._items)

    def replace(self, items: List[T]):
        # whole-list swap; the cursor never outlives the old bounds
        self._items = list(items or [])
        self._cursor = None
