"""
PhotoGrid - Selection Model

Holds the set of selected item keys. The grid is in selection mode
whenever the set is non-empty.
"""

from collections.abc import Callable

from photogrid.utils.exceptions import DragContractError
from photogrid.utils.logger import logger


def key_range(start: int, end: int) -> range:
    """Inclusive range of keys between two endpoints, in either order."""
    return range(min(start, end), max(start, end) + 1)


class SelectionModel:
    """Set of selected keys with change notification.

    Listeners registered with ``connect`` receive the model after every
    operation that actually changed the set.
    """

    def __init__(self, selected: set[int] | None = None) -> None:
        self._selected: set[int] = set(selected or ())
        self._listeners: list[Callable[["SelectionModel"], None]] = []

    def connect(self, callback: Callable[["SelectionModel"], None]) -> None:
        self._listeners.append(callback)

    def disconnect(self, callback: Callable[["SelectionModel"], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _commit(self, new_selection: set[int]) -> None:
        if new_selection == self._selected:
            return
        self._selected = new_selection
        for callback in list(self._listeners):
            callback(self)

    # --- Queries ---

    def is_selected(self, key: int) -> bool:
        return key in self._selected

    def is_empty(self) -> bool:
        return not self._selected

    @property
    def in_selection_mode(self) -> bool:
        """True while at least one item is selected."""
        return bool(self._selected)

    def selected_keys(self) -> list[int]:
        return sorted(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, key: object) -> bool:
        return key in self._selected

    # --- Mutations ---

    def add(self, key: int) -> None:
        self._commit(self._selected | {key})

    def remove(self, key: int) -> None:
        self._commit(self._selected - {key})

    def toggle(self, key: int) -> None:
        if key in self._selected:
            self.remove(key)
        else:
            self.add(key)

    def clear(self) -> None:
        self._commit(set())

    def replace_range(
        self,
        old_anchor: int | None,
        old_last: int | None,
        new_anchor: int | None,
        new_last: int | None,
    ) -> None:
        """Swap the keys covered by a drag from one range to another.

        Every key between ``old_anchor`` and ``old_last`` is removed, then
        every key between ``new_anchor`` and ``new_last`` is added. Keys
        outside both ranges keep their state, so items picked by taps
        survive a drag passing nearby.

        Raises:
            DragContractError: If any endpoint is missing
        """
        if None in (old_anchor, old_last, new_anchor, new_last):
            logger.error(
                f"replace_range called with a missing endpoint: "
                f"{old_anchor}..{old_last} -> {new_anchor}..{new_last}"
            )
            raise DragContractError(
                "range replaced without both endpoints", anchor=new_anchor, last=new_last
            )

        updated = self._selected.difference(key_range(old_anchor, old_last))
        updated.update(key_range(new_anchor, new_last))
        self._commit(updated)
