"""
Fail-fast cursors over a DigitList.

Each cursor remembers the list revision it last observed. Any operation on the
cursor after the list was changed through another handle raises
ConcurrentModificationError. The cursor's own remove/set/add keep it in sync.
"""

from typing import TYPE_CHECKING

from digitlist.conversion import ensure_digit
from digitlist.errors import ConcurrentModificationError, IllegalIteratorStateError

if TYPE_CHECKING:
    from digitlist.linked_list import DigitList, DigitNode


class DigitIterator:
    """Forward iterator over the digits of a DigitList, head to tail."""

    def __init__(self, digits: "DigitList"):
        self._digits = digits
        self._next: DigitNode | None = digits.head
        self._last_returned: DigitNode | None = None
        self._expected_revision = digits.revision

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        self._check_for_comodification()
        return self._next is not None

    def __next__(self) -> int:
        self._check_for_comodification()
        if self._next is None:
            raise StopIteration
        self._last_returned = self._next
        self._next = self._next.next
        return self._last_returned.value

    def remove(self) -> None:
        """Remove the digit returned by the last call to next()."""
        self._check_for_comodification()
        if self._last_returned is None:
            raise IllegalIteratorStateError("next() has not been called since the last remove()")
        node = self._last_returned
        self._last_returned = None
        self._digits._unlink(node)
        self._expected_revision = self._digits.revision

    def _check_for_comodification(self) -> None:
        if self._expected_revision != self._digits.revision:
            raise ConcurrentModificationError(
                f"List changed during iteration (revision {self._digits.revision}, expected {self._expected_revision})"
            )


class DigitListIterator(DigitIterator):
    """
    Bidirectional cursor positioned between two digits.

    The cursor sits before the digit at next_index(). next() moves it right,
    previous() moves it left; remove() and set() act on whichever digit was
    returned last.
    """

    def __init__(self, digits: "DigitList", index: int = 0):
        super().__init__(digits)
        self._next_index = index
        self._next = None if index == digits.size else digits._node_at(index)

    def has_next(self) -> bool:
        self._check_for_comodification()
        return self._next_index < self._digits.size

    def __next__(self) -> int:
        self._check_for_comodification()
        if self._next_index >= self._digits.size:
            raise StopIteration
        self._last_returned = self._next
        self._next = self._next.next
        self._next_index += 1
        return self._last_returned.value

    def has_previous(self) -> bool:
        self._check_for_comodification()
        return self._next_index > 0

    def previous(self) -> int:
        self._check_for_comodification()
        if self._next_index <= 0:
            raise StopIteration
        # Stepping back from the end starts at the tail
        self._next = self._digits.tail if self._next is None else self._next.prev
        self._last_returned = self._next
        self._next_index -= 1
        return self._last_returned.value

    def next_index(self) -> int:
        self._check_for_comodification()
        return self._next_index

    def previous_index(self) -> int:
        self._check_for_comodification()
        return self._next_index - 1

    def remove(self) -> None:
        self._check_for_comodification()
        if self._last_returned is None:
            raise IllegalIteratorStateError("next() or previous() has not been called")
        node = self._last_returned
        following = node.next
        self._digits._unlink(node)
        if self._next is node:
            # Removed after previous(): the cursor index is unchanged
            self._next = following
        else:
            self._next_index -= 1
        self._last_returned = None
        self._expected_revision = self._digits.revision

    def set(self, digit: int) -> None:
        """Replace the digit returned by the last next() or previous()."""
        self._check_for_comodification()
        if self._last_returned is None:
            raise IllegalIteratorStateError("next() or previous() has not been called")
        self._last_returned.value = ensure_digit(digit, self._digits.base)
        self._digits.revision += 1
        self._expected_revision = self._digits.revision

    def add(self, digit: int) -> None:
        """Insert `digit` before the cursor; a following previous() returns it."""
        self._check_for_comodification()
        ensure_digit(digit, self._digits.base)
        if self._next is None:
            self._digits._link_last(digit)
        else:
            self._digits._link_before(digit, self._next)
        self._next_index += 1
        self._last_returned = None
        self._expected_revision = self._digits.revision
