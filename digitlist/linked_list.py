import os
from collections.abc import Iterable, Iterator

from digitlist.constants import BASE_EXTRA, BASE_MAIN, RECORD_BOOK_NUMBER
from digitlist.conversion import digits_to_int, ensure_digit, int_to_digits
from digitlist.decimal_text import parse_decimal_lenient, read_decimal_file, render_decimal, write_decimal_file
from digitlist.iterators import DigitIterator, DigitListIterator
from digitlist.logging_config import get_logger

logger = get_logger(__name__)


class DigitNode:
    """Node of the doubly linked digit chain."""

    def __init__(self, value: int):
        self.value = value
        self.prev: DigitNode | None = None
        self.next: DigitNode | None = None

    def __repr__(self):
        return f"Node({self.value})"

    def __eq__(self, other):
        if not isinstance(other, DigitNode):
            return False
        return self is other

    def __hash__(self):
        return hash(id(self))


class DigitList:
    """
    Non-negative integer stored as a doubly linked list of digits in a fixed base.

    Index 0 holds the most significant digit. An empty list represents zero.
    Every mutation bumps `revision`, which the iterators use to fail fast.
    """

    def __init__(self, digits: Iterable[int] = (), base: int = BASE_MAIN):
        """
        Args:
            digits: Initial digits, most significant first. Each is validated against `base`.
            base: Radix of this list, at least 2. It never changes afterwards.
        """
        if isinstance(base, bool) or not isinstance(base, int) or base < 2:
            raise ValueError(f"Base must be an integer >= 2, got {base!r}")
        self._base = base
        self.head: DigitNode | None = None
        self.tail: DigitNode | None = None
        self.size = 0
        self.revision = 0

        for digit in digits:
            self.append(digit)

    # ----- construction from numbers and text -----

    @classmethod
    def of_integer(cls, value: int | None, base: int = BASE_MAIN) -> "DigitList":
        """Build a list holding `value` in `base`."""
        digits = cls(base=base)
        digits.from_integer(value)
        return digits

    @classmethod
    def from_decimal_string(cls, text: str | None) -> "DigitList":
        """Build a base-2 list from decimal text. Malformed or missing text gives an empty list."""
        return cls.of_integer(parse_decimal_lenient(text), BASE_MAIN)

    @classmethod
    def from_file(cls, path: str | os.PathLike | None) -> "DigitList":
        """Build a base-2 list from a file holding decimal text. Unreadable files give an empty list."""
        return cls.of_integer(read_decimal_file(path), BASE_MAIN)

    @staticmethod
    def record_book_number() -> int:
        return RECORD_BOOK_NUMBER

    @property
    def base(self) -> int:
        return self._base

    # ----- chain mechanics -----

    def _link_last(self, digit: int) -> DigitNode:
        """Add a digit after the tail and return the new node."""
        new_node = DigitNode(ensure_digit(digit, self._base))
        if self.tail is None:
            self.head = self.tail = new_node
        else:
            new_node.prev = self.tail
            self.tail.next = new_node
            self.tail = new_node
        self.size += 1
        self.revision += 1
        return new_node

    def _link_before(self, digit: int, successor: DigitNode) -> DigitNode:
        """Insert a digit right before `successor` and return the new node."""
        new_node = DigitNode(ensure_digit(digit, self._base))
        predecessor = successor.prev
        new_node.next = successor
        new_node.prev = predecessor
        successor.prev = new_node
        if predecessor is None:
            self.head = new_node
        else:
            predecessor.next = new_node
        self.size += 1
        self.revision += 1
        return new_node

    def _unlink(self, node: DigitNode) -> int:
        """Remove a node from the chain in O(1) time and return its digit."""
        if node.prev:
            node.prev.next = node.next
        else:
            self.head = node.next

        if node.next:
            node.next.prev = node.prev
        else:
            self.tail = node.prev

        node.prev = node.next = None
        self.size -= 1
        self.revision += 1
        return node.value

    def _node_at(self, index: int) -> DigitNode:
        # Walk from whichever end is closer
        if index < (self.size >> 1):
            current = self.head
            for _ in range(index):
                current = current.next
        else:
            current = self.tail
            for _ in range(self.size - 1, index, -1):
                current = current.prev
        return current

    def _check_element_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0 or index >= self.size:
            raise IndexError(f"index={index}, size={self.size}")

    def _check_position_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0 or index > self.size:
            raise IndexError(f"index={index}, size={self.size}")

    # ----- list contract -----

    def __len__(self) -> int:
        return self.size

    def is_empty(self) -> bool:
        return self.size == 0

    def __contains__(self, digit) -> bool:
        return self.index_of(digit) != -1

    def contains(self, digit) -> bool:
        return digit in self

    def contains_all(self, digits: Iterable[int]) -> bool:
        return all(digit in self for digit in digits)

    def get(self, index: int) -> int:
        self._check_element_index(index)
        return self._node_at(index).value

    def set(self, index: int, digit: int) -> int:
        """Replace the digit at `index` and return the previous one."""
        ensure_digit(digit, self._base)
        self._check_element_index(index)
        node = self._node_at(index)
        old = node.value
        node.value = digit
        self.revision += 1
        return old

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(self.size)
            if step != 1:
                raise ValueError("DigitList slices do not support a step")
            return self.sub_list(start, max(start, stop))
        return self.get(index)

    def __setitem__(self, index: int, digit: int) -> None:
        self.set(index, digit)

    def __delitem__(self, index: int) -> None:
        self.pop(index)

    def append(self, digit: int) -> None:
        self._link_last(digit)

    def extend(self, digits: Iterable[int]) -> bool:
        """Append every digit of `digits`. Returns True if the list changed."""
        return self.insert_all(self.size, digits)

    def insert(self, index: int, digit: int) -> None:
        ensure_digit(digit, self._base)
        self._check_position_index(index)
        if index == self.size:
            self._link_last(digit)
        else:
            self._link_before(digit, self._node_at(index))

    def insert_all(self, index: int, digits: Iterable[int]) -> bool:
        """
        Splice a run of digits in before position `index`.

        All digits are validated before the chain is touched.

        Returns:
            True if at least one digit was inserted.
        """
        if digits is None:
            raise ValueError("digits must not be None")
        self._check_position_index(index)
        run = [ensure_digit(digit, self._base) for digit in digits]
        if not run:
            return False

        successor = None if index == self.size else self._node_at(index)
        predecessor = self.tail if successor is None else successor.prev

        for digit in run:
            new_node = DigitNode(digit)
            if predecessor is None:
                self.head = new_node
            else:
                predecessor.next = new_node
                new_node.prev = predecessor
            predecessor = new_node
            self.size += 1
            self.revision += 1

        if successor is None:
            self.tail = predecessor
        else:
            successor.prev = predecessor
            predecessor.next = successor
        return True

    def pop(self, index: int) -> int:
        """Remove the digit at `index` and return it."""
        self._check_element_index(index)
        return self._unlink(self._node_at(index))

    def remove(self, digit) -> bool:
        """Remove the first occurrence of `digit`. Returns False if it is absent."""
        if isinstance(digit, bool) or not isinstance(digit, int):
            return False
        current = self.head
        while current:
            if current.value == digit:
                self._unlink(current)
                return True
            current = current.next
        return False

    def remove_all(self, digits: Iterable[int]) -> bool:
        targets = list(digits)
        modified = False
        iterator = self.iterator()
        for digit in iterator:
            if digit in targets:
                iterator.remove()
                modified = True
        return modified

    def retain_all(self, digits: Iterable[int]) -> bool:
        keep = list(digits)
        modified = False
        iterator = self.iterator()
        for digit in iterator:
            if digit not in keep:
                iterator.remove()
                modified = True
        return modified

    def clear(self) -> None:
        current = self.head
        while current:
            following = current.next
            current.prev = current.next = None
            current = following
        self.head = self.tail = None
        self.size = 0
        self.revision += 1

    def index_of(self, digit) -> int:
        if isinstance(digit, bool) or not isinstance(digit, int):
            return -1
        index = 0
        current = self.head
        while current:
            if current.value == digit:
                return index
            current = current.next
            index += 1
        return -1

    def last_index_of(self, digit) -> int:
        if isinstance(digit, bool) or not isinstance(digit, int):
            return -1
        index = self.size - 1
        current = self.tail
        while current:
            if current.value == digit:
                return index
            current = current.prev
            index -= 1
        return -1

    def sub_list(self, from_index: int, to_index: int) -> "DigitList":
        """Return a new list with the digits in [from_index, to_index), in the same base."""
        if from_index < 0 or to_index > self.size or from_index > to_index:
            raise IndexError(f"from_index={from_index}, to_index={to_index}, size={self.size}")
        result = DigitList(base=self._base)
        if from_index == to_index:
            return result

        current = self._node_at(from_index)
        for _ in range(from_index, to_index):
            result._link_last(current.value)
            current = current.next
        return result

    def swap(self, index1: int, index2: int) -> bool:
        """Exchange two digits. Returns False instead of raising when an index is out of range."""
        if index1 == index2:
            return True
        if index1 < 0 or index2 < 0 or index1 >= self.size or index2 >= self.size:
            return False

        node1 = self._node_at(index1)
        node2 = self._node_at(index2)
        node1.value, node2.value = node2.value, node1.value
        self.revision += 1
        return True

    def to_list(self) -> list[int]:
        result = []
        current = self.head
        while current:
            result.append(current.value)
            current = current.next
        return result

    # ----- iteration -----

    def iterator(self) -> DigitIterator:
        return DigitIterator(self)

    def __iter__(self) -> DigitIterator:
        return self.iterator()

    def list_iterator(self, index: int = 0) -> DigitListIterator:
        """Return a bidirectional cursor positioned before the digit at `index`."""
        self._check_position_index(index)
        return DigitListIterator(self, index)

    def __reversed__(self) -> Iterator[int]:
        cursor = self.list_iterator(self.size)
        while cursor.has_previous():
            yield cursor.previous()

    # ----- ordering and rotation -----

    def sort_ascending(self) -> None:
        self._insertion_sort(descending=False)

    def sort_descending(self) -> None:
        self._insertion_sort(descending=True)

    def _insertion_sort(self, descending: bool) -> None:
        """Stable insertion sort that shifts values through the sorted prefix."""
        if self.size < 2:
            return

        current = self.head.next
        while current:
            key = current.value
            scan = current.prev
            while scan and (scan.value < key if descending else scan.value > key):
                scan.next.value = scan.value
                scan = scan.prev
            if scan is None:
                self.head.value = key
            else:
                scan.next.value = key
            current = current.next
        self.revision += 1

    def shift_left(self) -> None:
        """Rotate left: the head node becomes the tail."""
        if self.size < 2:
            return
        first = self.head
        self.head = first.next
        self.head.prev = None

        first.next = None
        first.prev = self.tail
        self.tail.next = first
        self.tail = first
        self.revision += 1

    def shift_right(self) -> None:
        """Rotate right: the tail node becomes the head."""
        if self.size < 2:
            return
        last = self.tail
        self.tail = last.prev
        self.tail.next = None

        last.prev = None
        last.next = self.head
        self.head.prev = last
        self.head = last
        self.revision += 1

    # ----- numeric operations -----

    def to_integer(self, base: int | None = None) -> int:
        """Value of the digit chain read in `base` (the list's own base by default)."""
        return digits_to_int(self.to_list(), self._base if base is None else base)

    def from_integer(self, value: int | None) -> None:
        """Replace the contents with the digits of `value` in this list's base. None or 0 empties it."""
        digits = int_to_digits(value, self._base)
        self.clear()
        for digit in digits:
            self._link_last(digit)

    def change_scale(self) -> "DigitList":
        """Return a new list with the same value in the alternate base. The receiver is unchanged."""
        value = self.to_integer()
        logger.debug(f"Changing scale of {value} from base {self._base} to base {BASE_EXTRA}")
        return DigitList.of_integer(value, BASE_EXTRA)

    def divide(self, other: Iterable[int]) -> "DigitList":
        """
        Integer division of this number by `other`.

        Args:
            other: Any iterable of digits, most significant first. Its own `base` is used when it
                has one, otherwise the digits are read in this list's base.

        Returns:
            A new list in this list's base holding the truncated quotient.

        Raises:
            ZeroDivisionError: If `other` represents zero.
        """
        if other is None:
            raise ValueError("Divisor must not be None")
        other_base = getattr(other, "base", self._base)
        dividend = self.to_integer()
        divisor = digits_to_int(other, other_base)
        if divisor == 0:
            raise ZeroDivisionError("Division by zero")

        quotient = dividend // divisor
        logger.debug(f"{dividend} // {divisor} = {quotient} (base {self._base})")
        return DigitList.of_integer(quotient, self._base)

    def __floordiv__(self, other):
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.divide(other)

    def to_decimal_string(self) -> str:
        return render_decimal(self.to_integer())

    def save(self, path: str | os.PathLike) -> None:
        """Write the value to `path` as decimal text."""
        write_decimal_file(path, self.to_integer())

    # ----- comparison and display -----

    def __eq__(self, other):
        if isinstance(other, DigitList):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None

    def __str__(self):
        return "".join(str(digit) for digit in self.to_list())

    def __repr__(self):
        return f"DigitList({self.to_list()}, base={self._base})"
