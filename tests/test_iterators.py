import pytest

from digitlist.errors import ConcurrentModificationError, IllegalIteratorStateError, InvalidDigitError
from digitlist.linked_list import DigitList


def test_forward_iteration():
    digits = DigitList([1, 0, 1, 1])
    assert list(digits) == [1, 0, 1, 1]
    iterator = digits.iterator()
    assert iterator.has_next()
    assert next(iterator) == 1


def test_forward_iterator_exhaustion():
    iterator = iter(DigitList([1]))
    next(iterator)
    assert not iterator.has_next()
    with pytest.raises(StopIteration):
        next(iterator)


def test_forward_iterator_remove():
    digits = DigitList([1, 0, 1, 0])
    iterator = digits.iterator()
    for digit in iterator:
        if digit == 0:
            iterator.remove()
    assert digits.to_list() == [1, 1]


def test_remove_before_next_is_illegal():
    digits = DigitList([1, 0])
    iterator = digits.iterator()
    with pytest.raises(IllegalIteratorStateError):
        iterator.remove()
    next(iterator)
    iterator.remove()
    with pytest.raises(IllegalIteratorStateError):
        iterator.remove()


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.append(1),
        lambda d: d.pop(0),
        lambda d: d.set(0, 0),
        lambda d: d.swap(0, 1),
        lambda d: d.sort_ascending(),
        lambda d: d.shift_left(),
        lambda d: d.clear(),
    ],
)
def test_forward_iterator_fails_fast(mutate):
    digits = DigitList([1, 0, 1])
    iterator = iter(digits)
    mutate(digits)
    with pytest.raises(ConcurrentModificationError):
        next(iterator)
    with pytest.raises(ConcurrentModificationError):
        iterator.has_next()


def test_mutation_inside_for_loop_is_detected():
    digits = DigitList([1, 0, 1])
    with pytest.raises(ConcurrentModificationError):
        for digit in digits:
            digits.append(digit)


@pytest.mark.parametrize("operation", ["has_next", "has_previous", "previous", "next_index", "previous_index"])
def test_list_iterator_fails_fast(operation):
    digits = DigitList([1, 0, 1])
    cursor = digits.list_iterator(1)
    digits.insert(0, 1)
    with pytest.raises(ConcurrentModificationError):
        getattr(cursor, operation)()


def test_list_iterator_fails_fast_on_set_and_add():
    digits = DigitList([1, 0, 1])
    cursor = digits.list_iterator()
    next(cursor)
    digits.pop(2)
    with pytest.raises(ConcurrentModificationError):
        cursor.set(0)
    with pytest.raises(ConcurrentModificationError):
        cursor.add(0)
    with pytest.raises(ConcurrentModificationError):
        cursor.remove()


def test_list_iterator_walks_both_ways():
    digits = DigitList([2, 0, 1], base=3)
    cursor = digits.list_iterator()
    assert not cursor.has_previous()
    assert cursor.next_index() == 0
    assert cursor.previous_index() == -1
    assert [next(cursor), next(cursor), next(cursor)] == [2, 0, 1]
    assert not cursor.has_next()
    assert cursor.next_index() == 3
    assert [cursor.previous(), cursor.previous(), cursor.previous()] == [1, 0, 2]
    with pytest.raises(StopIteration):
        cursor.previous()


def test_list_iterator_start_index():
    digits = DigitList([2, 0, 1], base=3)
    cursor = digits.list_iterator(3)
    assert cursor.previous() == 1
    cursor = digits.list_iterator(1)
    assert next(cursor) == 0
    with pytest.raises(IndexError):
        digits.list_iterator(4)
    with pytest.raises(IndexError):
        digits.list_iterator(-1)


def test_reversed():
    assert list(reversed(DigitList([2, 0, 1], base=3))) == [1, 0, 2]
    assert list(reversed(DigitList())) == []


def test_list_iterator_set():
    digits = DigitList([2, 0, 1], base=3)
    cursor = digits.list_iterator()
    with pytest.raises(IllegalIteratorStateError):
        cursor.set(1)
    next(cursor)
    next(cursor)
    cursor.set(2)
    assert digits.to_list() == [2, 2, 1]
    cursor.previous()
    cursor.set(1)
    assert digits.to_list() == [2, 1, 1]
    with pytest.raises(InvalidDigitError):
        cursor.set(3)
    assert next(cursor) == 1


def test_list_iterator_remove_after_next():
    digits = DigitList([2, 0, 1], base=3)
    cursor = digits.list_iterator()
    next(cursor)
    next(cursor)
    cursor.remove()
    assert digits.to_list() == [2, 1]
    assert cursor.next_index() == 1
    assert next(cursor) == 1


def test_list_iterator_remove_after_previous():
    digits = DigitList([2, 0, 1], base=3)
    cursor = digits.list_iterator(3)
    cursor.previous()
    cursor.previous()
    cursor.remove()
    assert digits.to_list() == [2, 1]
    assert cursor.next_index() == 1
    assert next(cursor) == 1
    assert cursor.previous() == 1
    assert cursor.previous() == 2


def test_list_iterator_add_in_the_middle():
    digits = DigitList([2, 1], base=3)
    cursor = digits.list_iterator()
    next(cursor)
    cursor.add(0)
    assert digits.to_list() == [2, 0, 1]
    assert cursor.next_index() == 2
    assert next(cursor) == 1
    cursor.add(0)
    with pytest.raises(IllegalIteratorStateError):
        cursor.set(1)


def test_list_iterator_add_then_previous():
    digits = DigitList([2, 1], base=3)
    cursor = digits.list_iterator(1)
    cursor.add(0)
    assert cursor.previous() == 0
    assert cursor.previous() == 2


def test_list_iterator_add_at_end_and_on_empty():
    digits = DigitList(base=3)
    cursor = digits.list_iterator()
    cursor.add(1)
    cursor.add(2)
    assert digits.to_list() == [1, 2]
    assert not cursor.has_next()
    assert cursor.previous() == 2
    with pytest.raises(InvalidDigitError):
        cursor.add(7)
    assert digits.to_list() == [1, 2]
