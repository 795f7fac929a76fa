"""Step-by-step sorting algorithms.

Every algorithm is a generator that sorts ``values`` in place between the
inclusive bounds ``left`` and ``right`` and yields a :class:`Step` after each
notable operation, so that a viewer can pause, draw and play a tone between
steps. Closing the generator stops the sort where it is.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Generator, Iterator, MutableSequence

__all__ = [
    "Color",
    "Step",
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "insertion_sort",
    "bubble_sort",
    "selection_sort",
    "bogo_sort",
    "is_sorted",
    "shuffle",
]


class Color(IntEnum):
    """Colour of a bar."""

    WHITE = 0
    RED = 1
    GREEN = 2


@dataclass(frozen=True)
class Step:
    """What one step highlights. An index outside the list means "none"."""

    red: int = -1
    first_green: int = -1
    second_green: int = -1
    sound: int = -1

    def colors(self, size: int) -> list[Color]:
        """Return the colour of each of ``size`` bars for this step."""
        result = [Color.WHITE] * size
        for index, color in (
            (self.red, Color.RED),
            (self.first_green, Color.GREEN),
            (self.second_green, Color.GREEN),
        ):
            if 0 <= index < size:
                result[index] = color
        return result


Steps = Iterator[Step]


def _upper(values: MutableSequence[int], right: int | None) -> int:
    return len(values) - 1 if right is None else right


def quick_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> Steps:
    """Quick sort: divide and conquer around the last element as pivot."""
    pending = [(left, _upper(values, right))]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = values[hi]
        i = lo - 1
        for j in range(lo, hi):
            if values[j] < pivot:
                i += 1
                values[i], values[j] = values[j], values[i]
                yield Step(first_green=j, second_green=hi, sound=j)
        values[i + 1], values[hi] = values[hi], values[i + 1]
        yield Step(red=i + 1, first_green=hi, sound=i + 1)
        pivot_index = i + 1
        # Left part is handled first, as in a depth-first recursion.
        pending.append((pivot_index + 1, hi))
        pending.append((lo, pivot_index - 1))


def _merge(values: MutableSequence[int], left: int, mid: int, right: int) -> Steps:
    lower = list(values[left : mid + 1])
    upper = list(values[mid + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(lower) and j < len(upper):
        if lower[i] <= upper[j]:
            values[k] = lower[i]
            i += 1
        else:
            values[k] = upper[j]
            j += 1
        k += 1
        yield Step(red=k - 1, first_green=left + i, second_green=mid + 1 + j, sound=k - 1)
    for rest in (lower[i:], upper[j:]):
        for value in rest:
            values[k] = value
            k += 1
            yield Step(first_green=k - 1, sound=k - 1)


def merge_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> Steps:
    """Merge sort: sort both halves, then merge them."""
    right = _upper(values, right)
    if left >= right:
        return
    mid = (left + right) // 2
    yield from merge_sort(values, left, mid)
    yield from merge_sort(values, mid + 1, right)
    yield from _merge(values, left, mid, right)


def _heapify(values: MutableSequence[int], size: int, root: int) -> Steps:
    while True:
        largest = root
        child_left = 2 * root + 1
        child_right = 2 * root + 2
        if child_left < size and values[child_left] > values[largest]:
            largest = child_left
        if child_right < size and values[child_right] > values[largest]:
            largest = child_right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        yield Step(first_green=root, second_green=largest, sound=root)
        root = largest


def heap_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> Steps:
    """Heap sort over ``right - left + 1`` elements; the heap is rooted at index 0."""
    size = _upper(values, right) - left + 1
    for root in range(size // 2 - 1, -1, -1):
        yield from _heapify(values, size, root)
    for end in range(size - 1, -1, -1):
        values[0], values[end] = values[end], values[0]
        yield Step(first_green=0, second_green=end, sound=end)
        yield from _heapify(values, end, 0)


def insertion_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> Steps:
    """Insertion sort: shift each element left into its place."""
    right = _upper(values, right)
    for i in range(left + 1, right + 1):
        key = values[i]
        j = i - 1
        while j >= left and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
            yield Step(first_green=j, second_green=j + 1, sound=j)
        values[j + 1] = key


def bubble_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> Steps:
    """Bubble sort: swap neighbours that are out of order, pass after pass."""
    right = _upper(values, right)
    for i in range(left, right):
        for j in range(left, right - i):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                yield Step(first_green=j, second_green=j + 1, sound=j + 1)


def selection_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> Steps:
    """Selection sort: move the smallest remaining element to the front."""
    right = _upper(values, right)
    for i in range(left, right):
        min_index = i
        for j in range(i + 1, right + 1):
            if values[j] < values[min_index]:
                min_index = j
            yield Step(first_green=j, second_green=min_index, sound=j)
        if min_index != i:
            values[i], values[min_index] = values[min_index], values[i]
            yield Step(red=i, second_green=min_index, sound=min_index)


def is_sorted(
    values: MutableSequence[int], left: int = 0, right: int | None = None
) -> Generator[Step, None, bool]:
    """Check the order pair by pair, yielding a step for each pair in order.

    The generator's return value is whether the range is sorted.
    """
    right = _upper(values, right)
    for i in range(left, right):
        if values[i] > values[i + 1]:
            return False
        yield Step(first_green=i, second_green=i + 1, sound=i)
    return True


def shuffle(
    values: MutableSequence[int],
    left: int = 0,
    right: int | None = None,
    rng: random.Random | None = None,
) -> None:
    """Shuffle the range in place by swapping each element with a random one."""
    right = _upper(values, right)
    rng = rng or random.Random()
    width = right - left + 1
    for i in range(left, right):
        j = rng.randrange(width) + left
        values[i], values[j] = values[j], values[i]


def bogo_sort(
    values: MutableSequence[int],
    left: int = 0,
    right: int | None = None,
    rng: random.Random | None = None,
) -> Steps:
    """Bogo sort: shuffle until the range happens to be sorted."""
    right = _upper(values, right)
    rng = rng or random.Random()
    while not (yield from is_sorted(values, left, right)):
        shuffle(values, left, right, rng)
        yield Step(sound=0)