"""Classic comparison and distribution sorts.

Every sort takes an iterable and returns a new sorted list (or, for
``sort_characters``, a new string); the input is never modified.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

DEFAULT_COUNT_LIMIT = 100_001
CHARACTER_RANGE = 255


def _require_non_negative(items: Sequence[int], name: str) -> None:
    if any(value < 0 for value in items):
        raise ValueError(f"{name} only accepts non-negative integers")


def bin_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by dropping each into a bin indexed by its value."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items, "bin_sort")
    bins: list[list[int]] = [[] for _ in range(max(items) + 1)]
    for value in items:
        bins[value].append(value)
    return [value for bucket in bins for value in bucket]


def insertion_sort(values: Iterable) -> list:
    """Sort by shifting larger elements right and inserting each item into place."""
    items = list(values)
    for i in range(1, len(items)):
        value = items[i]
        j = i
        while j > 0 and items[j - 1] > value:
            items[j] = items[j - 1]
            j -= 1
        items[j] = value
    return items


def exchange_insertion_sort(values: Iterable) -> list:
    """Insertion sort that swaps the new item with every larger item before it."""
    items = list(values)
    for i in range(1, len(items)):
        for j in range(i):
            if items[j] > items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def radix_passes(values: Iterable[int]) -> Iterator[list[int]]:
    """Yield the list after each least-significant-digit pass of a base-10 radix sort.

    One pass is made for each decimal digit of the largest value.
    """
    items = list(values)
    _require_non_negative(items, "radix_sort")
    largest = max(items, default=0)
    divisor = 1
    while largest > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        yield list(items)
        divisor *= 10
        largest //= 10


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers with a base-10 radix sort."""
    items = list(values)
    result = items
    for result in radix_passes(items):
        pass
    return list(result)


def cocktail_sort(values: Iterable) -> list:
    """Bidirectional bubble sort that stops as soon as a pass makes no swap."""
    items = list(values)
    start, end = 0, len(items) - 1
    while True:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        start += 1
    return items


def _cycle_position(items: list, start: int, item) -> int:
    position = start + sum(1 for other in items[start + 1:] if other < item)
    while item == items[position]:
        position += 1
    return position


def cycle_sort(values: Iterable) -> list:
    """Sort by rotating each cycle of misplaced elements into its final positions."""
    items = list(values)
    for start in range(len(items) - 1):
        item = items[start]
        position = start + sum(1 for other in items[start + 1:] if other < item)
        if position == start:
            continue
        while item == items[position]:
            position += 1
        items[position], item = item, items[position]
        while position != start:
            position = _cycle_position(items, start, item)
            if item != items[position]:
                items[position], item = item, items[position]
    return items


def merge_sorted(left: Sequence, right: Sequence) -> list:
    """Merge two sorted sequences into one sorted list, taking from ``left`` on ties."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    half = (len(items) + 1) // 2
    return merge_sorted(merge_sort(items[:half]), merge_sort(items[half:]))


def pancake_sort(values: Iterable) -> list:
    """Sort using only prefix reversals ("flips")."""
    items = list(values)
    for size in range(len(items), 1, -1):
        biggest = max(range(size), key=items.__getitem__)
        if biggest != size - 1:
            items[: biggest + 1] = reversed(items[: biggest + 1])
            items[:size] = reversed(items[:size])
    return items


def bubble_sort(values: Iterable, before: Callable[[object, object], bool]) -> list:
    """Bubble sort ordered by ``before(a, b)``, true when ``a`` belongs ahead of ``b``."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        for i in range(last):
            if before(items[i + 1], items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def counting_sort(values: Iterable[int], limit: int = DEFAULT_COUNT_LIMIT) -> list[int]:
    """Stable counting sort of integers in ``range(limit)``."""
    items = list(values)
    for value in items:
        if not 0 <= value < limit:
            raise ValueError(f"value {value} outside range 0..{limit - 1}")
    counts = [0] * limit
    for value in items:
        counts[value] += 1
    running = 0
    for key, count in enumerate(counts):
        counts[key] = running
        running += count
    output = [0] * len(items)
    for value in items:
        output[counts[value]] = value
        counts[value] += 1
    return output


def sort_characters(text: str) -> str:
    """Return the characters of ``text`` in code-point order, by counting sort.

    Only characters with code points up to 255 are accepted.
    """
    counts = [0] * (CHARACTER_RANGE + 1)
    for char in text:
        code = ord(char)
        if code > CHARACTER_RANGE:
            raise ValueError(f"character {char!r} outside range 0..{CHARACTER_RANGE}")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts))


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[end]
    boundary = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    items[end], items[boundary] = items[boundary], items[end]
    return boundary


def quick_sort(values: Iterable) -> list:
    """Quicksort with a last-element pivot (Lomuto partition)."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot_index = _partition(items, start, end)
            pending.append((start, pivot_index - 1))
            pending.append((pivot_index + 1, end))
    return items


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items