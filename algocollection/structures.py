"""Running medians, linked lists, a max-heap, a linked queue and stack-based helpers."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


def running_medians(values: Iterable[int]) -> list[float]:
    """Return the median of every prefix of ``values``.

    Prefixes of odd length give the middle element itself; prefixes of even
    length give the mean of the two middle elements.
    """
    lower: list = []  # max-heap of the smaller half, stored negated
    upper: list = []  # min-heap of the larger half
    medians: list = []
    for x in values:
        if not lower:
            heapq.heappush(lower, -x)
            medians.append(x)
            continue
        if len(lower) > len(upper):
            if -lower[0] > x:
                heapq.heappush(upper, -heapq.heapreplace(lower, -x))
            else:
                heapq.heappush(upper, x)
            medians.append((-lower[0] + upper[0]) / 2)
        else:
            if x <= -lower[0]:
                heapq.heappush(lower, -x)
            else:
                heapq.heappush(lower, -heapq.heappushpop(upper, x))
            medians.append(-lower[0])
    return medians


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional[ListNode] = None

    @classmethod
    def from_iterable(cls, values: Iterable) -> Optional[ListNode]:
        """Build a linked list holding ``values`` in order; ``None`` when empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.value
            node = node.next


def merge_sorted_lists(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted linked lists into one sorted list, taking from ``a`` on ties.

    The nodes are relinked in place; no new nodes are made.
    """
    anchor = ListNode(None)
    tail = anchor
    while a is not None and b is not None:
        if a.value <= b.value:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return anchor.next


class MaxHeap:
    """A binary max-heap kept in a list, rebuilt bottom-up after every change."""

    def __init__(self) -> None:
        self._items: list = []

    def insert(self, value) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._rebuild()

    def delete(self, value) -> None:
        """Remove one occurrence of ``value``; raise ``ValueError`` if it is absent."""
        items = self._items
        try:
            index = items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        items[index], items[-1] = items[-1], items[index]
        items.pop()
        self._rebuild()

    def _rebuild(self) -> None:
        for root in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(root)

    def _sift_down(self, root: int) -> None:
        items = self._items
        size = len(items)
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

    def __iter__(self) -> Iterator:
        """Iterate over the heap's array in storage order."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class _QueueNode:
    __slots__ = ("value", "link")

    def __init__(self, value) -> None:
        self.value = value
        self.link: Optional[_QueueNode] = None


class LinkedQueue:
    """A first-in first-out queue built on a singly linked list."""

    def __init__(self) -> None:
        self._front: Optional[_QueueNode] = None
        self._rear: Optional[_QueueNode] = None
        self._size = 0

    def enqueue(self, value) -> None:
        """Add ``value`` at the rear."""
        node = _QueueNode(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.link = node
        self._rear = node
        self._size += 1

    def dequeue(self):
        """Remove and return the front value; raise ``IndexError`` when empty."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.link
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator:
        node = self._front
        while node is not None:
            yield node.value
            node = node.link

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._front is None:
            return "Empty Queue"
        return "Elements in the current Queue are : " + " ".join(str(v) for v in self)


def stock_span(prices: Sequence) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price no higher."""
    spans: list[int] = []
    stack: list[tuple[Any, int]] = []
    for i, price in enumerate(prices):
        while stack and stack[-1][0] <= price:
            stack.pop()
        spans.append(i - stack[-1][1] if stack else i + 1)
        stack.append((price, i))
    return spans


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_divide,
    "^": operator.xor,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    ``/`` truncates toward zero and ``^`` is bitwise exclusive or. Whitespace
    is ignored. Malformed expressions raise ``ValueError``; division by zero
    raises ``ZeroDivisionError``.
    """
    stack: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATORS[char](left, right))
        elif char in "0123456789":
            stack.append(int(char))
        else:
            raise ValueError(f"unexpected character {char!r}")
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]


def linear_search(values: Iterable, key) -> int:
    """Return the index of the first item equal to ``key``, or -1 if there is none."""
    return next((i for i, value in enumerate(values) if value == key), -1)