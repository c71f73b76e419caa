from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

E = TypeVar("E")


@runtime_checkable
class FIFOQueue(Protocol[E]):
    """
    Queue contract: first in, first out.
    dequeue/peek raise QueueEmptyError on an empty queue.
    """

    def enqueue(self, item: E) -> None:
        ...

    def dequeue(self) -> E:
        ...

    def peek(self) -> E:
        ...

    def is_empty(self) -> bool:
        ...

    def size(self) -> int:
        ...


class Admissible(Protocol):
    """
    Anything that can wait in an AdmissionQueue.
    is_admissible() is asked once per enqueue; str() is the display form.
    """

    def is_admissible(self) -> bool:
        ...

    def __str__(self) -> str:
        ...


T = TypeVar("T", bound=Admissible)


class QueueError(Exception):
    pass


class QueueFullError(QueueError):
    pass


class QueueEmptyError(QueueError, IndexError):
    pass


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class AdmissionQueue(Generic[T]):
    """
    Bounded FIFO on a singly linked chain, satisfies FIFOQueue
    enqueue/dequeue/peek: O(1)
    copy / iteration: O(n)

    size <= capacity is only checked on enqueue. set_capacity() may drop the
    ceiling below the current size; nothing is removed and the queue stays
    full until enough elements are dequeued.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size: int = 0
        self._capacity: int = capacity

    # -------------------------
    # state
    # -------------------------
    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= self._capacity

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def set_capacity(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        logger.debug("queue capacity %d -> %d (size=%d)", self._capacity, capacity, self._size)
        self._capacity = capacity

    # -------------------------
    # FIFO
    # -------------------------
    def enqueue(self, item: T) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        if not item.is_admissible():
            raise ValueError(f"{item} is not allowed to enter the queue")
        self._append(item)

    def dequeue(self) -> T:
        if self._head is None:
            raise QueueEmptyError("dequeue from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> T:
        if self._head is None:
            raise QueueEmptyError("peek from empty queue")
        return self._head.value

    # -------------------------
    # read-only views
    # -------------------------
    def copy(self) -> AdmissionQueue[T]:
        """
        Structural copy: new nodes, same elements, same capacity.
        Admission checks are not replayed, so over-capacity queues and
        elements that are no longer admissible copy as they are.
        """
        clone: AdmissionQueue[T] = AdmissionQueue(self._capacity)
        node = self._head
        while node is not None:
            clone._append(node.value)
            node = node.next
        return clone

    def to_display(self) -> str:
        lines = []
        node = self._head
        while node is not None:
            lines.append(f"{node.value}\n")
            node = node.next
        return "".join(lines)

    def __iter__(self) -> AdmissionQueueIterator[T]:
        return AdmissionQueueIterator(self)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return self.to_display()

    def __repr__(self) -> str:
        return f"AdmissionQueue(size={self._size}, capacity={self._capacity})"

    # -------------------------
    # internal
    # -------------------------
    def _append(self, item: T) -> None:
        node = _Node(value=item)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1


class AdmissionQueueIterator(Iterator[T]):
    """
    Iterates a private copy of the queue taken at construction.
    The source queue is never read again; the iterator cannot be reset.
    """

    def __init__(self, queue: Optional[AdmissionQueue[T]]) -> None:
        if queue is None:
            raise ValueError("queue must not be None")
        self._snapshot: AdmissionQueue[T] = queue.copy()

    def has_next(self) -> bool:
        return not self._snapshot.is_empty()

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration("no more elements in queue")
        return self._snapshot.dequeue()

    def __next__(self) -> T:
        return self.next()

    def __iter__(self) -> AdmissionQueueIterator[T]:
        return self
