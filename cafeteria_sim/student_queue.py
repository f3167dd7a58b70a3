"""A first-in, first-out queue of students that grows as needed."""

from __future__ import annotations

from collections import deque

from .student import Student


class StudentQueue:
    """FIFO queue of students whose capacity doubles when it fills up."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._items: deque[Student] = deque()

    def enqueue(self, student: Student) -> None:
        """Add ``student`` at the back, growing the capacity when full."""
        if len(self._items) == self.capacity:
            self.capacity = self.capacity * 2 if self.capacity else 1
        self._items.append(student)

    def dequeue(self) -> Student:
        """Remove and return the front student, or a default student if empty."""
        if not self._items:
            return Student()
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)