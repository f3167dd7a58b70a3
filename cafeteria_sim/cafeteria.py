"""Cafeteria line that tracks how long served students waited."""

from __future__ import annotations

import sys
from typing import TextIO

from .student import Student
from .student_queue import StudentQueue


class CafeteriaQueue:
    """A queue of students plus the wait times of those already served."""

    def __init__(self) -> None:
        self._queue = StudentQueue()
        self._wait_times: list[int] = []

    def add_student(self, student: Student) -> None:
        self._queue.enqueue(student)

    def has_students(self) -> bool:
        return not self._queue.is_empty()

    def has_served_students(self) -> bool:
        return self.total_served() > 0

    def serve_student(self, current_time: int) -> Student:
        """Take the front student and record the wait up to ``current_time``.

        Returns a default student, recording nothing, when the queue is empty.
        """
        if not self.has_students():
            return Student()
        student = self._queue.dequeue()
        self._wait_times.append(current_time - student.arrival_time)
        return student

    def total_served(self) -> int:
        return len(self._wait_times)

    def average_wait_time(self) -> float:
        if not self._wait_times:
            return 0.0
        return sum(self._wait_times) / len(self._wait_times)

    def max_wait_time(self) -> int:
        return max(self._wait_times, default=0)

    def students_left_in_queue(self) -> int:
        return len(self._queue)

    def summary(self) -> str:
        """Return the end-of-run statistics as text."""
        return (
            "\n--- Simulation Results ---\n"
            f"Total served: {self.total_served()}\n"
            f"Average wait time: {self.average_wait_time():g} minutes\n"
            f"Maximum wait time: {self.max_wait_time()} minutes\n"
            f"Students left in queue: {self.students_left_in_queue()}\n"
        )

    def print_summary(self, file: TextIO | None = None) -> None:
        (file if file is not None else sys.stdout).write(self.summary())