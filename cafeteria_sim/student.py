"""Student records for the cafeteria queue."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student identified by ``id`` who arrived at ``arrival_time``."""

    id: int = 0
    arrival_time: int = 0

    def __str__(self) -> str:
        return f"Student ID: {self.id}, Arrival Time: {self.arrival_time}"