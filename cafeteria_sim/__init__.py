"""Discrete-time simulation of a cafeteria serving line with wait-time statistics."""

__version__ = "0.1.0"
__all__ = ["student", "student_queue", "cafeteria", "simulation"]