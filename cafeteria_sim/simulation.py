"""Minute-by-minute simulation of a cafeteria line."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence, TextIO

from .cafeteria import CafeteriaQueue
from .student import Student

DEFAULT_DURATION = 60
ARRIVAL_PERCENT = 30


class Simulation:
    """Random arrivals joining one cafeteria line served by a single server."""

    def __init__(
        self,
        duration: int = DEFAULT_DURATION,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.duration = duration
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout
        self.current_time = 0
        self.next_student_id = 1
        self.service_time_left = 0
        self.current_student = Student()
        self.is_serving = False
        self.cafeteria = CafeteriaQueue()

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def student_arrives(self) -> bool:
        """Return True with a 30% chance."""
        return self.rng.randrange(100) < ARRIVAL_PERCENT

    def generate_service_time(self) -> int:
        """Return a random service time from 2 to 5 minutes."""
        return self.rng.randrange(4) + 2

    def run(self) -> CafeteriaQueue:
        """Run the simulation, report each event and the summary, return the queue."""
        self._say("- - - Cafeteria Simulation - - -\n")
        for self.current_time in range(self.duration):
            now = self.current_time
            if self.is_serving:
                self.service_time_left -= 1
                if self.service_time_left == 0:
                    self._say(
                        f"Time {now}: Finished serving student "
                        f"#{self.current_student.id}."
                    )
                    self.is_serving = False

            if self.student_arrives():
                student = Student(self.next_student_id, now)
                self.next_student_id += 1
                self.cafeteria.add_student(student)
                self._say(f"Time {now}: Student #{student.id} joined queue.")

            if not self.is_serving and self.cafeteria.has_students():
                self.current_student = self.cafeteria.serve_student(now)
                self.service_time_left = self.generate_service_time()
                self.is_serving = True
                self._say(
                    f"Time {now}: Started serving student "
                    f"#{self.current_student.id} "
                    f"(service: {self.service_time_left} minutes)."
                )

        self.cafeteria.print_summary(self.out)
        return self.cafeteria


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a cafeteria line.")
    parser.add_argument(
        "--duration", type=int, default=DEFAULT_DURATION, help="minutes to simulate"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    Simulation(duration=args.duration, rng=random.Random(args.seed)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())