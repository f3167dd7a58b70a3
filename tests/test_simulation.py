import io
import random

from cafeteria_sim.simulation import Simulation, main


class _FixedRng:
    """Answers every draw with the same position in the range."""

    def __init__(self, highest: bool) -> None:
        self.highest = highest

    def randrange(self, n):
        return n - 1 if self.highest else 0


def test_student_arrives_when_draw_is_low():
    sim = Simulation(rng=_FixedRng(highest=False), out=io.StringIO())
    assert sim.student_arrives() is True


def test_no_arrival_when_draw_is_high():
    sim = Simulation(rng=_FixedRng(highest=True), out=io.StringIO())
    assert sim.student_arrives() is False


def test_service_time_range():
    sim = Simulation(rng=random.Random(3), out=io.StringIO())
    times = {sim.generate_service_time() for _ in range(500)}
    assert times == {2, 3, 4, 5}


def test_default_duration():
    assert Simulation(out=io.StringIO()).duration == 60


def test_worked_run_with_constant_arrivals():
    out = io.StringIO()
    cafeteria = Simulation(duration=3, rng=_FixedRng(highest=False), out=out).run()
    lines = out.getvalue().splitlines()
    assert lines[:8] == [
        "- - - Cafeteria Simulation - - -",
        "",
        "Time 0: Student #1 joined queue.",
        "Time 0: Started serving student #1 (service: 2 minutes).",
        "Time 1: Student #2 joined queue.",
        "Time 2: Finished serving student #1.",
        "Time 2: Student #3 joined queue.",
        "Time 2: Started serving student #2 (service: 2 minutes).",
    ]
    assert cafeteria.total_served() == 2
    assert cafeteria.students_left_in_queue() == 1
    assert out.getvalue().endswith(cafeteria.summary())


def test_run_without_arrivals_serves_nobody():
    out = io.StringIO()
    cafeteria = Simulation(duration=10, rng=_FixedRng(highest=True), out=out).run()
    assert cafeteria.total_served() == 0
    assert "joined queue" not in out.getvalue()


def test_every_joined_student_is_served_or_waiting():
    out = io.StringIO()
    cafeteria = Simulation(rng=random.Random(42), out=out).run()
    joined = out.getvalue().count("joined queue.")
    assert joined == cafeteria.total_served() + cafeteria.students_left_in_queue()
    assert out.getvalue().count("Started serving") == cafeteria.total_served()


def test_seeded_runs_are_reproducible():
    first, second = io.StringIO(), io.StringIO()
    Simulation(rng=random.Random(7), out=first).run()
    Simulation(rng=random.Random(7), out=second).run()
    assert first.getvalue() == second.getvalue()


def test_main_runs_and_prints_summary(capsys):
    assert main(["--seed", "1", "--duration", "20"]) == 0
    output = capsys.readouterr().out
    assert output.startswith("- - - Cafeteria Simulation - - -")
    assert "--- Simulation Results ---" in output