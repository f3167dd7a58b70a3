# cafeteria-sim

A small discrete-time simulation of a cafeteria serving line. Each minute,
a student may join the queue (30% chance). When nobody is being served,
the student at the front of the queue is served. Service takes from 2 to 5
minutes. When the run ends, the simulation reports how many students were
served, the average and the maximum wait, and how many students are still
in the queue.

A student's wait is the time from joining the queue to the start of service.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cafeteria-sim [--duration MINUTES] [--seed SEED]
```

- `--duration` sets the number of minutes to simulate. The default is 60.
- `--seed` seeds the random generator, so that a run can be repeated.
  Without it, every run is different.

The command prints each event as it happens and ends with a summary.
The output has this shape. The numbers change from run to run:

```
- - - Cafeteria Simulation - - -

Time 0: Student #1 joined queue.
Time 0: Started serving student #1 (service: 3 minutes).
Time 3: Finished serving student #1.
...

--- Simulation Results ---
Total served: 17
Average wait time: 4.2 minutes
Maximum wait time: 11 minutes
Students left in queue: 2
```

## Library use

```python
import io
import random

from cafeteria_sim.student import Student
from cafeteria_sim.cafeteria import CafeteriaQueue
from cafeteria_sim.simulation import Simulation

cq = CafeteriaQueue()
cq.add_student(Student(5, 5))
cq.add_student(Student(1, 10))
cq.add_student(Student(3, 15))
while cq.has_students():
    cq.serve_student(20)

print(cq.total_served())       # 3
print(cq.average_wait_time())  # 10.0
print(cq.max_wait_time())      # 15
print(cq.summary())            # the summary as a string
cq.print_summary()             # the same text, written to stdout

# A repeatable run whose report goes to a buffer instead of stdout
buffer = io.StringIO()
sim = Simulation(duration=60, rng=random.Random(42), out=buffer)
result = sim.run()             # returns the CafeteriaQueue
print(result.total_served())
```

### Modules

- `cafeteria_sim.student.Student` is a frozen dataclass with an `id` and an
  `arrival_time`. Both default to 0. Its `str()` is
  `Student ID: <id>, Arrival Time: <arrival_time>`.
- `cafeteria_sim.student_queue.StudentQueue` is a first-in, first-out queue
  with `enqueue`, `dequeue`, `is_empty` and `len()`. The `capacity` argument
  defaults to 100 and must not be negative. The capacity doubles whenever
  the queue fills up. `dequeue` on an empty queue returns a default
  `Student()` and does not raise.
- `cafeteria_sim.cafeteria.CafeteriaQueue` holds the waiting students and
  records each wait when a student is served. Serving from an empty queue
  returns a default `Student()` and records nothing. The average and the
  maximum wait are 0 when nobody has been served.
- `cafeteria_sim.simulation.Simulation(duration, rng, out)` runs the
  minute-by-minute loop. It draws from `rng`, a `random.Random`, and writes
  its report to `out`, a text stream that defaults to stdout.
  `student_arrives()` and `generate_service_time()` expose the two random
  draws. `main(argv)` is the function that the `cafeteria-sim` command runs.

## What it does not do

The simulation has one serving line and one server. It prints its results
and returns them as a `CafeteriaQueue`. It does not save results to a file,
and it does not plot them.