"""Sleeping teaching-assistant simulation with threads and semaphores."""

from __future__ import annotations

import argparse
import random
import sys
import threading

NUM_WAITING_CHAIRS = 3
NUM_STUDENTS = 5
_POLL = 0.05


class Hallway:
    """Circular row of chairs where students wait for help."""

    def __init__(self, chairs: int = NUM_WAITING_CHAIRS):
        if chairs < 1:
            raise ValueError("there must be at least one chair")
        self._chairs: list[int | None] = [None] * chairs
        self._next_seat = 0
        self._next_help = 0
        self._waiting = 0

    @property
    def waiting(self) -> int:
        """Number of students currently seated."""
        return self._waiting

    def take_seat(self, student_id: int) -> bool:
        """Seat a student; return False if every chair is taken."""
        if self._waiting >= len(self._chairs):
            return False
        self._chairs[self._next_seat] = student_id
        self._waiting += 1
        self._next_seat = (self._next_seat + 1) % len(self._chairs)
        return True

    def next_student(self) -> int:
        """Remove and return the student who has waited longest."""
        if self._waiting == 0:
            raise LookupError("no students are waiting")
        student = self._chairs[self._next_help]
        self._chairs[self._next_help] = None
        self._waiting -= 1
        self._next_help = (self._next_help + 1) % len(self._chairs)
        return student

    def is_waiting(self, student_id: int) -> bool:
        """Return whether the student occupies a chair."""
        return student_id in self._chairs


def run(num_students=NUM_STUDENTS, chairs=NUM_WAITING_CHAIRS, duration=None,
        rng=None, time_scale=1.0, write=print) -> int:
    """Run the simulation for ``duration`` seconds (forever if None).

    Simulated sleeps are multiplied by ``time_scale``. Returns how many
    students the TA helped.
    """
    if num_students < 1:
        raise ValueError("there must be at least one student")
    if time_scale < 0:
        raise ValueError("time scale must not be negative")
    rng = rng if rng is not None else random.Random()
    hallway = Hallway(chairs)
    lock = threading.Lock()
    students_waiting = threading.Semaphore(0)
    ta_available = threading.Semaphore(1)
    stop = threading.Event()
    poll = 0.1 * time_scale
    helped = 0

    def acquire(semaphore: threading.Semaphore) -> bool:
        while not stop.is_set():
            if semaphore.acquire(timeout=_POLL):
                return True
        return False

    def ta() -> None:
        nonlocal helped
        asleep = False
        while not stop.is_set():
            if hallway.waiting > 0:
                asleep = False
                if not acquire(students_waiting):
                    break
                with lock:
                    help_time = rng.randrange(5)
                    student = hallway.next_student()
                    write(f"Helping a student(student: {student}) for {help_time} seconds. "
                          f"Students waiting = {hallway.waiting}.")
                    helped += 1
                    stop.wait(help_time * time_scale)
                ta_available.release()
            else:
                if not asleep:
                    write("No Students require help. Going to Sleep.")
                    asleep = True
                stop.wait(poll)

    def student(student_id: int) -> None:
        while not stop.is_set():
            if hallway.is_waiting(student_id):
                stop.wait(poll)
                continue
            programming = rng.randrange(5)
            write(f"\tStudent {student_id} is programming for {programming} seconds.")
            if stop.wait(programming * time_scale):
                break
            with lock:
                seated = hallway.take_seat(student_id)
                if seated:
                    write(f"\t\tStudent {student_id} takes a seat. "
                          f"Students waiting = {hallway.waiting}.")
            if seated:
                students_waiting.release()
                acquire(ta_available)
            else:
                write(f"\t\t\tStudent {student_id} will try later.")

    write("Checking for students.")
    threads = [threading.Thread(target=ta, daemon=True)]
    threads += [threading.Thread(target=student, args=(i,), daemon=True)
                for i in range(1, num_students + 1)]
    for thread in threads:
        thread.start()
    try:
        stop.wait(duration)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        for thread in threads:
            thread.join()
    return helped


def main(argv=None) -> int:
    """Run the simulation until the duration ends or it is interrupted."""
    parser = argparse.ArgumentParser(prog="tasim", description="Sleeping TA simulation.")
    parser.add_argument("--students", type=int, default=NUM_STUDENTS)
    parser.add_argument("--chairs", type=int, default=NUM_WAITING_CHAIRS)
    parser.add_argument("--duration", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--time-scale", type=float, default=1.0)
    args = parser.parse_args(argv)
    try:
        run(args.students, args.chairs, args.duration, random.Random(args.seed),
            args.time_scale, lambda line: print(line, flush=True))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())