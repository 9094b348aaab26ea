"""Multilevel feedback queue scheduling of tasks."""

from __future__ import annotations

import enum
import itertools
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


class TaskStatus(enum.Enum):
    """Lifecycle state of a task."""

    READY = enum.auto()
    EXITED = enum.auto()


class TaskPos(enum.Enum):
    """The queue level a task belongs to."""

    FCFS1 = enum.auto()
    FCFS2 = enum.auto()
    RR = enum.auto()


@dataclass(eq=False)
class Task:
    """A schedulable task; new tasks start ready at the first level."""

    pid: int
    task_status: TaskStatus = TaskStatus.READY
    task_pos: TaskPos = TaskPos.FCFS1
    exit_code: int = 0


_DEMOTION = {
    TaskPos.FCFS1: TaskPos.FCFS2,
    TaskPos.FCFS2: TaskPos.RR,
    TaskPos.RR: TaskPos.RR,
}


class MultilevelFeedbackQueue:
    """Two first-come-first-served levels above a round-robin level."""

    def __init__(self):
        self._queues: dict[TaskPos, deque[Task]] = {pos: deque() for pos in TaskPos}

    def requeue(self, task: Task) -> bool:
        """Put a task that has run back in, one level lower than before."""
        task.task_pos = _DEMOTION[task.task_pos]
        self._queues[task.task_pos].append(task)
        return True

    def enqueue(self, task: Task) -> None:
        """Add a new task at the first level."""
        self._queues[TaskPos.FCFS1].append(task)

    def get_task(self) -> Task | None:
        """Take the next task from the highest non-empty level, or None."""
        for queue in self._queues.values():
            if queue:
                return queue.popleft()
        return None

    def __iter__(self) -> Iterator[Task]:
        return itertools.chain.from_iterable(self._queues.values())

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())


class SchdMaster:
    """The scheduler: decides which task runs next."""

    def __init__(self):
        self._mlfq = MultilevelFeedbackQueue()

    def requeue_current(self, task: Task) -> None:
        """Put the task that just ran back into the queues."""
        self._mlfq.requeue(task)

    def get_next(self) -> Task | None:
        """The next task to run, or None when there is none."""
        return self._mlfq.get_task()

    def add_new_task(self, task: Task) -> None:
        """Queue a newly created task."""
        self._mlfq.enqueue(task)

    def tasks(self) -> Iterator[Task]:
        """Every queued task, highest level first."""
        return iter(self._mlfq)