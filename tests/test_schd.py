from rustedos.schd import MultilevelFeedbackQueue, SchdMaster, Task, TaskPos, TaskStatus


def test_mlfq():
    mlfq = MultilevelFeedbackQueue()
    mlfq.enqueue(Task(0))
    pcb = mlfq.get_task()
    assert pcb is not None
    assert pcb.task_pos == TaskPos.FCFS1
    assert mlfq.get_task() is None

    mlfq.requeue(pcb)
    pcb = mlfq.get_task()
    assert pcb is not None
    assert pcb.task_pos == TaskPos.FCFS2
    assert mlfq.get_task() is None

    pcb1, pcb2, pcb3, pcb4 = (Task(pid) for pid in (1, 2, 3, 4))
    mlfq.enqueue(pcb1)
    mlfq.enqueue(pcb2)
    mlfq.enqueue(pcb3)

    first = mlfq.get_task()
    second = mlfq.get_task()
    third = mlfq.get_task()
    mlfq.requeue(first)
    mlfq.requeue(second)
    mlfq.requeue(third)

    again = mlfq.get_task()
    mlfq.requeue(again)
    mlfq.enqueue(pcb4)

    order = [mlfq.get_task().pid for _ in range(4)]
    assert order == [4, 2, 3, 1]
    assert mlfq.get_task() is None


def test_schd():
    master = SchdMaster()
    for pid in (1, 2, 3, 4):
        master.add_new_task(Task(pid))

    pcb1 = master.get_next()
    pcb2 = master.get_next()
    pcb3 = master.get_next()
    assert [pcb1.pid, pcb2.pid, pcb3.pid] == [1, 2, 3]

    master.requeue_current(pcb1)
    pcb4 = master.get_next()
    assert pcb4.pid == 4

    master.requeue_current(pcb2)
    master.requeue_current(pcb4)
    master.requeue_current(pcb3)

    order = [master.get_next().pid for _ in range(4)]
    assert order == [1, 2, 4, 3]


def test_requeue_demotes_down_to_round_robin():
    mlfq = MultilevelFeedbackQueue()
    task = Task(9)
    assert mlfq.requeue(task) is True
    assert task.task_pos == TaskPos.FCFS2
    mlfq.get_task()
    mlfq.requeue(task)
    assert task.task_pos == TaskPos.RR
    mlfq.get_task()
    mlfq.requeue(task)
    assert task.task_pos == TaskPos.RR
    assert mlfq.get_task() is task


def test_iteration_order_is_by_level():
    mlfq = MultilevelFeedbackQueue()
    a, b, c = Task(1), Task(2), Task(3)
    mlfq.requeue(Task(10, task_pos=TaskPos.FCFS2))
    mlfq.requeue(a)
    mlfq.enqueue(b)
    mlfq.enqueue(c)
    assert [task.pid for task in mlfq] == [2, 3, 1, 10]
    assert len(mlfq) == 4


def test_tasks_lists_queued_tasks():
    master = SchdMaster()
    assert list(master.tasks()) == []
    task = Task(5)
    master.add_new_task(task)
    assert list(master.tasks()) == [task]
    assert master.get_next() is task
    assert master.get_next() is None


def test_new_task_defaults():
    task = Task(3)
    assert task.task_status == TaskStatus.READY
    assert task.task_pos == TaskPos.FCFS1
    assert task.exit_code == 0