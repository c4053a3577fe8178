"""
Concurrent admissions against one mechanic.

Each worker opens its own connection, as separate requests do.  The
write transaction around sum-then-insert must keep the total within
capacity however the workers interleave.
"""

import asyncio
import threading

from autoservice_api.app.core.errors import CapacityExceededError
from autoservice_api.app.core.store import Store
from autoservice_api.app.services.assignment_service import AssignmentService


def test_parallel_create_task_never_overshoots(store, make_mechanic):
    mechanic = make_mechanic(["Audi"], max_complexity=10)
    barrier = threading.Barrier(8)
    outcomes = []
    lock = threading.Lock()

    def worker(index: int) -> None:
        barrier.wait()
        with Store.open() as own_store:
            try:
                asyncio.run(
                    AssignmentService(own_store).create_task(mechanic.id, "Audi", f"job {index}", 3)
                )
                result = "admitted"
            except CapacityExceededError:
                result = "rejected"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("admitted") == 3
    assert outcomes.count("rejected") == 5
    assert store.sum_task_complexity(mechanic.id) == 9


def test_parallel_reassign_never_overshoots(store, make_mechanic):
    target = make_mechanic(["Ford"], max_complexity=5)
    sources = [make_mechanic(["Ford"]) for _ in range(4)]
    task_ids = []
    for source in sources:
        task = asyncio.run(AssignmentService(store).create_task(source.id, "Ford", "gearbox", 2))
        task_ids.append(task.id)
    barrier = threading.Barrier(len(task_ids))

    def worker(task_id: str) -> None:
        barrier.wait()
        with Store.open() as own_store:
            try:
                asyncio.run(AssignmentService(own_store).reassign_task(task_id, target.id))
            except CapacityExceededError:
                pass

    threads = [threading.Thread(target=worker, args=(task_id,)) for task_id in task_ids]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.list_tasks_by_mechanic(target.id)) == 2
    assert store.sum_task_complexity(target.id) == 4
