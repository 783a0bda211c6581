import pytest

from objectshooter.store import UnknownWorkerError, WorkerStore, get_worker_store


class CountingWorker:
    def __init__(self):
        self.cancels = 0

    def cancel(self):
        self.cancels += 1


def test_ids_increase_from_one():
    store = WorkerStore()
    first = store.add(CountingWorker())
    second = store.add(CountingWorker())
    assert first == 1
    assert second == first + 1
    assert first in store and second in store


def test_new_id_follows_highest_in_use():
    store = WorkerStore()
    ids = [store.add(CountingWorker()) for _ in range(3)]
    store.remove(ids[0])
    assert store.add(CountingWorker()) == ids[-1] + 1


def test_remove_cancels_and_forgets():
    store = WorkerStore()
    worker = CountingWorker()
    worker_id = store.add(worker)
    store.remove(worker_id)
    assert worker.cancels == 1
    assert worker_id not in store
    assert len(store) == 0


def test_cancel_work_keeps_worker():
    store = WorkerStore()
    worker = CountingWorker()
    worker_id = store.add(worker)
    store.cancel_work(worker_id)
    assert worker.cancels == 1
    assert worker_id in store


def test_unknown_ids_raise():
    store = WorkerStore()
    with pytest.raises(UnknownWorkerError, match="wrong worker identifier"):
        store.remove(7)
    with pytest.raises(UnknownWorkerError):
        store.cancel_work(7)


def test_shared_store_keeps_workers_between_calls():
    worker = CountingWorker()
    worker_id = get_worker_store().add(worker)
    assert worker_id in get_worker_store()
    get_worker_store().remove(worker_id)
    assert worker.cancels == 1
    assert worker_id not in get_worker_store()