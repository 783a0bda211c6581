"""Registry of running workers, addressed by numeric id."""

from __future__ import annotations

import threading
from typing import Protocol


class Worker(Protocol):
    def cancel(self) -> None: ...


class UnknownWorkerError(LookupError):
    """Raised when no worker has the given id."""

    def __init__(self, worker_id: int) -> None:
        super().__init__(f"wrong worker identifier: {worker_id}")
        self.worker_id = worker_id


class WorkerStore:
    """Holds workers under ids one above the highest id in use."""

    def __init__(self) -> None:
        self._workers: dict[int, Worker] = {}
        self._lock = threading.Lock()

    def __contains__(self, worker_id: object) -> bool:
        return worker_id in self._workers

    def __len__(self) -> int:
        return len(self._workers)

    def add(self, worker: Worker) -> int:
        with self._lock:
            worker_id = max(self._workers, default=0) + 1
            self._workers[worker_id] = worker
        return worker_id

    def _get(self, worker_id: int) -> Worker:
        try:
            return self._workers[worker_id]
        except KeyError:
            raise UnknownWorkerError(worker_id) from None

    def cancel_work(self, worker_id: int) -> None:
        """Cancel a worker but keep it registered."""
        self._get(worker_id).cancel()

    def remove(self, worker_id: int) -> None:
        """Cancel a worker and forget it."""
        with self._lock:
            worker = self._get(worker_id)
            worker.cancel()
            del self._workers[worker_id]


_store: WorkerStore | None = None
_store_lock = threading.Lock()


def get_worker_store() -> WorkerStore:
    """Return the application's shared store, creating it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = WorkerStore()
        return _store