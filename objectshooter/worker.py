"""Background worker that replays stored documents to a consumer."""

from __future__ import annotations

import logging
import random
import sqlite3
import threading
import time
from datetime import datetime

import requests

from .models import BackgroundWorkerSettings, ResponseResult
from .repository import SqliteRepository, new_repository
from .sending import SendingService
from .stopwatch import StopWatch
from .token import TokenError, TokenService

log = logging.getLogger(__name__)


class SendWorker:
    """Reads batches from a table and posts them until cancelled or out of time."""

    def __init__(
        self,
        settings: BackgroundWorkerSettings,
        repository: SqliteRepository | None = None,
        *,
        sending: SendingService | None = None,
        token_service: TokenService | None = None,
    ) -> None:
        self.settings = settings
        self.total_sent = 0
        self._repository = repository if repository is not None else new_repository()
        self._sending = sending if sending is not None else SendingService()
        self._token_service = token_service if token_service is not None else TokenService()
        self._stop = threading.Event()
        self._busy = threading.Lock()
        self._deadline = time.monotonic() + settings.timer * 60
        self._counter = 0

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def do_work(self) -> None:
        """Send batches until cancelled or until the timer runs out."""
        log.info("Worker was started at %s", datetime.now())
        while True:
            if self._stop.is_set():
                reason = "context canceled"
                break
            if time.monotonic() >= self._deadline:
                reason = "context deadline exceeded"
                break
            self.step()
        log.info("Worker was stopped at %s, because of: %s", datetime.now(), reason)

    def cancel(self) -> None:
        """Stop the worker and wait for the batch in flight to finish."""
        self._stop.set()
        with self._busy:
            pass

    def step(self) -> ResponseResult | None:
        """Send one batch, wait the request delay, and handle reaching the table's end."""
        watch = StopWatch()
        watch.start()
        with self._busy:
            result = self._actual_work()
        log.info(
            "Request %d takes %.2f seconds || Total amount of records have been sent: %d",
            self._counter,
            watch.elapsed(1.0),
            self.total_sent,
        )
        self._counter += 1

        if self.settings.request_delay > 0:
            self._stop.wait(self.settings.request_delay)

        if self._table_count() <= self.total_sent and not self.settings.random:
            if self.settings.stop_when_table_ends:
                self._stop.set()
            else:
                self.total_sent = 0
        return result

    def _table_count(self) -> int:
        try:
            return self._repository.count(self.settings.table_name)
        except sqlite3.Error:
            return 0

    def _actual_work(self) -> ResponseResult | None:
        try:
            batch = self._fetch()
        except (sqlite3.Error, ValueError) as exc:
            log.error("%s", exc)
            return None
        try:
            result = self._send(batch)
        except (requests.RequestException, TokenError) as exc:
            log.error("%s", exc)
            return None
        log.info("%s", result)
        return result

    def _fetch(self) -> list[str]:
        settings = self.settings
        if settings.random:
            skip = random.randrange(self._repository.count(settings.table_name))
        else:
            skip = self.total_sent
        return self._repository.get_data(
            settings.table_name, settings.random, settings.writes_number_to_send, skip
        )

    def _send(self, batch: list[str]) -> ResponseResult:
        consumer = self.settings.consumer_settings
        headers: dict[str, str] = {}
        if consumer.auth_model:
            headers["Authorization"] = f"Bearer {self._token_service.token()}"
        try:
            return self._sending.send_request(consumer.host, batch, headers)
        finally:
            self.total_sent += len(batch)