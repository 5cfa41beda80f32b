"""
Background TEI parsing for large documents.

Every submit() gets a sequence number. Only the result of the newest
submission is handed to ``on_result``; older ones are dropped even when
they finish later. Results are whole ParsedDocuments or an exception.
"""
from __future__ import annotations
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from functools import partial
from typing import Any, Callable, Optional, Union

from .errors import MalformedInputError
from .models import ParsedDocument
from .tei_extractor import parse_tei

logger = logging.getLogger(__name__)

ResultHandler = Callable[[int, Optional[ParsedDocument], Optional[BaseException]], Any]


class ParseWorker:
    def __init__(self, on_result: Optional[ResultHandler] = None, max_workers: int = 2,
                 parse: Callable[[Union[str, bytes]], ParsedDocument] = parse_tei):
        self.on_result = on_result
        self._parse = parse
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="teilens-parse")
        self._lock = threading.Lock()
        self._deliver_lock = threading.RLock()
        self._latest = 0
        self._latest_future: Optional[Future] = None

    def __enter__(self) -> "ParseWorker":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()

    @property
    def latest(self) -> int:
        return self._latest

    def submit(self, tei_xml: Union[str, bytes]) -> int:
        with self._lock:
            self._latest += 1
            seq = self._latest
            future = self._executor.submit(self._parse, tei_xml)
            self._latest_future = future
        future.add_done_callback(partial(self._done, seq))
        return seq

    def _done(self, seq: int, future: Future) -> None:
        # delivery is serialized apart from the state lock, so on_result may submit()
        with self._deliver_lock:
            with self._lock:
                if seq != self._latest:
                    logger.debug("parse #%d superseded by #%d, result dropped", seq, self._latest)
                    return
            error = future.exception()
            document = None if error is not None else future.result()
            if self.on_result is not None:
                self.on_result(seq, document, error)

    def wait(self, timeout: Optional[float] = None) -> ParsedDocument:
        """Block until the newest submission is parsed and return it.

        Failures of superseded submissions are skipped. A timeout is
        reported as MalformedInputError.
        """
        while True:
            with self._lock:
                future, seq = self._latest_future, self._latest
            if future is None:
                raise RuntimeError("nothing submitted")
            try:
                document = future.result(timeout=timeout)
            except FutureTimeout as exc:
                raise MalformedInputError(f"parsing did not finish within {timeout}s") from exc
            except Exception:
                if seq == self._latest:
                    raise
                logger.debug("parse #%d failed after being superseded by #%d", seq, self._latest)
                continue
            if seq == self._latest:
                return document

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
