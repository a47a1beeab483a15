from __future__ import annotations

import queue
import threading
from typing import Iterator

from snipkeep.domain.entities.search_candidate import SearchCandidate
from snipkeep.errors import SearchError

_END_OF_INPUT = object()


class CandidateChannel:
    """Unbounded producer/consumer channel feeding candidates to the search UI.

    The producer sends every candidate and then calls ``close()``; iteration
    ends once the consumer reaches that end-of-input marker.
    """

    def __init__(self) -> None:
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self.sent = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, candidate: SearchCandidate) -> None:
        with self._lock:
            if self._closed:
                raise SearchError("Search failed: candidate sent after end of input")
            self._queue.put(candidate)
            self.sent += 1

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_END_OF_INPUT)

    def __iter__(self) -> Iterator[SearchCandidate]:
        while True:
            item = self._queue.get()
            if item is _END_OF_INPUT:
                return
            yield item  # type: ignore[misc]
