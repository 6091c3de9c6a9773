"""EventBus: pub/sub dispatcher for scheduler events.

The scheduler owns no global signal table: whoever builds a WaveScheduler
creates an EventBus and passes it in by reference.  One writer (the
scheduler) publishes; any number of readers subscribe and drain their own
queue at their own pace.

Topics published by the spawning core:
  - ``wave_state_change``: idle <-> running transitions
  - ``wave_advanced``: wave index changed
  - ``spawn_command``: a spawn command was handed to the executor
  - ``spawn_condition``: a non-fatal configuration or cache problem
"""

from __future__ import annotations

import queue
import threading

_DEFAULT_MAXSIZE = 1000


class EventBus:
    """Thread-safe pub/sub for pushing events to subscribers."""

    def __init__(self, maxsize: int = _DEFAULT_MAXSIZE) -> None:
        self._lock = threading.Lock()
        self._maxsize = maxsize
        self._subscribers: list[tuple[str | None, queue.Queue]] = []

    def subscribe(self, topic: str | None = None) -> queue.Queue:
        """Subscribe to events. Returns a Queue that receives messages.

        With ``topic`` set, only messages of that type are delivered.
        Without it the queue receives every event.
        """
        q: queue.Queue = queue.Queue(maxsize=self._maxsize)
        with self._lock:
            self._subscribers.append((topic, q))
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        with self._lock:
            self._subscribers = [
                (topic, sub) for topic, sub in self._subscribers if sub is not q
            ]

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, event_type: str, data: dict | None = None) -> None:
        msg = {"type": event_type}
        if data is not None:
            msg["data"] = data
        with self._lock:
            for topic, q in self._subscribers:
                if topic is not None and topic != event_type:
                    continue
                try:
                    q.put_nowait(msg)
                except queue.Full:
                    # Drop oldest message so state changes are never lost
                    # behind a backlog of spawn commands.
                    try:
                        q.get_nowait()
                    except queue.Empty:
                        pass
                    try:
                        q.put_nowait(msg)
                    except queue.Full:
                        pass

    @staticmethod
    def drain(q: queue.Queue) -> list[dict]:
        """Pop every pending message from a subscriber queue."""
        out: list[dict] = []
        while True:
            try:
                out.append(q.get_nowait())
            except queue.Empty:
                return out
