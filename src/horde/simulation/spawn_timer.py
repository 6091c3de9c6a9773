"""SpawnTimer: cooperative countdown between spawn commands.

There is no background thread: the countdown only moves when the owner
calls ``advance(dt)`` from its tick.  ``arm`` always starts a fresh wait;
``retarget`` changes the interval of an armed timer according to a re-arm
policy:

  - ``next``:     store the new interval, leave the running wait alone;
                  it applies from the wait that starts after the next fire
  - ``restart``:  fresh countdown from zero with the new interval
  - ``preserve``: keep the time already waited, so the remaining wait is
                  ``new_interval - waited`` (expires on the next advance
                  if that is already used up)
"""

from __future__ import annotations

REARM_NEXT = "next"
REARM_RESTART = "restart"
REARM_PRESERVE = "preserve"
REARM_POLICIES = (REARM_NEXT, REARM_RESTART, REARM_PRESERVE)

# Smallest interval the timer accepts; anything lower is a tight loop.
_MIN_INTERVAL = 0.01


class SpawnTimer:
    """Countdown armed with an interval; fires at most once per advance."""

    def __init__(self) -> None:
        self.interval: float = 0.0
        self.remaining: float = 0.0
        self.armed: bool = False
        # Length of the wait currently running; differs from ``interval``
        # after a ``next`` retarget until the timer fires.
        self._wait_length: float = 0.0

    def arm(self, interval: float) -> None:
        self.interval = max(_MIN_INTERVAL, interval)
        self._start_wait()
        self.armed = True

    def cancel(self) -> None:
        self.armed = False
        self.interval = 0.0
        self.remaining = 0.0
        self._wait_length = 0.0

    def retarget(self, interval: float, policy: str = REARM_NEXT) -> None:
        if not self.armed:
            return
        if policy not in REARM_POLICIES:
            raise ValueError(f"Unknown re-arm policy: {policy!r}")
        new_interval = max(_MIN_INTERVAL, interval)
        if policy == REARM_PRESERVE:
            waited = self.waited
            self.interval = new_interval
            self._wait_length = new_interval
            self.remaining = new_interval - waited
        elif policy == REARM_RESTART:
            self.interval = new_interval
            self._start_wait()
        else:
            self.interval = new_interval

    @property
    def waited(self) -> float:
        return self._wait_length - self.remaining if self.armed else 0.0

    def advance(self, dt: float) -> bool:
        """Count down by ``dt``. Returns True when the wait ran out.

        On expiry the next wait starts from a full interval; overshoot is
        not carried over, matching a per-frame coroutine wait.
        """
        if not self.armed:
            return False
        self.remaining -= max(0.0, dt)
        if self.remaining <= 0:
            self._start_wait()
            return True
        return False

    def _start_wait(self) -> None:
        self._wait_length = self.interval
        self.remaining = self.interval
