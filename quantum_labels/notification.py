"""Single transient alert shown above the tables.

Expiry is deadline based: each ``notify`` stamps a new deadline,
and ``current()`` reports the empty notification once the deadline of the
latest call has passed. A superseded notification can never clear a
newer one because only the latest deadline is kept.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

SEVERITIES = ("info", "success", "danger")

DEFAULT_LIFETIMES_MS = {"danger": 3000, "success": 5000, "info": 5000}


@dataclass(frozen=True)
class Notification:
    message: str = ""
    severity: Optional[str] = None

    def __bool__(self):
        return bool(self.message)


EMPTY = Notification()


class Notifier:
    def __init__(
        self,
        lifetimes_ms: Optional[Mapping[str, int]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.lifetimes_ms = dict(DEFAULT_LIFETIMES_MS)
        if lifetimes_ms:
            self.lifetimes_ms.update(lifetimes_ms)
        self._clock = clock
        self._current = EMPTY
        self._deadline = None

    def notify(self, message: str, severity: str) -> Notification:
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown severity: {severity!r}")
        self._current = Notification(message, severity)
        self._deadline = self._clock() + self.lifetimes_ms[severity] / 1000.0
        return self._current

    def current(self) -> Notification:
        if self._deadline is not None and self._clock() >= self._deadline:
            self.clear()
        return self._current

    def remaining_seconds(self) -> float:
        if self._deadline is None:
            return 0.0
        return max(0.0, self._deadline - self._clock())

    def clear(self) -> None:
        self._current = EMPTY
        self._deadline = None
