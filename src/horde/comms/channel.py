"""StateChannel: observable value with a single writer.

Holds one piece of shared state (for example "is a wave running") and
notifies listeners only when the value actually changes.  The owner that
created the channel is the only writer; listeners must not call ``set``.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from loguru import logger

T = TypeVar("T")


class StateChannel(Generic[T]):
    """Single-writer, multiple-reader state broadcast."""

    def __init__(self, name: str, initial: T, debug_log: bool = False) -> None:
        self.name = name
        self._value = initial
        self._debug_log = debug_log
        self._listeners: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def add_listener(self, listener: Callable[[T], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[T], None]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def set(self, value: T) -> bool:
        """Store ``value``; returns True when listeners were notified."""
        if value == self._value:
            return False
        self._value = value
        if self._debug_log:
            logger.debug(f"[{self.name}] changed: {value}")
        for listener in list(self._listeners):
            listener(value)
        return True
