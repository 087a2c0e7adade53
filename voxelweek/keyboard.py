"""Keyboard state tracking and debounced key presses."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Hashable, Optional

TOGGLE_DELAY = 0.2


class KeyEventType(Enum):
    """Kinds of window event the keyboard cares about."""

    PRESSED = auto()
    RELEASED = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A window event; ``key`` is meaningful for presses and releases."""

    type: KeyEventType
    key: Optional[Hashable] = None


class Keyboard:
    """Tracks which keys are held, fed from window events."""

    def __init__(self) -> None:
        self._down: set[Hashable] = set()
        self._recent: Optional[Hashable] = None

    def update(self, event: KeyEvent) -> None:
        """Apply one event to the key state."""
        self._recent = None
        if event.type is KeyEventType.RELEASED:
            self._down.discard(event.key)
        elif event.type is KeyEventType.PRESSED:
            self._recent = event.key
            self._down.add(event.key)

    def is_key_down(self, key: Hashable) -> bool:
        """True while ``key`` is held."""
        return key in self._down

    def key_released(self, key: Hashable) -> bool:
        """True if the last event processed was a press of ``key``."""
        return self._recent is not None and self._recent == key


class ToggleKey:
    """A key that reports a press at most once every 0.2 seconds.

    ``is_pressed`` polls whether a key is currently held; ``clock`` returns
    the time in seconds.
    """

    def __init__(
        self,
        key: Hashable,
        is_pressed: Callable[[Hashable], bool],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.key = key
        self._is_pressed = is_pressed
        self._clock = clock
        self._last = clock()

    def is_key_pressed(self) -> bool:
        """True if the key is held and the delay since the last press has passed."""
        now = self._clock()
        if now - self._last > TOGGLE_DELAY and self._is_pressed(self.key):
            self._last = now
            return True
        return False