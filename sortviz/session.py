"""Runs a sorting algorithm on a background thread, one paced step at a time."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from sortviz.algorithms import (
    Color,
    Step,
    bogo_sort,
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from sortviz.config import LIST_SIZE, US_STEP

__all__ = ["State", "Snapshot", "SortSession", "shuffled_list"]

_MICRO = 1_000_000


class State(Enum):
    """What the application is currently doing."""

    QUITTING = auto()
    MENU = auto()
    QUICK_SORT = auto()
    MERGE_SORT = auto()
    HEAP_SORT = auto()
    BUBBLE_SORT = auto()
    SELECTION_SORT = auto()
    INSERTION_SORT = auto()
    BOGO_SORT = auto()


@dataclass(frozen=True)
class Snapshot:
    """A consistent copy of the list, the bar colours and the sounding index."""

    values: tuple[int, ...]
    colors: tuple[Color, ...]
    sound_index: int


def shuffled_list(size: int, rng: random.Random | None = None) -> list[int]:
    """Return the numbers ``1..size`` shuffled by swapping each with a random position."""
    rng = rng or random.Random()
    values = list(range(1, size + 1))
    for i in range(size):
        j = rng.randrange(size)
        values[i], values[j] = values[j], values[i]
    return values


class SortSession:
    """Owns the list being sorted and the thread that sorts it."""

    def __init__(
        self,
        size: int = LIST_SIZE,
        step_us: int = US_STEP,
        rng: random.Random | None = None,
    ) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        if step_us < 0:
            raise ValueError("step_us must not be negative")
        self.size = size
        self.step_us = step_us
        self.state = State.MENU
        self._rng = rng or random.Random()
        self._values = shuffled_list(size, self._rng)
        self._colors = [Color.WHITE] * size
        self._sound_index = 0
        self._lock = threading.Lock()
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    def _steps(self, state: State) -> Iterator[Step] | None:
        last = self.size - 1
        values = self._values
        if state is State.QUICK_SORT:
            return quick_sort(values, 0, last)
        if state is State.MERGE_SORT:
            return merge_sort(values, 0, last)
        if state is State.HEAP_SORT:
            return heap_sort(values, 0, last)
        if state is State.BUBBLE_SORT:
            return bubble_sort(values, 0, last)
        if state is State.SELECTION_SORT:
            return selection_sort(values, 0, last)
        if state is State.INSERTION_SORT:
            return insertion_sort(values, 0, last)
        if state is State.BOGO_SORT:
            return bogo_sort(values, 0, last, self._rng)
        return None

    def start(self, state: State) -> None:
        """Stop any running sort and, for a sorting state, start it on a fresh shuffle."""
        self.stop()
        self.state = state
        steps = self._steps(state)
        if steps is None:
            return
        with self._lock:
            self._values[:] = shuffled_list(self.size, self._rng)
        self._thread = threading.Thread(target=self._run, args=(steps,), daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the running sort, if any, and wait for its thread to end."""
        if self._thread is None:
            return
        self._stopping.set()
        self._thread.join()
        self._thread = None
        self._stopping.clear()

    def snapshot(self) -> Snapshot:
        """Return a copy of the current list, colours and sound index."""
        with self._lock:
            return Snapshot(tuple(self._values), tuple(self._colors), self._sound_index)

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the sort to finish; return whether no sort is still running."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _run(self, steps: Iterator[Step]) -> None:
        delay = self.step_us / _MICRO
        try:
            while True:
                if self._stopping.is_set():
                    return
                with self._lock:
                    try:
                        step = next(steps)
                    except StopIteration:
                        break
                    self._colors = step.colors(self.size)
                    self._sound_index = step.sound
                if self._stopping.wait(delay):
                    return
        finally:
            steps.close()
        with self._lock:
            self._colors = [Color.GREEN] * self.size
            self._sound_index = -1