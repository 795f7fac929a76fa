"""The window: a menu of algorithms and the animated bars with their tones."""

from __future__ import annotations

import argparse
import sys
from array import array

import pygame

from sortviz.algorithms import Color
from sortviz.audio import SineGenerator, tone_for
from sortviz.config import HEIGHT, LIST_SIZE, SPACING, US_STEP, WIDTH
from sortviz.session import SortSession, State

__all__ = ["bar_rects", "menu_lines", "state_for_key", "App", "main"]

LINE_HEIGHT = 12
_MENU_SCALE = 2
_SAMPLE_RATE = 8000
_CHUNK = 512

_MENU_ENTRIES = (
    "Quick Sort",
    "Merge Sort",
    "Heap Sort",
    "Bubble Sort",
    "Selection Sort",
    "Insertion Sort",
    "Bogo Sort",
)

_KEY_STATES = {
    "1": State.QUICK_SORT,
    "2": State.MERGE_SORT,
    "3": State.HEAP_SORT,
    "4": State.BUBBLE_SORT,
    "5": State.SELECTION_SORT,
    "6": State.INSERTION_SORT,
    "7": State.BOGO_SORT,
}

_PAINT = {
    Color.WHITE: (255, 255, 255),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
}


def bar_rects(
    values, width: float = WIDTH, height: float = HEIGHT, spacing: float = SPACING
) -> list[tuple[float, float, float, float]]:
    """Return ``(x, y, w, h)`` for each bar, standing on the bottom edge."""
    size = len(values)
    if size == 0:
        return []
    step_x = (width - spacing) / size
    unit = height / size
    bar_width = width / size - spacing
    rects = []
    for i, value in enumerate(values):
        h = value * unit
        rects.append((spacing + i * step_x, height - h, bar_width, h))
    return rects


def menu_lines() -> list[str]:
    """Return the numbered menu entries."""
    return [f"{number}. {name}" for number, name in enumerate(_MENU_ENTRIES, start=1)]


def state_for_key(key_name: str, current: State) -> State | None:
    """Return the state a key leads to, or None if the key does nothing."""
    key_name = key_name.lower()
    if key_name in _KEY_STATES:
        return _KEY_STATES[key_name]
    if key_name == "escape":
        return State.QUITTING if current is State.MENU else State.MENU
    if key_name in ("return", "q"):
        return State.QUITTING
    return None


class App:
    """The visualizer window and its event loop."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        size: int = LIST_SIZE,
        step_us: int = US_STEP,
    ) -> None:
        self.width = width
        self.height = height
        self.session = SortSession(size=size, step_us=step_us)
        self.state = State.MENU
        self._screen = None
        self._font = None
        self._channel = None
        self._sine: SineGenerator | None = None

    def run(self) -> None:
        """Open the window and run until the user quits."""
        pygame.init()
        try:
            pygame.display.set_caption("Sorting Visualizer")
            self._screen = pygame.display.set_mode((self.width, self.height))
            pygame.mixer.init(frequency=_SAMPLE_RATE, size=-16, channels=1)
            mixer = pygame.mixer.get_init()
            self._sine = SineGenerator(sample_rate=mixer[0] if mixer else _SAMPLE_RATE)
            self._channel = pygame.mixer.Channel(0)
            self._font = pygame.font.Font(None, LINE_HEIGHT * _MENU_SCALE)
            clock = pygame.time.Clock()
            while self._handle_events():
                self._draw_frame()
                clock.tick(60)
        finally:
            self.session.stop()
            pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            new_state = state_for_key(pygame.key.name(event.key), self.state)
            if new_state is None:
                continue
            self.state = new_state
            self.session.start(new_state)
            if new_state is State.QUITTING:
                return False
        return True

    def _draw_frame(self) -> None:
        screen = self._screen
        screen.fill((0, 0, 0))
        if self.state is State.MENU:
            self._draw_menu()
            pygame.display.flip()
            return
        snap = self.session.snapshot()
        for rect, color in zip(bar_rects(snap.values, self.width, self.height), snap.colors):
            pygame.draw.rect(screen, _PAINT[color], pygame.Rect(*rect))
        size = len(snap.values)
        if 0 <= snap.sound_index < size:
            self._play(*tone_for(snap.values[snap.sound_index], size))
        pygame.display.flip()

    def _draw_menu(self) -> None:
        lines = menu_lines()
        y = (self.height / 4 - len(lines) * LINE_HEIGHT / 4) * _MENU_SCALE
        for line in lines:
            surface = self._font.render(line, True, (255, 255, 255))
            self._screen.blit(surface, (10 * _MENU_SCALE, y))
            y += LINE_HEIGHT * _MENU_SCALE

    def _play(self, freq: float, gain: float) -> None:
        if self._channel.get_queue() is not None:
            return
        chunk = self._sine.samples(freq, gain, _CHUNK)
        pcm = array("h", (int(max(-1.0, min(1.0, s)) * 32767) for s in chunk))
        self._channel.queue(pygame.mixer.Sound(buffer=pcm.tobytes()))


def main(argv=None) -> int:
    """Start the visualizer window."""
    parser = argparse.ArgumentParser(
        prog="sortviz", description="Watch and hear sorting algorithms at work."
    )
    parser.parse_args(argv)
    try:
        App().run()
    except pygame.error as exc:
        print(f"sortviz: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())