"""Settings shared by the visualizer: window size, timing, list size and tones."""

WIDTH = 800
"""Width of the window in pixels."""

HEIGHT = 600
"""Height of the window in pixels."""

US_STEP = 10000
"""Microseconds between one step and the next. Lower values run faster."""

LIST_SIZE = 200
"""Number of elements in the list being sorted."""

SPACING = 0.0
"""Spacing between bars. Large values can break the layout."""

MIN_FREQ = 220.0
"""Lowest tone frequency in hertz."""

MAX_FREQ = 880.0
"""Highest tone frequency in hertz."""