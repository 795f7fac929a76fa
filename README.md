# sortviz

sortviz shows sorting algorithms at work. Each value in a list is drawn as a bar.
At every step the bars being compared or moved light up, and a tone plays.
The pitch of the tone rises with the value of the bar being touched.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
sortviz
```

The command takes no options other than `--help`. A window opens at 800×600 and shows a menu.
Press a number key to shuffle a list of 200 values. The chosen algorithm then sorts that list:

1. Quick Sort
2. Merge Sort
3. Heap Sort
4. Bubble Sort
5. Selection Sort
6. Insertion Sort
7. Bogo Sort

Pressing another number key while a sort is running stops it and starts the new one on a fresh shuffle.

The other keys:

- **Escape** goes back to the menu. At the menu, it quits.
- **Return** or **Q** quits at any time.
- Closing the window also quits.

What the colours mean:

- **Red** marks the element just put in place, such as a pivot, a merged value or a selected minimum.
- **Green** marks the elements being compared or swapped.

When the sort finishes, every bar turns green and the tone stops.

## Using the algorithms directly

`sortviz.algorithms` provides `quick_sort`, `merge_sort`, `heap_sort`, `insertion_sort`,
`bubble_sort`, `selection_sort` and `bogo_sort`. Each one sorts a list in place over the
inclusive range `left`..`right`. If `right` is left out, the range runs to the end of the list.
Each one is a generator that yields a `Step` after every notable operation. A `Step` holds
the red index, two green indices and the index to sound, with `-1` meaning none.
`Step.colors(size)` turns a step into a list of `Color` values, one per bar:

```python
from sortviz.algorithms import quick_sort

values = [5, 3, 1, 4, 2]
for step in quick_sort(values, 0, len(values) - 1):
    print(step.colors(len(values)))
print(values)  # [1, 2, 3, 4, 5]
```

If you close the generator, the sort stops where it is.

- `bogo_sort` and `shuffle` accept a `random.Random` instance through `rng`, so that runs can be repeated.
- `is_sorted` is also a generator. Its return value, which you can collect with `yield from`, tells whether the range is sorted.

## Running a sort in the background

`sortviz.session.SortSession` owns a shuffled list and runs a sort on a worker thread, pausing
between steps. Its methods are:

- `start(state)` takes a `State` such as `State.QUICK_SORT`. It stops any running sort, reshuffles the list and starts the new sort.
- `stop()` ends the sort.
- `wait(timeout)` waits until the sort has finished.
- `snapshot()` returns a `Snapshot` that holds a consistent copy of the values, the colours and the sound index.

`shuffled_list(size, rng)` returns the numbers `1..size` in random order.

## Tones and layout

`sortviz.audio.tone_for(value, list_size)` returns the `(frequency, gain)` used for a bar.
`SineGenerator.samples(freq, gain, count)` returns successive chunks of a sine wave.
In `sortviz.app`, `bar_rects` computes the bar rectangles, `menu_lines` returns the menu
entries, and `state_for_key` maps a key name to the next state.

## Limits

The window size, pace, list size and tone range are constants in `sortviz.config`. The
command line cannot change them. To use other values, construct `App` or `SortSession`
yourself.