import random

import pytest

from sortviz.algorithms import (
    Color,
    Step,
    bogo_sort,
    bubble_sort,
    heap_sort,
    insertion_sort,
    is_sorted,
    merge_sort,
    quick_sort,
    selection_sort,
    shuffle,
)

FULL_RANGE_SORTS = [quick_sort, merge_sort, heap_sort, insertion_sort, bubble_sort, selection_sort]
SUBRANGE_SORTS = [quick_sort, merge_sort, insertion_sort, selection_sort]


def drain(gen):
    steps = []
    while True:
        try:
            steps.append(next(gen))
        except StopIteration as stop:
            return steps, stop.value


def permutation(size, seed):
    values = list(range(1, size + 1))
    random.Random(seed).shuffle(values)
    return values


def inversions(values):
    return sum(
        1
        for a_pos, a in enumerate(values)
        for b in values[a_pos + 1 :]
        if a > b
    )


def test_color_values_match_source():
    assert [Color.WHITE, Color.RED, Color.GREEN] == [0, 1, 2]
    assert Step(red=0, first_green=1).colors(3) == [1, 2, 0]


def test_step_colors_marks_red_and_greens():
    assert Step(red=1, first_green=2, sound=1).colors(4) == [
        Color.WHITE,
        Color.RED,
        Color.GREEN,
        Color.WHITE,
    ]


def test_step_colors_green_overrides_red_and_ignores_out_of_range():
    colors = Step(red=0, first_green=0, second_green=10).colors(3)
    assert colors == [Color.GREEN, Color.WHITE, Color.WHITE]


def test_default_step_is_all_white():
    assert Step().colors(5) == [Color.WHITE] * 5


@pytest.mark.parametrize("algorithm", FULL_RANGE_SORTS)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sorts_permutation(algorithm, seed):
    values = permutation(60, seed)
    expected = sorted(values)
    drain(algorithm(values))
    assert values == expected
    assert drain(is_sorted(values))[1] is True


@pytest.mark.parametrize("algorithm", FULL_RANGE_SORTS)
def test_sorts_with_duplicates(algorithm):
    values = [3, 1, 2, 3, 1, 2, 5, 5, 0]
    expected = sorted(values)
    drain(algorithm(values))
    assert values == expected
    assert drain(is_sorted(values))[1] is True


@pytest.mark.parametrize("algorithm", FULL_RANGE_SORTS)
def test_empty_and_single_lists_yield_nothing(algorithm):
    empty = []
    single = [7]
    assert drain(algorithm(empty))[0] == []
    assert drain(algorithm(single))[0] == []
    assert single == [7]
    assert drain(is_sorted(single)) == ([], True)


@pytest.mark.parametrize("algorithm", FULL_RANGE_SORTS)
def test_step_indices_stay_within_list(algorithm):
    values = permutation(40, 5)
    steps, _ = drain(algorithm(values))
    assert steps
    for step in steps:
        for index in (step.red, step.first_green, step.second_green, step.sound):
            assert -1 <= index < len(values)
    assert drain(is_sorted(values))[1] is True


@pytest.mark.parametrize("algorithm", SUBRANGE_SORTS)
def test_subrange_leaves_outside_untouched(algorithm):
    values = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    drain(algorithm(values, 2, 6))
    assert values[:2] == [9, 8]
    assert values[7:] == [2, 1]
    assert values[2:7] == sorted([7, 6, 5, 4, 3])
    assert drain(is_sorted(values, 2, 6))[1] is True


@pytest.mark.parametrize("algorithm", [insertion_sort, bubble_sort])
def test_step_count_equals_inversions(algorithm):
    values = permutation(30, 11)
    expected = inversions(values)
    steps, _ = drain(algorithm(values))
    assert len(steps) == expected


def test_already_sorted_quick_sort_still_terminates():
    values = list(range(1, 201))
    drain(quick_sort(values))
    assert values == list(range(1, 201))


def test_sort_can_be_stopped_midway():
    values = permutation(50, 3)
    original = sorted(values)
    gen = bubble_sort(values)
    next(gen)
    gen.close()
    assert sorted(values) == original
    assert values != original


def test_is_sorted_true_yields_each_pair():
    steps, result = drain(is_sorted([1, 2, 3, 4]))
    assert result is True
    assert [(s.first_green, s.second_green) for s in steps] == [(0, 1), (1, 2), (2, 3)]


def test_is_sorted_stops_at_first_disorder():
    steps, result = drain(is_sorted([1, 3, 2, 4]))
    assert result is False
    assert len(steps) == 1


def test_shuffle_keeps_elements_and_bounds():
    values = list(range(20))
    shuffle(values, 5, 14, random.Random(4))
    assert values[:5] == list(range(5))
    assert values[15:] == list(range(15, 20))
    assert sorted(values[5:15]) == list(range(5, 15))


def test_shuffle_is_deterministic_with_seed():
    first = list(range(30))
    second = list(range(30))
    shuffle(first, rng=random.Random(9))
    shuffle(second, rng=random.Random(9))
    assert first == second


def test_bogo_sort_sorts_small_list():
    values = [4, 2, 5, 1, 3]
    steps, _ = drain(bogo_sort(values, rng=random.Random(1)))
    assert values == [1, 2, 3, 4, 5]
    assert any(step.sound == 0 and step.first_green == -1 for step in steps)


def test_bogo_sort_on_sorted_list_does_not_shuffle():
    values = [1, 2, 3]
    steps, _ = drain(bogo_sort(values, rng=random.Random(0)))
    assert values == [1, 2, 3]
    assert all(step.first_green >= 0 for step in steps)