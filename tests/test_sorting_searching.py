import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cses_toolkit.sorting_searching import (
    apartments,
    collecting_numbers,
    concert_tickets,
    distinct_numbers,
    factory_machines,
    ferris_wheel,
    josephus,
    maximum_subarray_sum,
    missing_coin_sum,
    movie_festival,
    movie_festival_two,
    nearest_smaller_values,
    playlist,
    reading_books,
    restaurant_customers,
    room_allocation,
    stick_lengths,
    subarray_divisibility,
    subarray_sums,
    subarray_sums_positive,
    sum_of_three_values,
    sum_of_two_values,
    tasks_and_deadlines,
    towers,
    traffic_lights,
)

small_ints = st.lists(st.integers(-20, 20), max_size=12)
positive_ints = st.lists(st.integers(1, 20), max_size=12)


@st.composite
def movie_lists(draw, max_size=7):
    starts = draw(st.lists(st.integers(0, 15), max_size=max_size))
    return [(s, s + draw(st.integers(1, 6))) for s in starts]


def _subarrays(items):
    for i in range(len(items)):
        for j in range(i + 1, len(items) + 1):
            yield items[i:j]


def _compatible(movies):
    ordered = sorted(movies)
    return all(b[0] >= a[1] for a, b in zip(ordered, ordered[1:]))


@given(small_ints)
def test_distinct_numbers_ignores_duplicates(values):
    assert distinct_numbers(values + values) == distinct_numbers(values)


@given(st.integers(0, 50))
def test_distinct_numbers_counts_range(n):
    assert distinct_numbers(range(n)) == n


def test_apartments_example():
    assert apartments([60, 45, 80, 60], [30, 60, 75], 5) == 2


def _max_matching(desired, sizes, tolerance):
    owner = {}

    def assign(applicant, seen):
        for j, size in enumerate(sizes):
            if abs(size - desired[applicant]) <= tolerance and j not in seen:
                seen.add(j)
                if j not in owner or assign(owner[j], seen):
                    owner[j] = applicant
                    return True
        return False

    return sum(assign(a, set()) for a in range(len(desired)))


@given(
    st.lists(st.integers(1, 30), max_size=7),
    st.lists(st.integers(1, 30), max_size=7),
    st.integers(0, 5),
)
def test_apartments_matches_brute_force(desired, sizes, tolerance):
    assert apartments(desired, sizes, tolerance) == _max_matching(desired, sizes, tolerance)


def _min_gondolas(weights, limit):
    if not weights:
        return 0
    first, rest = weights[0], weights[1:]
    best = 1 + _min_gondolas(rest, limit)
    for i, weight in enumerate(rest):
        if first + weight <= limit:
            best = min(best, 1 + _min_gondolas(rest[:i] + rest[i + 1 :], limit))
    return best


@given(st.lists(st.integers(1, 10), max_size=7), st.integers(10, 20))
def test_ferris_wheel_matches_brute_force(weights, limit):
    assert ferris_wheel(weights, limit) == _min_gondolas(weights, limit)


@given(positive_ints, positive_ints)
def test_concert_tickets_matches_simulation(prices, offers):
    remaining = list(prices)
    expected = []
    for offer in offers:
        fitting = [p for p in remaining if p <= offer]
        if fitting:
            remaining.remove(max(fitting))
            expected.append(max(fitting))
        else:
            expected.append(-1)
    assert concert_tickets(prices, offers) == expected


@given(movie_lists(max_size=10))
def test_restaurant_customers_matches_brute_force(visits):
    expected = max((sum(s <= t < e for s, e in visits) for t, _ in visits), default=0)
    assert restaurant_customers(visits) == expected


@given(movie_lists())
def test_movie_festival_matches_brute_force(movies):
    expected = max(
        size
        for size in range(len(movies) + 1)
        if any(_compatible(c) for c in itertools.combinations(movies, size))
    )
    assert movie_festival(movies) == expected


@settings(max_examples=50)
@given(movie_lists(max_size=6), st.integers(1, 3))
def test_movie_festival_two_matches_brute_force(movies, members):
    best = 0
    for choice in itertools.product(range(members + 1), repeat=len(movies)):
        groups = [
            [m for m, who in zip(movies, choice) if who == member]
            for member in range(1, members + 1)
        ]
        if all(_compatible(group) for group in groups):
            best = max(best, sum(1 for who in choice if who))
    assert movie_festival_two(movies, members) == best


def test_movie_festival_two_needs_members():
    with pytest.raises(ValueError):
        movie_festival_two([(1, 2)], 0)


@given(st.lists(st.integers(1, 20), max_size=8), st.integers(2, 40))
def test_sum_of_two_values(values, target):
    has_pair = any(a + b == target for a, b in itertools.combinations(values, 2))
    if has_pair:
        i, j = sum_of_two_values(values, target)
        assert i != j
        assert values[i - 1] + values[j - 1] == target
    else:
        with pytest.raises(ValueError):
            sum_of_two_values(values, target)


@given(st.lists(st.integers(1, 20), max_size=8), st.integers(3, 60))
def test_sum_of_three_values(values, target):
    has_triple = any(sum(c) == target for c in itertools.combinations(values, 3))
    if has_triple:
        positions = sum_of_three_values(values, target)
        assert len(set(positions)) == 3
        assert sum(values[p - 1] for p in positions) == target
    else:
        with pytest.raises(ValueError):
            sum_of_three_values(values, target)


@given(small_ints.filter(bool))
def test_maximum_subarray_sum_matches_brute_force(values):
    assert maximum_subarray_sum(values) == max(sum(s) for s in _subarrays(values))


def test_maximum_subarray_sum_rejects_empty():
    with pytest.raises(ValueError):
        maximum_subarray_sum([])


@given(small_ints.filter(bool))
def test_stick_lengths_matches_brute_force(lengths):
    expected = min(sum(abs(x - t) for x in lengths) for t in lengths)
    assert stick_lengths(lengths) == expected


@given(st.lists(st.integers(1, 15), max_size=8))
def test_missing_coin_sum_matches_brute_force(coins):
    sums = {sum(c) for size in range(len(coins) + 1) for c in itertools.combinations(coins, size)}
    expected = next(s for s in itertools.count(1) if s not in sums)
    assert missing_coin_sum(coins) == expected


@given(st.integers(1, 30))
def test_collecting_numbers_extremes(n):
    assert collecting_numbers(list(range(1, n + 1))) == 1
    assert collecting_numbers(list(range(n, 0, -1))) == n


def test_collecting_numbers_rejects_non_permutation():
    with pytest.raises(ValueError):
        collecting_numbers([1, 1, 3])


@given(st.lists(st.integers(1, 6), max_size=12))
def test_playlist_matches_brute_force(songs):
    expected = max((len(s) for s in _subarrays(songs) if len(set(s)) == len(s)), default=0)
    assert playlist(songs) == expected


@given(st.lists(st.integers(1, 10), max_size=12))
def test_towers_equals_longest_non_decreasing_subsequence(cubes):
    longest = []
    for i, cube in enumerate(cubes):
        longest.append(1 + max((longest[j] for j in range(i) if cubes[j] <= cube), default=0))
    assert towers(cubes) == max(longest, default=0)


@st.composite
def light_layouts(draw):
    length = draw(st.integers(2, 30))
    positions = draw(st.lists(st.integers(1, length - 1), unique=True))
    return length, positions


@given(light_layouts())
def test_traffic_lights_matches_recomputation(layout):
    length, positions = layout
    expected = []
    for count in range(1, len(positions) + 1):
        marks = sorted([0, length, *positions[:count]])
        expected.append(max(b - a for a, b in zip(marks, marks[1:])))
    assert traffic_lights(length, positions) == expected


def test_traffic_lights_rejects_duplicate_position():
    with pytest.raises(ValueError):
        traffic_lights(8, [3, 3])


def test_josephus_example():
    assert josephus(7) == [2, 4, 6, 1, 5, 3, 7]


@given(st.integers(1, 60))
def test_josephus_is_permutation(n):
    assert sorted(josephus(n)) == list(range(1, n + 1))


def test_josephus_rejects_zero():
    with pytest.raises(ValueError):
        josephus(0)


@st.composite
def stays(draw):
    starts = draw(st.lists(st.integers(1, 15), max_size=10))
    return [(s, s + draw(st.integers(0, 5))) for s in starts]


@given(stays())
def test_room_allocation_is_valid_and_minimal(customers):
    rooms, assigned = room_allocation(customers)
    assert len(assigned) == len(customers)
    assert all(1 <= room <= rooms for room in assigned)
    peak = max((sum(a <= d <= b for a, b in customers) for d, _ in customers), default=0)
    assert rooms == peak
    for room in set(assigned):
        ordered = sorted(c for c, r in zip(customers, assigned) if r == room)
        assert all(nxt[0] > prev[1] for prev, nxt in zip(ordered, ordered[1:]))


@given(st.lists(st.integers(1, 8), min_size=1, max_size=5), st.integers(0, 30))
def test_factory_machines_matches_brute_force(times, target):
    expected = next(t for t in itertools.count() if sum(t // k for k in times) >= target)
    assert factory_machines(times, target) == expected


def test_factory_machines_rejects_no_machines():
    with pytest.raises(ValueError):
        factory_machines([], 3)


@given(st.lists(st.tuples(st.integers(1, 10), st.integers(1, 30)), max_size=5))
def test_tasks_and_deadlines_matches_brute_force(tasks):
    def reward(order):
        clock = total = 0
        for duration, deadline in order:
            clock += duration
            total += deadline - clock
        return total

    expected = max(reward(order) for order in itertools.permutations(tasks))
    assert tasks_and_deadlines(tasks) == expected


@given(st.integers(1, 100))
def test_reading_books_small_cases(time):
    assert reading_books([time]) == 2 * time
    assert reading_books([time, time, time]) == 3 * time


@given(positive_ints, st.integers(1, 40))
def test_subarray_sums_positive_matches_brute_force(values, target):
    expected = sum(sum(s) == target for s in _subarrays(values))
    assert subarray_sums_positive(values, target) == expected


def test_subarray_sums_positive_rejects_non_positive():
    with pytest.raises(ValueError):
        subarray_sums_positive([1, 0, 2], 3)


@given(small_ints, st.integers(-20, 20))
def test_subarray_sums_matches_brute_force(values, target):
    expected = sum(sum(s) == target for s in _subarrays(values))
    assert subarray_sums(values, target) == expected


@given(small_ints)
def test_subarray_divisibility_matches_brute_force(values):
    expected = sum(sum(s) % len(values) == 0 for s in _subarrays(values))
    assert subarray_divisibility(values) == expected


@given(small_ints)
def test_nearest_smaller_values_matches_brute_force(values):
    expected = [
        next((j + 1 for j in range(i - 1, -1, -1) if values[j] < value), 0)
        for i, value in enumerate(values)
    ]
    assert nearest_smaller_values(values) == expected