"""Greedy, two-pointer and ordered-set problems on sequences."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many distinct values appear."""
    return len(set(values))


def apartments(desired: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Return how many applicants get an apartment within ``tolerance`` of their wish."""
    wanted = sorted(desired)
    free = sorted(sizes)
    j = 0
    matched = 0
    for want in wanted:
        while j < len(free) and free[j] < want - tolerance:
            j += 1
        if j < len(free) and free[j] <= want + tolerance:
            matched += 1
            j += 1
    return matched


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas, each holding one or two children within ``limit``."""
    ordered = sorted(weights)
    lo, hi = 0, len(ordered) - 1
    gondolas = 0
    while lo <= hi:
        if ordered[lo] + ordered[hi] <= limit:
            lo += 1
        hi -= 1
        gondolas += 1
    return gondolas


def concert_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int]:
    """Sell each customer the dearest ticket not above their offer; -1 if none is left."""
    tickets = SortedList(prices)
    sold = []
    for offer in offers:
        index = tickets.bisect_right(offer)
        sold.append(tickets.pop(index - 1) if index else -1)
    return sold


def restaurant_customers(visits: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at the same time."""
    events = []
    for arrival, leaving in visits:
        events.append((arrival, 1))
        events.append((leaving, -1))
    best = present = 0
    for _, change in sorted(events):
        present += change
        best = max(best, present)
    return best


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most whole movies one person can watch."""
    watched = 0
    free_at = 0
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        if start >= free_at:
            free_at = end
            watched += 1
    return watched


def movie_festival_two(movies: Iterable[tuple[int, int]], members: int) -> int:
    """Return the most movies a club of ``members`` people can watch in total."""
    if members < 1:
        raise ValueError("members must be a positive integer")
    free_at = SortedList([0] * members)
    watched = 0
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        index = free_at.bisect_right(start)
        if index:
            free_at.pop(index - 1)
            free_at.add(end)
            watched += 1
    return watched


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int]:
    """Return 1-based positions of two values summing to ``target``."""
    ordered = sorted((value, position) for position, value in enumerate(values, 1))
    lo, hi = 0, len(ordered) - 1
    while lo < hi:
        total = ordered[lo][0] + ordered[hi][0]
        if total > target:
            hi -= 1
        elif total < target:
            lo += 1
        else:
            return ordered[lo][1], ordered[hi][1]
    raise ValueError("IMPOSSIBLE")


def sum_of_three_values(values: Iterable[int], target: int) -> tuple[int, int, int]:
    """Return 1-based positions of three values summing to ``target``."""
    ordered = sorted((value, position) for position, value in enumerate(values, 1))
    for middle, (pivot, pivot_position) in enumerate(ordered):
        lo, hi = 0, len(ordered) - 1
        while lo < hi:
            if lo == middle:
                lo += 1
            elif hi == middle:
                hi -= 1
            else:
                total = ordered[lo][0] + ordered[hi][0] + pivot
                if total < target:
                    lo += 1
                elif total > target:
                    hi -= 1
                else:
                    return ordered[lo][1], pivot_position, ordered[hi][1]
    raise ValueError("IMPOSSIBLE")


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    best = current = items[0]
    for value in items[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total change that makes every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("lengths must not be empty")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest positive sum no subset of the coins makes."""
    reachable = 0
    for coin in sorted(coins):
        if coin > reachable + 1:
            break
        reachable += coin
    return reachable + 1


def collecting_numbers(values: Sequence[int]) -> int:
    """Return the rounds needed to collect 1..n scanning the permutation left to right."""
    items = list(values)
    if sorted(items) != list(range(1, len(items) + 1)):
        raise ValueError("values must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(items)}
    return 1 + sum(position[v + 1] < position[v] for v in range(1, len(items)))


def playlist(songs: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive distinct songs."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for index, song in enumerate(songs):
        if last_seen.get(song, -1) >= start:
            start = last_seen[song] + 1
        last_seen[song] = index
        best = max(best, index - start + 1)
    return best


def towers(cubes: Iterable[int]) -> int:
    """Return the number of towers built placing each cube on the smallest larger top."""
    tops = SortedList()
    for cube in cubes:
        index = tops.bisect_right(cube)
        if index < len(tops):
            tops.pop(index)
        tops.add(cube)
    return len(tops)


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """After each light is added, report the longest stretch without lights."""
    if length < 1:
        raise ValueError("length must be a positive integer")
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError(f"position {position} is outside 1..{length - 1}")
        if position in lights:
            raise ValueError(f"position {position} already has a light")
        index = lights.bisect_left(position)
        left, right = lights[index - 1], lights[index]
        lights.add(position)
        gaps.remove(right - left)
        gaps.add(position - left)
        gaps.add(right - position)
        longest.append(gaps[-1])
    return longest


def josephus(n: int) -> list[int]:
    """Return the order in which children 1..n are removed, every second one going."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    circle = deque(range(1, n + 1))
    order = []
    while len(circle) > 1:
        circle.rotate(-1)
        order.append(circle.popleft())
    order.append(circle[0])
    return order


def room_allocation(customers: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Assign rooms to (arrival, departure) stays; return room count and each room."""
    items = list(customers)
    free_at = SortedList((0, -room) for room in range(len(items)))
    assigned = [0] * len(items)
    rooms = 0
    ordered = sorted(enumerate(items), key=lambda item: (item[1][1], item[1][0], item[0]))
    for index, (arrival, departure) in ordered:
        slot = free_at.bisect_left((arrival, -math.inf))
        if slot == 0:
            raise ValueError("arrival days must be positive")
        _, negative_room = free_at.pop(slot - 1)
        room = -negative_room + 1
        rooms = max(rooms, room)
        assigned[index] = room
        free_at.add((departure, negative_room))
    return rooms, assigned


def factory_machines(times: Iterable[int], target: int) -> int:
    """Return the least time in which the machines make ``target`` products."""
    durations = list(times)
    if not durations:
        raise ValueError("times must not be empty")
    if any(duration < 1 for duration in durations):
        raise ValueError("machine times must be positive")
    if target < 0:
        raise ValueError("target must not be negative")
    lo, hi = 0, min(durations) * target
    while lo < hi:
        mid = (lo + hi) // 2
        if sum(mid // duration for duration in durations) >= target:
            hi = mid
        else:
            lo = mid + 1
    return lo


def tasks_and_deadlines(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total of deadline minus finish time over (duration, deadline) tasks."""
    clock = 0
    reward = 0
    for duration, deadline in sorted(tasks):
        clock += duration
        reward += deadline - clock
    return reward


def reading_books(times: Iterable[int]) -> int:
    """Return the least time for two readers to each read every book."""
    items = list(times)
    if not items:
        return 0
    total = sum(items)
    longest = max(items)
    return 2 * longest if longest > total - longest else total


def subarray_sums_positive(values: Sequence[int], target: int) -> int:
    """Count subarrays of positive values that sum to ``target``."""
    items = list(values)
    if any(value < 1 for value in items):
        raise ValueError("values must be positive")
    count = 0
    window = 0
    left = 0
    for right, value in enumerate(items):
        window += value
        while window > target and left <= right:
            window -= items[left]
            left += 1
        if window == target and left <= right:
            count += 1
    return count


def subarray_sums(values: Iterable[int], target: int) -> int:
    """Count subarrays that sum to ``target``."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for value in values:
        prefix += value
        count += seen[prefix - target]
        seen[prefix] += 1
    return count


def subarray_divisibility(values: Sequence[int]) -> int:
    """Count subarrays whose sum is divisible by the number of values."""
    items = list(values)
    n = len(items)
    if n == 0:
        return 0
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for value in items:
        prefix = (prefix + value) % n
        count += seen[prefix]
        seen[prefix] += 1
    return count


def nearest_smaller_values(values: Iterable[int]) -> list[int]:
    """For each value, return the 1-based position of the nearest smaller one before it, or 0."""
    stack: list[tuple[int, int]] = []
    nearest = []
    for position, value in enumerate(values, 1):
        while stack and stack[-1][0] >= value:
            stack.pop()
        nearest.append(stack[-1][1] if stack else 0)
        stack.append((value, position))
    return nearest