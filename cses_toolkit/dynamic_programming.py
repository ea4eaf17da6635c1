"""Dynamic-programming counting and optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
DIE_FACES = 6


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(coin < 1 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def dice_combinations(n: int) -> int:
    """Count ordered sequences of die throws summing to ``n``, modulo 10**9+7."""
    _non_negative("n", n)
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - DIE_FACES):total]) % MOD)
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to ``target``, or -1 when no sum is possible."""
    values = _positive_coins(coins)
    _non_negative("target", target)
    fewest: list[int | None] = [0]
    for amount in range(1, target + 1):
        options = [
            fewest[amount - coin]
            for coin in values
            if coin <= amount and fewest[amount - coin] is not None
        ]
        fewest.append(min(options) + 1 if options else None)
    result = fewest[target]
    return -1 if result is None else result


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered coin sequences summing to ``target``, modulo 10**9+7."""
    values = _positive_coins(coins)
    _non_negative("target", target)
    ways = [1]
    for amount in range(1, target + 1):
        ways.append(sum(ways[amount - coin] for coin in values if coin <= amount) % MOD)
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count coin multisets summing to ``target``, modulo 10**9+7."""
    values = _positive_coins(coins)
    _non_negative("target", target)
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach 0 by subtracting one of the number's digits."""
    _non_negative("n", n)
    steps = [0]
    for number in range(1, n + 1):
        steps.append(1 + min(steps[number - int(d)] for d in str(number) if d != "0"))
    return steps[n]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths across a square grid avoiding '*' cells, modulo 10**9+7."""
    rows = list(grid)
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("grid must be a non-empty square")
    ways = [0] * size
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "*":
                ways[c] = 0
            elif r == 0 and c == 0:
                ways[c] = 1
            elif c:
                ways[c] = (ways[c] + ways[c - 1]) % MOD
    return ways[-1]


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages obtainable by buying each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _non_negative("budget", budget)
    best = [0] * (budget + 1)
    for price, page_count in zip(prices, pages):
        if price < 0:
            raise ValueError("prices must not be negative")
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], best[spend - price] + page_count)
    return best[budget]


def array_description(values: Sequence[int], upper: int) -> int:
    """Count ways to fill the zeros so neighbours differ by at most 1, within 1..upper."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError("upper must be a positive integer")
    if any(not 0 <= value <= upper for value in items):
        raise ValueError("values must lie in 0..upper")

    def allowed(value: int) -> Iterable[int]:
        return range(1, upper + 1) if value == 0 else (value,)

    counts = [0] * (upper + 2)
    for candidate in allowed(items[0]):
        counts[candidate] = 1
    for value in items[1:]:
        following = [0] * (upper + 2)
        for candidate in allowed(value):
            following[candidate] = (
                counts[candidate - 1] + counts[candidate] + counts[candidate + 1]
            ) % MOD
        counts = following
    return sum(counts) % MOD


def edit_distance(first: str, second: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, 1):
        current = [i]
        for j, b in enumerate(second, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def rectangle_cutting(a: int, b: int) -> int:
    """Return the fewest straight cuts that split an a x b rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError("sides must be positive integers")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for i in range(1, a + 1):
        for j in range(1, b + 1):
            if i == j:
                continue
            vertical = (cuts[i][k] + cuts[i][j - k] + 1 for k in range(1, j))
            horizontal = (cuts[k][j] + cuts[i - k][j] + 1 for k in range(1, i))
            cuts[i][j] = min((*vertical, *horizontal))
    return cuts[a][b]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return, in increasing order, every positive sum some subset of coins makes."""
    reachable = 1
    for coin in _positive_coins(coins):
        reachable |= reachable << coin
    return [total for total in range(1, reachable.bit_length()) if reachable >> total & 1]