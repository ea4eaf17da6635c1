"""Introductory counting, construction and search problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

MOD = 1_000_000_007
BOARD_SIZE = 8


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence that halves even values and maps odd ones to 3n+1, ending at 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = []
    while n != 1:
        sequence.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    sequence.append(1)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the smallest value in 1..n that does not appear in ``numbers``."""
    present = set(numbers)
    for candidate in range(1, n + 1):
        if candidate not in present:
            return candidate
    raise ValueError("no number in 1..n is missing")


def repetitions(sequence: Sequence) -> int:
    """Return the length of the longest run of equal adjacent items."""
    if not sequence:
        return 0
    best = current = 1
    for previous, item in zip(sequence, sequence[1:]):
        current = current + 1 if item == previous else 1
        best = max(best, current)
    return best


def increasing_array(values: Iterable[int]) -> int:
    """Return the total increments needed to make ``values`` non-decreasing."""
    moves = 0
    highest = None
    for value in values:
        if highest is not None and value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def permutations(n: int) -> list[int]:
    """Return a permutation of 1..n with no two adjacent values differing by one."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n in (2, 3):
        raise ValueError("NO SOLUTION")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def number_spiral(y: int, x: int) -> int:
    """Return the value at row ``y``, column ``x`` of the number spiral."""
    if y < 1 or x < 1:
        raise ValueError("coordinates start at 1")
    if y > x:
        if y % 2 == 0:
            return y * y - x + 1
        return (y - 1) * (y - 1) + x
    if x % 2 == 1:
        return x * x - y + 1
    return (x - 1) * (x - 1) + y


def two_knights(n: int) -> list[int]:
    """For k = 1..n, count ways to place two non-attacking knights on a k x k board."""
    return [
        (
            (k - 4) * (k - 4) * (k * k - 9)
            + 4 * (k - 4) * (k * k - 7)
            + 4 * (k - 3) * (k * k - 5)
            + 8 * (k * k - 4)
            + 4 * (k * k - 3)
        )
        // 2
        for k in range(1, n + 1)
    ]


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum; raise ValueError when impossible."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    odd_sum = sum(range(1, n + 1, 2))
    even_sum = sum(range(2, n + 1, 2))
    diff = abs(odd_sum - even_sum)
    if diff % 2:
        raise ValueError("NO")

    in_first = [False] + [i % 2 == 1 for i in range(1, n + 1)]

    def toggle(index: int) -> None:
        in_first[index] = not in_first[index]

    if diff % 4 == 2:
        toggle(n)
        toggle(n - diff // 2)
    else:
        in_first[1] = False
        toggle(n)
        toggle(n - 1 - diff // 2 if n % 2 == 0 else n + 1 - diff // 2)

    first = [i for i in range(1, n + 1) if in_first[i]]
    second = [i for i in range(1, n + 1) if not in_first[i]]
    return first, second


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by taking 2 from one and 1 from the other."""
    return (
        2 * a - b >= 0
        and 2 * b - a >= 0
        and (2 * b - a) % 3 == 0
        and (2 * a - b) % 3 == 0
    )


def palindrome_reorder(text: str) -> str:
    """Reorder upper-case letters into the alphabetically first-built palindrome."""
    if any(not ("A" <= ch <= "Z") for ch in text):
        raise ValueError("text must contain only letters A-Z")
    counts = Counter(text)
    odd_letters = [ch for ch in sorted(counts) if counts[ch] % 2]
    if len(odd_letters) >= 2:
        raise ValueError("NO SOLUTION")
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    return half + "".join(odd_letters) + half[::-1]


def gray_code(n: int) -> list[str]:
    """Return the 2**n codes of a Gray code of width ``n``, least significant bit first."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    return [format(i ^ (i >> 1), f"0{n}b")[::-1] for i in range(1 << n)]


def _hanoi(n: int, start: int, end: int, spare: int) -> Iterator[tuple[int, int]]:
    if n:
        yield from _hanoi(n - 1, start, spare, end)
        yield start, end
        yield from _hanoi(n - 1, spare, end, start)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves that bring ``n`` disks from peg 1 to peg 3."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_hanoi(n, 1, 3, 2))


def _distinct_permutations(counts: Counter, remaining: int) -> Iterator[str]:
    if remaining == 0:
        yield ""
        return
    for ch in sorted(counts):
        if counts[ch]:
            counts[ch] -= 1
            for rest in _distinct_permutations(counts, remaining - 1):
                yield ch + rest
            counts[ch] += 1


def creating_strings(text: str) -> list[str]:
    """Return every distinct arrangement of ``text`` in lexicographic order."""
    return list(_distinct_permutations(Counter(text), len(text)))


def apple_division(weights: Iterable[int]) -> int:
    """Return the minimal difference between the weights of two groups."""
    weights = list(weights)
    total = sum(weights)
    sums = {0}
    for weight in weights:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def chessboard_queens(board: Sequence[str]) -> int:
    """Count placements of eight queens on free ('.') squares of an 8x8 board."""
    rows = list(board)
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError("board must be 8 rows of 8 squares")

    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == BOARD_SIZE:
            return 1
        total = 0
        for col, square in enumerate(rows[row]):
            if (
                square != "."
                or col in columns
                or row - col in diagonals
                or row + col in anti_diagonals
            ):
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            total += place(row + 1)
            columns.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)
        return total

    return place(0)


def digit_query(k: int) -> int:
    """Return the k-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    width, count, first = 1, 9, 1
    while k > width * count:
        k -= width * count
        width += 1
        count *= 10
        first *= 10
    number = first + (k - 1) // width
    return int(str(number)[(k - 1) % width])