# cses_toolkit

Classic competitive-programming problems solved as plain Python functions.
Each function takes ordinary Python values (ints, lists, strings, lists of
tuples) and returns its answer rather than printing it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cses_toolkit.introductory`: `weird_algorithm`, `missing_number`,
  `repetitions`, `increasing_array`, `permutations`, `number_spiral`,
  `two_knights`, `two_sets`, `bit_strings`, `trailing_zeros`, `coin_piles`,
  `palindrome_reorder`, `gray_code`, `tower_of_hanoi`, `creating_strings`,
  `apple_division`, `chessboard_queens` and `digit_query`.
- `cses_toolkit.histogram`: `largest_rectangle` under a histogram and
  `maximum_building` for the largest rectangle of free cells in a grid
  where `*` marks a blocked cell.
- `cses_toolkit.dynamic_programming`: `dice_combinations`,
  `minimizing_coins`, `coin_combinations_ordered`,
  `coin_combinations_unordered`, `removing_digits`, `grid_paths`,
  `book_shop`, `array_description`, `edit_distance`, `rectangle_cutting`
  and `money_sums`. Counting results are taken modulo 10**9+7.
- `cses_toolkit.shortest_paths`: `shortest_routes`, `all_pairs_shortest`,
  `flight_discount`, `high_score`, `road_construction` and
  `road_reparation`, plus `DisjointSet`, a union-find structure with
  `find`, `union` and `size`.
- `cses_toolkit.sorting_searching`: two-pointer, sweep and ordered-set
  problems: `distinct_numbers`, `apartments`, `ferris_wheel`,
  `concert_tickets`, `restaurant_customers`, `movie_festival`,
  `movie_festival_two`, `sum_of_two_values`, `sum_of_three_values`,
  `maximum_subarray_sum`, `stick_lengths`, `missing_coin_sum`,
  `collecting_numbers`, `playlist`, `towers`, `traffic_lights`,
  `josephus`, `room_allocation`, `factory_machines`,
  `tasks_and_deadlines`, `reading_books`, `subarray_sums_positive`,
  `subarray_sums`, `subarray_divisibility` and `nearest_smaller_values`.
- `cses_toolkit.graph_traversal`: searches on grids and graphs:
  `counting_rooms`, `labyrinth`, `monsters`, `building_roads`,
  `message_route`, `building_teams`, `round_trip` and `course_schedule`.

## Example

```python
from cses_toolkit.dynamic_programming import edit_distance
from cses_toolkit.introductory import weird_algorithm

edit_distance("LOVE", "MOVIE")   # 2
weird_algorithm(3)               # [3, 10, 5, 16, 8, 4, 2, 1]
```

## Conventions

- Nodes in graph problems are numbered from 1; grids are given as a
  sequence of equal-length strings.
- Where a problem has no answer (for example `two_sets`, `labyrinth`,
  `round_trip`, `course_schedule`, `road_reparation`), the function raises
  `ValueError` instead of returning an "IMPOSSIBLE" marker. Invalid input,
  such as a node outside 1..n, also raises `ValueError`.
- A few functions keep a sentinel in their result: `minimizing_coins`
  returns -1 when no sum is possible, `high_score` returns -1 when the
  score can grow without bound, `concert_tickets` and `all_pairs_shortest`
  use -1 for a customer with no ticket or an unreachable pair, and
  `shortest_routes` uses `None` for an unreachable city.

## What this package does not do

It is a library only. It has no command-line program and does not read
problem input from standard input or write answers in a judge's output
format; parsing input and printing results is left to the caller.