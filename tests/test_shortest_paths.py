import pytest
from hypothesis import given
from hypothesis import strategies as st

from cses_toolkit.shortest_paths import (
    DisjointSet,
    all_pairs_shortest,
    flight_discount,
    high_score,
    road_construction,
    road_reparation,
    shortest_routes,
)

edge_lists = st.lists(
    st.tuples(st.integers(1, 6), st.integers(1, 6), st.integers(1, 50)), max_size=15
)


def test_disjoint_set_union_and_find():
    ds = DisjointSet("abcde")
    assert ds.union("a", "b") is True
    assert ds.union("c", "b") is True
    assert ds.find("a") == ds.find("c")
    assert ds.find("d") != ds.find("a")
    assert ds.size("c") == 3
    assert ds.size("e") == 1


def test_disjoint_set_repeated_union():
    ds = DisjointSet(range(3))
    ds.union(0, 1)
    assert ds.union(1, 0) is False
    assert ds.size(0) == 2


def test_disjoint_set_unknown_element():
    with pytest.raises(KeyError):
        DisjointSet([1, 2]).find(9)


def test_shortest_routes_source_is_zero_and_unreachable_none():
    result = shortest_routes(3, [(1, 2, 4)])
    assert result[0] == 0
    assert result[1] == 4
    assert result[2] is None


@given(edge_lists)
def test_shortest_routes_respects_every_edge(flights):
    distance = shortest_routes(6, flights)
    for a, b, c in flights:
        if distance[a - 1] is not None:
            assert distance[b - 1] is not None
            assert distance[b - 1] <= distance[a - 1] + c


@given(edge_lists)
def test_shortest_routes_matches_all_pairs_on_two_way_roads(roads):
    both_ways = roads + [(b, a, c) for a, b, c in roads]
    single = shortest_routes(6, both_ways)
    pairs = all_pairs_shortest(6, roads, [(1, t) for t in range(1, 7)])
    assert [-1 if d is None else d for d in single] == pairs


def test_shortest_routes_bad_node():
    with pytest.raises(ValueError):
        shortest_routes(2, [(1, 3, 1)])


@given(edge_lists)
def test_all_pairs_symmetric_and_zero_diagonal(roads):
    queries = [(a, b) for a in range(1, 7) for b in range(1, 7)]
    answers = dict(zip(queries, all_pairs_shortest(6, roads, queries)))
    for a in range(1, 7):
        assert answers[a, a] == 0
        for b in range(1, 7):
            assert answers[a, b] == answers[b, a]


def test_all_pairs_unreachable():
    assert all_pairs_shortest(3, [(1, 2, 5)], [(1, 3), (2, 1)]) == [-1, 5]


def test_flight_discount_single_flight():
    assert flight_discount(2, [(1, 2, 7)]) == 7 // 2


@given(edge_lists)
def test_flight_discount_never_exceeds_full_price(flights):
    full = shortest_routes(6, flights)[-1]
    if full is None:
        with pytest.raises(ValueError):
            flight_discount(6, flights)
    else:
        discounted = flight_discount(6, flights)
        assert full // 2 <= discounted <= full


def test_high_score_chain():
    assert high_score(3, [(1, 2, 5), (2, 3, 3)]) == 5 + 3


def test_high_score_positive_cycle_on_route():
    assert high_score(3, [(1, 2, 1), (2, 1, 1), (2, 3, 1)]) == -1


def test_high_score_positive_cycle_off_route():
    tunnels = [(1, 3, 4), (1, 2, 1), (2, 4, 1), (4, 2, 1)]
    assert high_score(4, tunnels) == -1
    assert high_score(3, [(1, 3, 4), (1, 2, 1), (2, 2, 1)]) == 4


def test_high_score_unreachable():
    with pytest.raises(ValueError):
        high_score(3, [(1, 2, 1)])


@given(st.lists(st.tuples(st.integers(1, 6), st.integers(1, 6)), min_size=1, max_size=12))
def test_road_construction_invariants(roads):
    report = road_construction(6, roads)
    assert len(report) == len(roads)
    counts = [count for count, _ in report]
    sizes = [size for _, size in report]
    assert counts == sorted(counts, reverse=True)
    assert sizes == sorted(sizes)
    ds = DisjointSet(range(1, 7))
    for a, b in roads:
        ds.union(a, b)
    assert counts[-1] == len({ds.find(node) for node in range(1, 7)})
    assert sizes[-1] == max(ds.size(node) for node in range(1, 7))


def test_road_construction_duplicate_road_keeps_state():
    report = road_construction(4, [(1, 2), (2, 1)])
    assert report[0] == report[1]
    assert report[0][0] == 3


def test_road_reparation_tree_costs_everything():
    roads = [(1, 2, 3), (2, 3, 8), (3, 4, 2)]
    assert road_reparation(4, roads) == sum(cost for _, _, cost in roads)


def test_road_reparation_skips_expensive_cycle_edge():
    roads = [(1, 2, 3), (2, 3, 8), (1, 3, 2)]
    assert road_reparation(3, roads) == 3 + 2


def test_road_reparation_impossible():
    with pytest.raises(ValueError, match="IMPOSSIBLE"):
        road_reparation(4, [(1, 2, 1), (3, 4, 1)])


@given(edge_lists)
def test_road_reparation_at_most_full_cost(roads):
    ds = DisjointSet(range(1, 7))
    for a, b, _ in roads:
        ds.union(a, b)
    if ds.size(1) == 6:
        assert road_reparation(6, roads) <= sum(cost for _, _, cost in roads)
    else:
        with pytest.raises(ValueError):
            road_reparation(6, roads)