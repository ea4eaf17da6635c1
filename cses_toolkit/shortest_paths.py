"""Weighted shortest paths, spanning trees and disjoint-set connectivity."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable


class DisjointSet:
    """Union-find over a fixed collection of elements, merging by size."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for element in elements:
            self._parent[element] = element
            self._size[element] = 1

    def find(self, node: Hashable) -> Hashable:
        """Return the representative of the set holding ``node``."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size.pop(root_b)
        return True

    def size(self, node: Hashable) -> int:
        """Return the number of elements in the set holding ``node``."""
        return self._size[self.find(node)]


def _check_nodes(n: int, *nodes: int) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, weight in edges:
        _check_nodes(n, a, b)
        adjacency[a].append((b, weight))
    return adjacency


def shortest_routes(n: int, flights: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return the shortest distance from city 1 to each city 1..n; None if unreachable."""
    adjacency = _adjacency(n, flights)
    distance = [math.inf] * (n + 1)
    distance[1] = 0
    queue = [(0, 1)]
    while queue:
        dist, node = heapq.heappop(queue)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return [None if d == math.inf else d for d in distance[1:]]


def all_pairs_shortest(
    n: int,
    roads: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer distance queries over two-way roads; -1 marks an unreachable pair."""
    distance = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for a, b, weight in roads:
        _check_nodes(n, a, b)
        distance[a][b] = min(distance[a][b], weight)
        distance[b][a] = min(distance[b][a], weight)
    for node in range(1, n + 1):
        distance[node][node] = 0
    for via in range(1, n + 1):
        through = distance[via]
        for row in distance[1:]:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for target in range(1, n + 1):
                candidate = to_via + through[target]
                if candidate < row[target]:
                    row[target] = candidate
    answers = []
    for a, b in queries:
        _check_nodes(n, a, b)
        answers.append(-1 if distance[a][b] == math.inf else distance[a][b])
    return answers


def flight_discount(n: int, flights: Iterable[tuple[int, int, int]]) -> int:
    """Return the cheapest route from 1 to n when one flight may be taken at half price."""
    adjacency = _adjacency(n, flights)
    best = {(node, used): math.inf for node in range(1, n + 1) for used in (False, True)}
    best[1, False] = 0
    queue: list[tuple[int, int, bool]] = [(0, 1, False)]
    while queue:
        cost, node, used = heapq.heappop(queue)
        if cost > best[node, used]:
            continue
        for neighbour, weight in adjacency[node]:
            moves = [(cost + weight, used)]
            if not used:
                moves.append((cost + weight // 2, True))
            for candidate, state in moves:
                if candidate < best[neighbour, state]:
                    best[neighbour, state] = candidate
                    heapq.heappush(queue, (candidate, neighbour, state))
    answer = min(best[n, False], best[n, True])
    if answer == math.inf:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return answer


def high_score(n: int, tunnels: Iterable[tuple[int, int, int]]) -> int:
    """Return the highest score from room 1 to room n; -1 if it can grow without bound."""
    adjacency = _adjacency(n, tunnels)
    score = [-math.inf] * (n + 1)
    score[1] = 0
    for _ in range(n - 1):
        for node in range(1, n + 1):
            if score[node] == -math.inf:
                continue
            for neighbour, gain in adjacency[node]:
                score[neighbour] = max(score[neighbour], score[node] + gain)
    for _ in range(n):
        for node in range(1, n + 1):
            if score[node] == -math.inf:
                continue
            for neighbour, gain in adjacency[node]:
                if score[neighbour] < score[node] + gain:
                    score[neighbour] = math.inf
    if score[n] == -math.inf:
        raise ValueError(f"room {n} cannot be reached from room 1")
    return -1 if score[n] == math.inf else score[n]


def road_construction(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """After each road, report the number of components and the largest one's size."""
    components = DisjointSet(range(1, n + 1))
    count = n
    largest = 1
    report = []
    for a, b in roads:
        _check_nodes(n, a, b)
        if components.union(a, b):
            count -= 1
            largest = max(largest, components.size(a))
        report.append((count, largest))
    return report


def road_reparation(n: int, roads: Iterable[tuple[int, int, int]]) -> int:
    """Return the cost of the cheapest road set joining all cities 1..n."""
    components = DisjointSet(range(1, n + 1))
    total = 0
    joined = 0
    for a, b, cost in sorted(roads, key=lambda road: (road[2], road[0], road[1])):
        _check_nodes(n, a, b)
        if components.union(a, b):
            total += cost
            joined += 1
    if joined != n - 1:
        raise ValueError("IMPOSSIBLE")
    return total