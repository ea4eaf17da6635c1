"""Grid flood fills, breadth-first routes and depth-first searches on graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from .shortest_paths import DisjointSet

Cell = tuple[int, int]

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))
_STEP = {letter: (dr, dc) for letter, dr, dc in _MOVES}


def _rectangular(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows


def _neighbours(rows: list[str], cell: Cell) -> Iterator[tuple[str, Cell]]:
    height, width = len(rows), len(rows[0])
    r, c = cell
    for letter, dr, dc in _MOVES:
        nr, nc = r + dr, c + dc
        if 0 <= nr < height and 0 <= nc < width:
            yield letter, (nr, nc)


def _cells_marked(rows: list[str], mark: str) -> list[Cell]:
    return [(r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == mark]


def _walk_back(parents: dict[Cell, tuple[Cell, str] | None], cell: Cell) -> str:
    steps = []
    while parents[cell] is not None:
        cell, letter = parents[cell]
        steps.append(letter)
    return "".join(reversed(steps))


def _check_nodes(n: int, *nodes: int) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_nodes(n, a, b)
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def counting_rooms(grid: Sequence[str]) -> int:
    """Count the connected areas of floor cells ('.') in the map."""
    rows = _rectangular(grid)
    seen: set[Cell] = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, square in enumerate(row):
            if square != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                for _, (nr, nc) in _neighbours(rows, stack.pop()):
                    if rows[nr][nc] == "." and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def labyrinth(grid: Sequence[str]) -> str:
    """Return a shortest path from 'A' to 'B' as U/D/L/R moves; ValueError if none."""
    rows = _rectangular(grid)
    starts = _cells_marked(rows, "A")
    goals = _cells_marked(rows, "B")
    if not starts or not goals:
        raise ValueError("grid must contain both 'A' and 'B'")
    start, goal = starts[-1], goals[-1]
    parents: dict[Cell, tuple[Cell, str] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for letter, nxt in _neighbours(rows, cell):
            if nxt not in parents and rows[nxt[0]][nxt[1]] in (".", "B"):
                parents[nxt] = (cell, letter)
                queue.append(nxt)
    if goal not in parents:
        raise ValueError("NO")
    return _walk_back(parents, goal)


def _spread(rows: list[str], sources: list[Cell]) -> dict[Cell, tuple[int, str | None]]:
    reached: dict[Cell, tuple[int, str | None]] = {cell: (0, None) for cell in sources}
    queue = deque(sources)
    while queue:
        cell = queue.popleft()
        distance = reached[cell][0]
        for letter, nxt in _neighbours(rows, cell):
            if rows[nxt[0]][nxt[1]] != "#" and nxt not in reached:
                reached[nxt] = (distance + 1, letter)
                queue.append(nxt)
    return reached


def monsters(grid: Sequence[str]) -> str:
    """Return moves taking 'A' to the border always ahead of every 'M'; ValueError if none."""
    rows = _rectangular(grid)
    heroes = _cells_marked(rows, "A")
    if not heroes:
        raise ValueError("grid has no 'A'")
    monster_reach = _spread(rows, _cells_marked(rows, "M"))
    hero_reach = _spread(rows, heroes)
    height, width = len(rows), len(rows[0])

    def safe(cell: Cell) -> bool:
        if cell not in hero_reach:
            return False
        threat = monster_reach.get(cell)
        return threat is None or hero_reach[cell][0] < threat[0]

    def exits() -> Iterator[Cell]:
        for r in range(height):
            for cell in ((r, 0), (r, width - 1)):
                if safe(cell):
                    yield cell
                    break
        for c in range(width):
            for cell in ((0, c), (height - 1, c)):
                if safe(cell):
                    yield cell
                    break

    chosen = deque(exits(), maxlen=1)
    if not chosen:
        raise ValueError("NO")
    r, c = chosen[0]
    steps = []
    while (letter := hero_reach[r, c][1]) is not None:
        steps.append(letter)
        dr, dc = _STEP[letter]
        r, c = r - dr, c - dc
    return "".join(reversed(steps))


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads, as city pairs, that connect all cities 1..n."""
    groups = DisjointSet(range(1, n + 1))
    for a, b in roads:
        _check_nodes(n, a, b)
        groups.union(a, b)
    leaders = []
    seen = set()
    for node in range(1, n + 1):
        root = groups.find(node)
        if root not in seen:
            seen.add(root)
            leaders.append(node)
    return list(zip(leaders, leaders[1:]))


def message_route(n: int, links: Iterable[tuple[int, int]]) -> list[int]:
    """Return a route with fewest computers from 1 to n; ValueError if none exists."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    adjacency = _undirected(n, links)
    parents: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if nxt not in parents:
                parents[nxt] = node
                queue.append(nxt)
    if n not in parents:
        raise ValueError("IMPOSSIBLE")
    route = []
    node: int | None = n
    while node is not None:
        route.append(node)
        node = parents[node]
    return route[::-1]


def building_teams(n: int, friendships: Iterable[tuple[int, int]]) -> list[int]:
    """Assign each pupil team 1 or 2 so no friends share a team; ValueError if impossible."""
    adjacency = _undirected(n, friendships)
    team: dict[int, int] = {}
    for root in range(1, n + 1):
        if root in team:
            continue
        team[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for nxt in adjacency[node]:
                if nxt not in team:
                    team[nxt] = 3 - team[node]
                    queue.append(nxt)
                elif team[nxt] == team[node]:
                    raise ValueError("IMPOSSIBLE")
    return [team[node] for node in range(1, n + 1)]


def round_trip(n: int, roads: Iterable[tuple[int, int]]) -> list[int]:
    """Return a cycle of cities that starts and ends at the same city; ValueError if none."""
    adjacency = _undirected(n, roads)
    visited: set[int] = set()
    parent: dict[int, int | None] = {}
    for root in range(1, n + 1):
        if root in visited:
            continue
        visited.add(root)
        parent[root] = None
        path = [root]
        position = {root: 0}
        pending = [iter(adjacency[root])]
        while pending:
            node = path[-1]
            for nxt in pending[-1]:
                if nxt in visited:
                    if nxt != parent[node] and nxt in position:
                        start = position[nxt]
                        return [nxt, *path[:start:-1], nxt]
                    continue
                visited.add(nxt)
                parent[nxt] = node
                position[nxt] = len(path)
                path.append(nxt)
                pending.append(iter(adjacency[nxt]))
                break
            else:
                pending.pop()
                del position[path.pop()]
    raise ValueError("IMPOSSIBLE")


def course_schedule(n: int, requirements: Iterable[tuple[int, int]]) -> list[int]:
    """Order courses 1..n so each (a, b) has a before b; ValueError if impossible."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in requirements:
        _check_nodes(n, a, b)
        adjacency[a].append(b)
    visited: set[int] = set()
    finished: list[int] = []
    for root in range(1, n + 1):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, children = stack[-1]
            for nxt in children:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    order = finished[::-1]
    placed: set[int] = set()
    for node in order:
        placed.add(node)
        if any(nxt in placed for nxt in adjacency[node]):
            raise ValueError("IMPOSSIBLE")
    return order