"""Graph and grid search problems."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

_STEPS = ((0, 1), (0, -1), (-1, 0), (1, 0))


def has_friend_chain(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether five distinct people are linked one after another by friendships."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    visited = [False] * n

    def extend(node: int, depth: int) -> bool:
        if depth == 4:
            return True
        for nxt in adjacency[node]:
            if visited[nxt]:
                continue
            visited[nxt] = True
            if extend(nxt, depth + 1):
                return True
            visited[nxt] = False
        return False

    for start in range(n):
        visited[start] = True
        if extend(start, 0):
            return True
        visited[start] = False
    return False


class BabySharkGame:
    """A shark that keeps eating the nearest smaller fish until none is reachable."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        self.grid = [list(row) for row in grid]
        self.n = len(self.grid)
        self.size = 2
        self.eaten = 0
        self.time = 0
        start = next(
            (
                (r, c)
                for r, row in enumerate(self.grid)
                for c, value in enumerate(row)
                if value == 9
            ),
            None,
        )
        self.position = (0, 0)
        if start is not None:
            self.position = start
            self.grid[start[0]][start[1]] = 0

    def _nearest_fish(self) -> tuple[int, int, int] | None:
        sr, sc = self.position
        seen = {self.position}
        queue = deque([(sr, sc, 0)])
        best: tuple[int, int, int] | None = None
        min_dist: int | None = None
        while queue:
            r, c, d = queue.popleft()
            if min_dist is not None and d > min_dist:
                break
            for dr, dc in _STEPS:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < self.n and 0 <= nc < self.n):
                    continue
                if (nr, nc) in seen or self.grid[nr][nc] > self.size:
                    continue
                seen.add((nr, nc))
                value = self.grid[nr][nc]
                if value != 0 and value < self.size:
                    if min_dist is None:
                        min_dist = d + 1
                    candidate = (d + 1, nr, nc)
                    if best is None or candidate < best:
                        best = candidate
                queue.append((nr, nc, d + 1))
        return best

    def play(self) -> int:
        """Run until no fish can be eaten; return the total time spent moving."""
        while (found := self._nearest_fish()) is not None:
            dist, r, c = found
            self.grid[r][c] = 0
            self.position = (r, c)
            self.time += dist
            self.eaten += 1
            if self.eaten == self.size:
                self.size += 1
                self.eaten = 0
        return self.time


def _distances_from(rows: Sequence[str], source: tuple[int, int]) -> dict[tuple[int, int], int]:
    dist = {source: 0}
    queue = deque([source])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(rows) and 0 <= nc < len(rows[nr])):
                continue
            if rows[nr][nc] == "x" or (nr, nc) in dist:
                continue
            dist[(nr, nc)] = dist[(r, c)] + 1
            queue.append((nr, nc))
    return dist


def shortest_cleaning_route(rows: Sequence[str]) -> int:
    """Fewest moves for the robot 'o' to visit every dirty cell '*', or -1."""
    start: tuple[int, int] | None = None
    dirty: list[tuple[int, int]] = []
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == "o":
                start = (r, c)
            elif ch == "*":
                dirty.append((r, c))
    if start is None:
        raise ValueError("room has no robot 'o'")
    nodes = [start, *dirty]
    size = len(nodes)
    if size == 1:
        return 0

    dist = [[0] * size for _ in range(size)]
    for i, src in enumerate(nodes):
        reach = _distances_from(rows, src)
        for j, dst in enumerate(nodes):
            if dst not in reach:
                return -1
            dist[i][j] = reach[dst]

    full = (1 << size) - 1
    dp = [[math.inf] * size for _ in range(full + 1)]
    dp[1][0] = 0
    for mask in range(full + 1):
        for i in range(size):
            cur = dp[mask][i]
            if not mask >> i & 1 or cur == math.inf:
                continue
            for j in range(size):
                if mask >> j & 1:
                    continue
                nxt = mask | 1 << j
                dp[nxt][j] = min(dp[nxt][j], cur + dist[i][j])
    best = min(dp[full])
    return -1 if best == math.inf else int(best)


def min_mirrors(rows: Sequence[str]) -> int:
    """Fewest mirrors needed to link the two 'C' cells around '*' walls."""
    ends = [(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "C"]
    if len(ends) < 2:
        raise ValueError("map needs two 'C' cells")
    (sr, sc), (er, ec) = ends[0], ends[-1]
    dist: dict[tuple[int, int, int], int] = {}
    queue: deque[tuple[int, int, int]] = deque()
    for d in range(4):
        dist[(sr, sc, d)] = 0
        queue.append((sr, sc, d))
    while queue:
        r, c, d = queue.popleft()
        cost = dist[(r, c, d)]
        for nd, (dr, dc) in enumerate(_STEPS):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(rows) and 0 <= nc < len(rows[nr])):
                continue
            if rows[nr][nc] == "*":
                continue
            weight = 0 if nd == d else 1
            key = (nr, nc, nd)
            if cost + weight < dist.get(key, math.inf):
                dist[key] = cost + weight
                if weight == 0:
                    queue.appendleft(key)
                else:
                    queue.append(key)
    best = min(dist.get((er, ec, d), math.inf) for d in range(4))
    if best == math.inf:
        raise ValueError("the two 'C' cells cannot be linked")
    return int(best)