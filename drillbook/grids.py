"""Problems on rectangular grids."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence

_DR = (-1, 0, 1, 0)
_DC = (0, 1, 0, -1)

_WALL = 6
_ORIENTATIONS: dict[int, tuple[tuple[int, ...], ...]] = {
    1: ((0,), (1,), (2,), (3,)),
    2: ((0, 2), (1, 3)),
    3: ((0, 1), (1, 2), (2, 3), (3, 0)),
    4: ((0, 1, 2), (1, 2, 3), (2, 3, 0), (3, 0, 1)),
    5: ((0, 1, 2, 3),),
}


def _ray(grid: Sequence[Sequence[int]], r: int, c: int, d: int) -> set[tuple[int, int]]:
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    r, c = r + _DR[d], c + _DC[d]
    while 0 <= r < rows and 0 <= c < cols and grid[r][c] != _WALL:
        if grid[r][c] == 0:
            seen.add((r, c))
        r, c = r + _DR[d], c + _DC[d]
    return seen


def min_blind_spots(grid: Sequence[Sequence[int]]) -> int:
    """Fewest empty cells left unwatched after turning every camera optimally."""
    empty_total = sum(row.count(0) for row in map(list, grid))
    cameras = [
        (r, c, kind)
        for r, row in enumerate(grid)
        for c, kind in enumerate(row)
        if 1 <= kind <= 5
    ]
    cameras.sort(key=lambda cam: len(_ORIENTATIONS[cam[2]]))
    options = [
        [
            frozenset().union(*(_ray(grid, r, c, d) for d in dirs))
            for dirs in _ORIENTATIONS[kind]
        ]
        for r, c, kind in cameras
    ]

    best = empty_total

    def search(idx: int, covered: frozenset) -> None:
        nonlocal best
        if idx == len(options):
            best = min(best, empty_total - len(covered))
            return
        for watched in options[idx]:
            search(idx + 1, covered | watched)

    search(0, frozenset())
    return best


def longest_increasing_path(grid: Sequence[Sequence[int]]) -> int:
    """Longest path through orthogonal neighbours with strictly increasing values."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    cells = sorted(
        ((r, c) for r in range(rows) for c in range(cols)),
        key=lambda rc: grid[rc[0]][rc[1]],
        reverse=True,
    )
    length: dict[tuple[int, int], int] = {}
    for r, c in cells:
        here = grid[r][c]
        length[(r, c)] = 1 + max(
            (
                length[(r + dr, c + dc)]
                for dr, dc in zip(_DR, _DC)
                if 0 <= r + dr < rows
                and 0 <= c + dc < cols
                and grid[r + dr][c + dc] > here
            ),
            default=0,
        )
    return max(length.values(), default=1)


def can_pass(line: Sequence[int], ramp_length: int) -> bool:
    """Whether a road of heights can be walked, placing ramps of the given length."""
    n = len(line)
    used = [False] * n
    for i, (h, nh) in enumerate(zip(line, line[1:])):
        if h == nh:
            continue
        if abs(h - nh) != 1:
            return False
        if nh == h + 1:
            span = range(i, i - ramp_length, -1)
            level = h
        else:
            span = range(i + 1, i + ramp_length + 1)
            level = nh
        for k in span:
            if k < 0 or k >= n or used[k] or line[k] != level:
                return False
            used[k] = True
    return True


def count_passable_roads(grid: Sequence[Sequence[int]], ramp_length: int) -> int:
    """Number of rows and columns of the map that can be walked."""
    lines = [list(row) for row in grid] + [list(col) for col in zip(*grid)]
    return sum(can_pass(line, ramp_length) for line in lines)


def largest_square_area(rows: Sequence[str]) -> int:
    """Area of the largest square made only of '1' cells."""
    best = 0
    prev: list[int] = []
    for row in rows:
        cur: list[int] = []
        for j, ch in enumerate(row):
            if ch == "0":
                cur.append(0)
            elif j == 0 or not prev:
                cur.append(1)
            else:
                cur.append(1 + min(prev[j], prev[j - 1], cur[j - 1]))
        best = max(best, max(cur, default=0))
        prev = cur
    return best * best


def count_reachable_people(rows: Sequence[str]) -> int:
    """Number of 'P' cells reachable from 'I' without crossing 'X' walls."""
    start = next(
        ((r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "I"),
        None,
    )
    if start is None:
        raise ValueError("campus map has no starting point 'I'")

    def open_cell(r: int, c: int) -> bool:
        return 0 <= r < len(rows) and 0 <= c < len(rows[r]) and rows[r][c] != "X"

    seen = {start}
    queue = deque([start])
    people = 0
    while queue:
        r, c = queue.popleft()
        for nr, nc in ((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)):
            if (nr, nc) in seen or not open_cell(nr, nc):
                continue
            seen.add((nr, nc))
            if rows[nr][nc] == "P":
                people += 1
            queue.append((nr, nc))
    return people


def max_lit_rows(rows: Sequence[str], flips: int) -> int:
    """Most rows fully lit after toggling columns exactly the given number of times."""
    counts = Counter(rows)
    best = 0
    for row in counts:
        dark = row.count("0")
        if dark <= flips and dark % 2 == flips % 2:
            best = max(best, counts[row])
    return best