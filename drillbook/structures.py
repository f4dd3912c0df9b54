"""Hashing, range sums, union-find and simulations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

MOD = 1_000_000_007
BASE = 131


def _word_hash(word: str) -> int:
    value = 0
    for ch in word:
        value = (value * BASE + ord(ch)) % MOD
    return value


class RollingHashTree:
    """Segment tree of polynomial hashes over a string."""

    def __init__(self, text: str) -> None:
        self.text = text
        n = len(text)
        self._size = n
        self._powers = [1] * (n + 1)
        for i in range(1, n + 1):
            self._powers[i] = self._powers[i - 1] * BASE % MOD
        self._tree = [0] * (4 * n)
        if n:
            self._build(1, 0, n - 1)

    def _build(self, node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = ord(self.text[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid)
        self._build(2 * node + 1, mid + 1, hi)
        self._tree[node] = (
            self._tree[2 * node] * self._powers[hi - mid] + self._tree[2 * node + 1]
        ) % MOD

    def _query(self, node: int, lo: int, hi: int, ql: int, qr: int) -> tuple[int, int]:
        if qr < lo or hi < ql:
            return 0, 0
        if ql <= lo and hi <= qr:
            return self._tree[node], hi - lo + 1
        mid = (lo + hi) // 2
        left_hash, _ = self._query(2 * node, lo, mid, ql, qr)
        right_hash, right_len = self._query(2 * node + 1, mid + 1, hi, ql, qr)
        left_len = min(mid, qr) - max(lo, ql) + 1 if ql <= mid else 0
        return (left_hash * self._powers[right_len] + right_hash) % MOD, left_len + right_len

    def query(self, start: int, stop: int) -> int:
        """Hash of text[start:stop]."""
        if not 0 <= start <= stop <= self._size:
            raise IndexError(f"range {start}:{stop} outside 0:{self._size}")
        if start == stop:
            return 0
        return self._query(1, 0, self._size - 1, start, stop - 1)[0]


def can_compose(text: str, words: Iterable[str]) -> bool:
    """Whether text is a concatenation of words, each usable any number of times."""
    tree = RollingHashTree(text)
    n = len(text)
    dictionary = [(_word_hash(word), len(word)) for word in words]
    reachable = [False] * (n + 1)
    reachable[0] = True
    for i in range(n):
        if not reachable[i]:
            continue
        for word_hash, length in dictionary:
            if i + length <= n and tree.query(i, i + length) == word_hash:
                reachable[i + length] = True
    return reachable[n]


class BalanceTracker:
    """Point additions and inclusive range sums over positions 0..size-1."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def update(self, index: int, amount: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} outside 0..{self.size - 1}")
        i = index + 1
        while i <= self.size:
            self._tree[i] += amount
            i += i & -i

    def _prefix(self, count: int) -> int:
        total = 0
        while count > 0:
            total += self._tree[count]
            count -= count & -count
        return total

    def query(self, left: int, right: int) -> int:
        """Sum of positions left..right, both included."""
        if not 0 <= left <= right < self.size:
            raise IndexError(f"range {left}..{right} outside 0..{self.size - 1}")
        return self._prefix(right + 1) - self._prefix(left)


def process_ledger(operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, day, amount) entries and (2, day, day) queries; return query answers."""
    ops = [tuple(op) for op in operations]
    days = sorted(
        {day for kind, first, second in ops for day in ((first,) if kind == 1 else (first, second))}
    )
    index = {day: i for i, day in enumerate(days)}
    tracker = BalanceTracker(len(days))
    answers: list[int] = []
    for kind, first, second in ops:
        if kind == 1:
            tracker.update(index[first], second)
        else:
            left, right = sorted((index[first], index[second]))
            answers.append(tracker.query(left, right))
    return answers


def max_docked_planes(gates: int, requests: Iterable[int]) -> int:
    """Planes docked in order, each at the highest free gate not above its limit."""
    parent = list(range(gates + 1))

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    docked = 0
    for want in requests:
        if not 1 <= want <= gates:
            raise ValueError(f"gate {want} outside 1..{gates}")
        free = find(want)
        if free == 0:
            break
        parent[free] = free - 1
        docked += 1
    return docked


def max_sushi_variety(belt: Sequence[int], window: int, coupon: int) -> int:
    """Most kinds of sushi from consecutive plates on a circular belt plus a coupon."""
    n = len(belt)
    if n == 0:
        raise ValueError("belt is empty")
    if not 1 <= window <= n:
        raise ValueError(f"window must be within 1..{n}")
    counts: Counter[int] = Counter()
    best = 0
    best_has_coupon = False
    for plate in belt[:window]:
        if counts[plate] == 0:
            best += 1
        counts[plate] += 1
        best_has_coupon = counts[coupon] > 0

    unique = best
    for i in range(1, n):
        leaving = belt[i - 1]
        counts[leaving] -= 1
        if counts[leaving] == 0:
            unique -= 1
        entering = belt[(i + window - 1) % n]
        if counts[entering] == 0:
            unique += 1
        counts[entering] += 1
        has_coupon = counts[coupon] > 0
        if unique > best:
            best = unique
            best_has_coupon = has_coupon
        if unique == best and not has_coupon:
            best_has_coupon = False
        if best == window and not best_has_coupon:
            return window + 1
    return best + (0 if best_has_coupon else 1)


_REVERSE = {1: 2, 2: 1, 3: 4, 4: 3}


@dataclass(frozen=True)
class Shark:
    """A shark at a 1-based cell; direction 1 up, 2 down, 3 right, 4 left."""

    row: int
    col: int
    speed: int
    direction: int
    size: int

    def __post_init__(self) -> None:
        if self.direction not in _REVERSE:
            raise ValueError(f"direction {self.direction} must be 1..4")
        if self.size <= 0:
            raise ValueError("size must be positive")


def _reposition(coord: int, speed: int, direction: int, length: int) -> tuple[int, int]:
    if length == 1:
        return coord, direction
    period = 2 * (length - 1)
    move = speed % period
    raw = ((coord - 1) - move if direction in (1, 4) else (coord - 1) + move) % period
    lap, rem = divmod(raw, length - 1)
    if lap % 2 == 0:
        return rem + 1, direction
    return length - rem, _REVERSE[direction]


def _move_all(board: dict[tuple[int, int], Shark], rows: int, cols: int) -> dict[tuple[int, int], Shark]:
    moved: dict[tuple[int, int], Shark] = {}
    for (r, c), shark in sorted(board.items()):
        if shark.direction in (1, 2):
            nr, nd = _reposition(r, shark.speed, shark.direction, rows)
            nc = c
        else:
            nc, nd = _reposition(c, shark.speed, shark.direction, cols)
            nr = r
        current = moved.get((nr, nc))
        if current is None or current.size < shark.size:
            moved[(nr, nc)] = replace(shark, row=nr, col=nc, direction=nd)
    return moved


def fish_sharks(rows: int, cols: int, sharks: Iterable[Shark]) -> int:
    """Total size of sharks caught by a fisher walking the columns left to right."""
    board: dict[tuple[int, int], Shark] = {}
    for shark in sharks:
        if not (1 <= shark.row <= rows and 1 <= shark.col <= cols):
            raise ValueError(f"shark at ({shark.row}, {shark.col}) is off the board")
        board[(shark.row, shark.col)] = shark
    caught = 0
    for col in range(1, cols + 1):
        in_column = [key for key in board if key[1] == col]
        if in_column:
            caught += board.pop(min(in_column)).size
        board = _move_all(board, rows, cols)
    return caught