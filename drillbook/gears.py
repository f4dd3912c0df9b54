"""Chain of four gears whose teeth carry magnetic poles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

TEETH = 8


@dataclass
class Gear:
    """A gear with eight teeth listed clockwise from twelve o'clock; True is south."""

    teeth: list[bool] = field(default_factory=lambda: [False] * TEETH)

    @property
    def left(self) -> bool:
        return self.teeth[6]

    @property
    def right(self) -> bool:
        return self.teeth[2]

    @property
    def top(self) -> bool:
        return self.teeth[0]

    def rotate(self, direction: int) -> None:
        """Turn one tooth: -1 counterclockwise, anything else clockwise."""
        if direction == -1:
            self.teeth = self.teeth[1:] + self.teeth[:1]
        else:
            self.teeth = self.teeth[-1:] + self.teeth[:-1]


def parse_gear(text: str) -> Gear:
    """Build a gear from a string of '0' and '1' characters."""
    chars = "".join(text.split())[:TEETH]
    teeth = [ch == "1" for ch in chars]
    teeth += [False] * (TEETH - len(teeth))
    return Gear(teeth)


def simulate_gears(
    gears: Sequence[Gear], commands: Iterable[tuple[int, int]]
) -> Sequence[Gear]:
    """Apply (1-based gear number, direction) commands, spreading turns to neighbours."""
    count = len(gears)
    for number, direction in commands:
        idx = number - 1
        if not 0 <= idx < count:
            raise ValueError(f"gear number {number} out of range 1..{count}")
        turns = [0] * count
        turns[idx] = direction
        for i in range(idx, 0, -1):
            if gears[i].left == gears[i - 1].right:
                break
            turns[i - 1] = -turns[i]
        for i in range(idx, count - 1):
            if gears[i].right == gears[i + 1].left:
                break
            turns[i + 1] = -turns[i]
        for gear, turn in zip(gears, turns):
            if turn:
                gear.rotate(turn)
    return gears


def gear_score(gears: Iterable[Gear]) -> int:
    """Sum of 2**i over gears whose top tooth is south."""
    return sum(1 << i for i, gear in enumerate(gears) if gear.top)