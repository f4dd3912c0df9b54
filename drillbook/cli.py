"""Command-line runner reading a problem's input and printing its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from drillbook.diophantine import solve_equation
from drillbook.gears import gear_score, parse_gear, simulate_gears
from drillbook.grids import (
    count_passable_roads,
    count_reachable_people,
    largest_square_area,
    longest_increasing_path,
    max_lit_rows,
    min_blind_spots,
)
from drillbook.search import (
    BabySharkGame,
    has_friend_chain,
    min_mirrors,
    shortest_cleaning_route,
)
from drillbook.sequences import (
    closest_to_zero_pair,
    is_ppap,
    longest_bitonic,
    longest_non_palindrome,
    max_visible_buildings,
)
from drillbook.structures import (
    Shark,
    can_compose,
    fish_sharks,
    max_docked_planes,
    max_sushi_variety,
    process_ledger,
)


class _Tokens:
    """Whitespace-separated words of an input text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def number(self) -> int:
        return int(self.word())

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def grid(self, rows: int, cols: int) -> list[list[int]]:
        return [self.numbers(cols) for _ in range(rows)]


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {}

_PPAP_VERDICTS = {True: "PPAP", False: "NP"}


def _solver(problem: str) -> Callable[[Callable[[_Tokens], str]], Callable[[_Tokens], str]]:
    def register(func: Callable[[_Tokens], str]) -> Callable[[_Tokens], str]:
        _SOLVERS[problem] = func
        return func

    return register


@_solver("11054")
def _bitonic(tokens: _Tokens) -> str:
    return str(longest_bitonic(tokens.numbers(tokens.number())))


@_solver("15683")
def _cameras(tokens: _Tokens) -> str:
    rows, cols = tokens.numbers(2)
    return str(min_blind_spots(tokens.grid(rows, cols)))


@_solver("16120")
def _ppap(tokens: _Tokens) -> str:
    text = tokens.word()
    verdict = is_ppap(text)
    return _PPAP_VERDICTS[bool(verdict)]


@_solver("1937")
def _panda(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(longest_increasing_path(tokens.grid(n, n)))


@_solver("13023")
def _friends(tokens: _Tokens) -> str:
    n, m = tokens.numbers(2)
    edges = [tuple(tokens.numbers(2)) for _ in range(m)]
    return "1" if has_friend_chain(n, edges) else "0"


@_solver("14891")
def _gears(tokens: _Tokens) -> str:
    gears = [parse_gear(tokens.word()) for _ in range(4)]
    commands = [tuple(tokens.numbers(2)) for _ in range(tokens.number())]
    return str(gear_score(simulate_gears(gears, commands)))


@_solver("16236")
def _shark(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(BabySharkGame(tokens.grid(n, n)).play())


@_solver("16500")
def _compose(tokens: _Tokens) -> str:
    text = tokens.word()
    words = tokens.words(tokens.number())
    return "1" if can_compose(text, words) else "0"


@_solver("4991")
def _cleaning(tokens: _Tokens) -> str:
    answers: list[str] = []
    while True:
        cols, rows = tokens.numbers(2)
        if cols == 0 and rows == 0:
            break
        answers.append(str(shortest_cleaning_route(tokens.words(rows))))
    return "\n".join(answers)


@_solver("14890")
def _slopes(tokens: _Tokens) -> str:
    n, ramp = tokens.numbers(2)
    return str(count_passable_roads(tokens.grid(n, n), ramp))


@_solver("1027")
def _skyline(tokens: _Tokens) -> str:
    return str(max_visible_buildings(tokens.numbers(tokens.number())))


@_solver("1034")
def _lamps(tokens: _Tokens) -> str:
    rows, _cols = tokens.numbers(2)
    lamp_rows = tokens.words(rows)
    return str(max_lit_rows(lamp_rows, tokens.number()))


@_solver("21736")
def _campus(tokens: _Tokens) -> str:
    rows, _cols = tokens.numbers(2)
    people = count_reachable_people(tokens.words(rows))
    return str(people) if people > 0 else "TT"


@_solver("10775")
def _airport(tokens: _Tokens) -> str:
    gates, planes = tokens.numbers(2)
    return str(max_docked_planes(gates, tokens.numbers(planes)))


@_solver("6087")
def _laser(tokens: _Tokens) -> str:
    _cols, rows = tokens.numbers(2)
    return str(min_mirrors(tokens.words(rows)))


@_solver("12837")
def _ledger(tokens: _Tokens) -> str:
    _days, count = tokens.numbers(2)
    operations = [tokens.numbers(3) for _ in range(count)]
    return "\n".join(map(str, process_ledger(operations)))


@_solver("15961")
def _sushi(tokens: _Tokens) -> str:
    n, _kinds, window, coupon = tokens.numbers(4)
    return str(max_sushi_variety(tokens.numbers(n), window, coupon))


@_solver("15927")
def _palindrome(tokens: _Tokens) -> str:
    return str(longest_non_palindrome(tokens.word()))


@_solver("17143")
def _fishing(tokens: _Tokens) -> str:
    rows, cols, count = tokens.numbers(3)
    sharks = []
    for _ in range(count):
        r, c, speed, direction, size = tokens.numbers(5)
        sharks.append(Shark(row=r, col=c, speed=speed, direction=direction, size=size))
    return str(fish_sharks(rows, cols, sharks))


@_solver("1915")
def _square(tokens: _Tokens) -> str:
    rows, _cols = tokens.numbers(2)
    return str(largest_square_area(tokens.words(rows)))


@_solver("2470")
def _solutions(tokens: _Tokens) -> str:
    first, second = closest_to_zero_pair(tokens.numbers(tokens.number()))
    return f"{first} {second}"


@_solver("32242")
def _equation(tokens: _Tokens) -> str:
    result = solve_equation(*tokens.numbers(4))
    if result is None:
        return "INFINITY"
    return "\n".join([str(len(result)), *(f"{x} {y}" for x, y in result)])


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="drillbook", description="Solve a practice problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="input file (default: standard input)",
    )
    args = parser.parse_args(argv)
    with args.input as handle:
        text = handle.read()
    try:
        output = run(args.problem, text)
    except ValueError as exc:
        print(f"drillbook: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())