# drillbook

A library of classic algorithm drills, each solved as a plain Python function
or class, and a command-line runner that reads a drill's input text and prints
its answer. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `drillbook` command takes a drill number and an optional input file. With
no file, or with `-`, it reads standard input:

```
drillbook 11054 < input.txt
drillbook 2470 input.txt
```

The answer is printed to standard output. Input that a drill rejects (for
example a map without its starting cell) is reported on standard error as
`drillbook: <message>` with exit status 1.

Available drills:

| Number | Drill |
|--------|-------|
| 1027   | most rooftops visible from one building |
| 1034   | most fully lit lamp rows after column flips |
| 10775  | planes docked at airport gates |
| 11054  | longest bitonic subsequence |
| 12837  | balance ledger: entries and range queries |
| 13023  | chain of five friends |
| 14890  | passable roads with ramps |
| 14891  | four magnetic gears |
| 15683  | fewest camera blind spots |
| 15927  | longest non-palindromic substring |
| 15961  | sushi belt variety with a coupon |
| 16120  | PPAP string (`PPAP` or `NP`) |
| 16236  | baby shark hunt time |
| 16500  | string composed of dictionary words (`1` or `0`) |
| 17143  | shark fishing |
| 1915   | largest all-ones square |
| 1937   | longest strictly increasing path |
| 21736  | people reachable on a campus map (`TT` when none) |
| 2470   | two values with sum closest to zero |
| 32242  | integer solutions of `Axy + Bx + Cy + D = 0` (`INFINITY` when unbounded) |
| 4991   | shortest cleaning-robot route, several rooms until `0 0` |
| 6087   | fewest mirrors for a laser |

The same can be done from Python with `drillbook.cli.run(problem, text)`,
which returns the text the command would print.

## Library

- `drillbook.sequences`: `lis_lengths`, `lds_lengths`, `longest_bitonic`,
  `closest_to_zero_pair`, `max_visible_buildings`, `longest_non_palindrome`
  (returns -1 when every substring is a palindrome) and `is_ppap`.
- `drillbook.grids`: `min_blind_spots`, `longest_increasing_path`,
  `can_pass`, `count_passable_roads`, `largest_square_area`,
  `count_reachable_people` and `max_lit_rows`.
- `drillbook.gears`: the `Gear` dataclass with its `left`, `right` and `top`
  teeth and `rotate`, plus `parse_gear`, `simulate_gears` and `gear_score`.
- `drillbook.search`: `has_friend_chain`, the `BabySharkGame` class
  (`play()` returns the total time), `shortest_cleaning_route` (-1 when some
  dirty cell is unreachable) and `min_mirrors`.
- `drillbook.structures`: `RollingHashTree` (`query(start, stop)` hashes
  `text[start:stop]`) and `can_compose`; `BalanceTracker` (`update`,
  inclusive `query`) and `process_ledger`; `max_docked_planes`;
  `max_sushi_variety`; the `Shark` dataclass and `fish_sharks`.
- `drillbook.diophantine`: `is_prime`, `pollard_rho`, `factorize`,
  `divisors` and `solve_equation`, which returns a sorted list of `(x, y)`
  pairs, or `None` when there are infinitely many solutions.

Example:

```python
from drillbook.sequences import is_ppap, longest_bitonic

longest_bitonic([1, 5, 2, 1, 4, 3, 4, 5, 2, 1])  # 7
is_ppap("PPAP")  # True
```