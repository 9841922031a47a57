# dpdrills

A collection of small, exact solvers for classic greedy and
dynamic-programming problems. Every solver is available both as a Python
function and as a command that reads a whitespace-separated problem from
standard input and prints the answer to standard output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Each command reads its whole input from stdin. Numbers and words may be
separated by any whitespace. Integers may carry a `0x`, `0o` or `0b` prefix,
and a leading `0` marks an octal number.

| Command | Problem | Input | Output |
|---|---|---|---|
| `dpdrills-matching` | Give each x a distinct y strictly greater than it, as many as possible | `n m`, then n values x, then m values y | the number of assigned x; then, for each x, the 1-based index of its y or 0 |
| `dpdrills-cards` | Cheapest set of cards costing 1, 2, 4, ..., 2^30 covering at least M seconds | `M`, then 31 card durations | minimal total price |
| `dpdrills-gold` | Heaviest load of gold bars not exceeding a capacity | `n M`, then n weights | the largest achievable mass |
| `dpdrills-walls` | Can the bricks form two walls with one colour per layer | `n k`, then n pairs `length colour` | `YES` and the bricks of the first wall, or `NO` |
| `dpdrills-rover` | Elastic compartment: best total value where every item withstands the pressure | `n S`, then n triples `volume cost pressure` | `count cost`, then the sorted item numbers |
| `dpdrills-orders` | Order jobs of `S`/`D` days so the first worker gets the most simple days | `n`, then n strings of `S` and `D` | the maximal number of simple days |
| `dpdrills-asceticism` | Renounce the most events in the fewest days | `n D`, then n pairs `name weight` | `count days`, then the event names sorted |

Example:

```
$ printf '1 5968\n18\n' | dpdrills-gold
18
```

## Library use

```python
from dpdrills.gold import max_gold
from dpdrills.matching import assign_greater
from dpdrills.orders import max_simple_days

max_gold(5968, [18])                          # 18
assign_greater([3, 2], [4, 3])                # (2, [1, 2])
max_simple_days(["DSD", "SS", "DD", "SDD"])   # 3
```

Other entry points:

- `dpdrills.cards.cheapest_cards(seconds, times)` with `dpdrills.cards.Card`
- `dpdrills.walls.two_walls(colours, bricks)` with `dpdrills.walls.Brick`;
  returns `None` when two walls cannot be built
- `dpdrills.rover.best_load(base_volume, items)` with `dpdrills.rover.Item`
- `dpdrills.orders.bruteforce(orders)` and `bruteforce_alt(orders)`, exhaustive
  checks of `max_simple_days`, and the generators `heap_permutations(items)` and
  `backtracking_permutations(items)`
- `dpdrills.asceticism.renunciation_plan(max_weight_diff, events)` with
  `dpdrills.asceticism.Event`

Reading and writing helpers live in `dpdrills.textio`: `TokenReader` pulls
words and integers from a text stream, and `format_ints(values, sep)` joins
integers for output.

Every command module also exposes `run(stdin, stdout)` so it can be driven
with in-memory streams such as `io.StringIO`; `dpdrills.orders.run` also takes
the solver to use as a third argument.

Solvers log their intermediate steps at debug level through the standard
`logging` module.

## What it does not do

There is no solver for splitting an array into segments, nor for the plain
0/1 knapsack with item costs (neither the best total cost nor the chosen
items). The only knapsack-style solvers are the weight-only `max_gold` and the
pressure-limited `best_load`.