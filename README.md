# pushswap

Sort a list of distinct integers using two stacks, **a** and **b**, and a
small fixed set of instructions. The `push_swap` command prints a short
sequence of instructions that sorts its arguments in ascending order on
stack **a**.

## Installation

```
pip install .
```

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` | swap the top two elements of a / b |
| `ss`        | `sa` and `sb` together |
| `pa` / `pb` | move the top of b onto a / the top of a onto b |
| `ra` / `rb` | rotate a / b upwards (the top goes to the bottom) |
| `rr`        | `ra` and `rb` together |
| `rra` / `rrb` | rotate a / b downwards (the bottom goes to the top) |
| `rrr`       | `rra` and `rrb` together |

## Usage

Numbers may be given as separate arguments or together in one
whitespace-separated argument (spaces, tabs, vertical tabs and form feeds
separate numbers):

```
push_swap 3 2 1
push_swap "-43 2 -51 233 444"
```

Each instruction is printed on its own line. If the input is already
sorted, nothing is printed. With no arguments nothing happens.

`push_swap` prints `Error` for invalid input: an empty argument, an
argument of only whitespace, a non-numeric token, a value outside the
32-bit signed integer range, or a duplicate number. A number may carry
any run of leading `+` and `-` signs; an odd number of minuses makes it
negative. The exit status is always 0.

## Library use

The stacks and the sorting algorithm are available from Python:

```python
from pushswap.parsing import parse_arguments
from pushswap.algorithm import push_swap

stacks = parse_arguments(["3", "2", "1"])
moves = push_swap(stacks)   # e.g. ["ra", "sa"]
assert stacks.is_sorted()
```

- `pushswap.stacks.Stacks` holds stacks `a` and `b` (deques, top first)
  and the recorded `moves`. Its methods `pa`, `pb`, `swap`, `ss`,
  `rotate`, `rr`, `reverse_rotate` and `rrr` perform the instructions,
  appending the instruction name to `moves` when called with
  `record=True`. `apply("ra")` performs an instruction by name without
  recording it and raises `ValueError` for an unknown name.
  `is_sorted()` tells whether stack a is in ascending order.
- `pushswap.parsing` turns arguments into a `Stacks` (`parse_arguments`,
  `split_arguments`, `parse_int`), raising `InputError` on bad input.
- `pushswap.algorithm` holds the strategy: `push_swap`, `sort_three`,
  `transfer_cheapest`, `finalize_pos` and the pricing helpers.
- `pushswap.libft` holds small helpers: character tests (`chars`),
  string functions (`strings`), a `%c %s %d %i %u %x %X %p` formatter
  (`printf`), stream writers (`output`) and a singly linked list
  (`lists`).

## What this package does not do

There is no command that reads instructions from standard input and
reports whether they sort the numbers. To verify a sequence, apply it
from Python:

```python
stacks = parse_arguments(["5", "1", "4", "2", "3"])
for line in ["pb", "pb", "sa"]:
    stacks.apply(line)
ok = not stacks.b and stacks.is_sorted()
```

## Tests

```
pip install ".[test]"
pytest
```