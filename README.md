# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small, fixed set of moves. It prints each move it makes, one per line, so
the output is a sequence of moves that sorts the input.

## Moves

| Move  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb`                                 |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb`                                 |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb`                               |

A move that cannot act (a swap or rotation on a stack with fewer than two
elements, a push from an empty stack) changes nothing and is not logged.
The combined moves `ss`, `rr` and `rrr` log each single move that took
effect and then their own name as well.

Each value is first replaced by its rank (the number of values smaller
than it). Two to five numbers are sorted with short fixed sequences; longer
lists are sorted with a binary radix sort over the ranks, using `b` as the
bucket for zero bits.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one quoted string:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The same entry point is reachable as `python -m pushswap.cli`.

Each move is written to standard output, one per line, and the exit status
is 0. The arguments are joined with spaces and split into tokens.

- With no arguments, or an empty first argument, a blank line is printed
  and the exit status is 0.
- With a single number, a message is written to standard error, nothing
  is sorted and the exit status is 0.
- If there are no tokens at all, or a token is not an optionally signed
  run of digits, is outside the 32-bit signed range, or repeats another
  number, a message is written to standard error and the exit status is 1.

The error messages are short Spanish phrases.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])
print(moves)  # ['sa', 'rra']
```

- `pushswap.parsing.parse_arguments(args)` validates command-line style
  arguments and returns the integers, raising `pushswap.parsing.InputError`
  (a `ValueError` carrying `message` and `exit_code`) on bad input. The
  helpers `is_valid_number`, `atol`, `join_arguments`, `tokenize`,
  `validate_token` and `check_duplicates` are available on their own.
- `pushswap.stacks.Stacks(a, b)` holds the two stacks as deques, top first,
  performs the moves as methods (`sa()`, `pb()`, `rra()`, …) and records
  every logged move in its `ops` list.
- `pushswap.sorting` provides `index_values`, `max_bits`, `sort_three`,
  `sort_five`, `sort_small_stack`, `radix_sort`, `sort_stack` and `solve`.
  The sorting functions work on a `Stacks` whose `a` holds ranks.

## What it does not do

There is no checker: the package produces moves but offers no command that
reads a list of moves and verifies that it sorts a given input. It also
does not try to minimise the number of moves beyond the strategies above.

## Tests

```
pip install ".[test]"
pytest
```