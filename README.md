# pushswap

A solver for the push_swap puzzle. You start with a stack **a** of integers and
an empty stack **b**. Only these moves are allowed:

| Move         | Effect                                          |
|--------------|-------------------------------------------------|
| `sa`, `sb`   | swap the two top elements of a stack            |
| `pa`, `pb`   | push the top of the other stack onto this one   |
| `ra`, `rb`   | rotate a stack up (top goes to the bottom)      |
| `rra`, `rrb` | rotate a stack down (bottom goes to the top)    |

The solver prints the moves it makes, one per line, and leaves stack **a**
sorted in ascending order with the smallest value on top.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 1 2
push_swap 5 -2 9 0 7 1
```

Each argument is one integer (surrounding whitespace is ignored). The command
behaves as follows:

- With no arguments nothing is printed and the exit status is 0.
- With exactly three numbers a short fixed routine orders them.
- With four or more, numbers are ranked, the lower half (by rank, around the
  mean rank) and then all but three are pushed to **b**, the three left on
  **a** are ordered, and the numbers in **b** are brought back one at a time,
  always picking the one that needs the fewest rotations. Finally **a** is
  rotated until the smallest number is on top.
- If an argument is not an integer, or only one or two numbers are given,
  `Error` is written to standard error and the exit status is 1.

## Library use

```python
from pushswap.sort import solve

moves = solve([5, -2, 9, 0, 7, 1])
print(moves)
```

`solve(numbers)` returns the list of moves instead of printing them; an empty
input gives an empty list.

Lower-level pieces:

- `pushswap.stacks.Machine(numbers=(), echo=None)` holds stacks `a` and `b`
  (lists of `Node`, top first) and applies single moves with `swap`, `push`,
  `rotate` and `reverse_rotate`. Each move is appended to `operations` and, if
  `echo` is given, passed to it. Rotating an empty stack raises `IndexError`.
- `pushswap.calculations` holds `set_index`, `set_cost`, `set_nearest`,
  `get_cheapest` and `find_median`, which rank nodes and measure move costs.
- `pushswap.sort` holds the phases `small_sort`, `move_to_b`, `move_to_a` and
  `last_rotate`, plus `is_sorted`.
- `pushswap.formatting` renders the move names through a small printf-style
  `format_template` supporting `%c %s %p %d %i %u %x %X %%`.

## What it does not do

- It does not reject duplicate numbers or check that values fit in 32 bits.
- It never emits the combined moves `ss`, `rr` or `rrr`.
- There is no checker command that reads moves and verifies a result.

## Running the tests

```
pip install .[test]
pytest
```