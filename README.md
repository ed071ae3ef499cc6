# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of allowed operations. The operations used are printed one per
line. Replaying them on the input leaves `a` sorted in ascending order
and `b` empty.

## Installing

    pip install .

For the tests:

    pip install .[test]
    pytest

## Using the command

Pass the numbers either as separate arguments or as one argument with the
numbers separated by spaces:

    push_swap 3 2 1
    push_swap "4 67 3 87 23"

The same command can be started with `python -m pushswap.cli`.

Stack `a` is filled in the order given, with the first number at the top.
Nothing is printed and the exit status is 0 when:

- no arguments are given;
- a single argument holds only one number (it is not checked);
- the numbers are already in ascending order.

Each number is read like C's `atoi`: leading whitespace and one `+` or
`-` are skipped, then digits are read up to the first other character, so
`12abc` reads as 12. The command prints `Error` on standard error and
exits with status 1 when:

- an argument reads as 0 but does not start with `0`. This covers text
  without digits and values outside the 32-bit signed range. It also
  covers `-0` and `+0`;
- a number appears more than once.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two numbers of `a`                     |
| `sb`  | swap the top two numbers of `b`                     |
| `ss`  | `sa` and `sb` at once                               |
| `pa`  | move the top of `b` to the top of `a`               |
| `pb`  | move the top of `a` to the top of `b`               |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` at once                               |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` at once                             |

## Strategy

The strategy depends on how many numbers there are:

- **Two numbers:** a single `ra`.
- **Three numbers:** at most two operations.
- **Four or five numbers:** the two smallest are pushed to `b`, the rest
  are sorted, and the two are pushed back. If the first five numbers
  strictly decrease, a fixed sequence of nine operations is used instead.
- **More numbers:** a binary radix sort on each number's rank. The
  number of bits is that of the largest number.

## Using it from Python

```python
from pushswap.cli import push_swap

operations = push_swap(["3", "2", "1"])   # ['ra', 'sa']
```

`push_swap` raises `pushswap.parsing.InputError` for invalid input. That
class is a subclass of `ValueError`. `pushswap.cli.main(argv=None)` runs
the command and returns its exit status.

The modules are:

- `pushswap.stacks`: `Stacks(values)` holds the two deques `a` and `b`,
  each holding `Item` objects with `nb`, `order` and `seen`. It has one
  method per operation: `swap_a`, `swap_b`, `swap_swap`, `push_a`,
  `push_b`, `rotate_a`, `rotate_b`, `rotate_rotate`, `reverse_rotate_a`,
  `reverse_rotate_b` and `reverse_rotate_rotate`. Each operation that takes
  effect is appended by name to `Stacks.operations`, and the method
  returns `True`.
  - A swap or push that has nothing to act on returns `False`.
  - The combined operations do nothing and return `False` when `b` is
    empty.
  - Rotating an empty stack raises `IndexError`.
  - `values_a()` and `values_b()` list the numbers top first.
  - The helpers `has_duplicates`, `is_sorted` and `find_min` are also
    defined here.
- `pushswap.parsing`: the input side.
  - `parse_int` reads one number as described above.
  - `split_arguments` splits a single argument on spaces.
  - `parse_values` checks the tokens and raises `InputError`.
  - `assign_order` ranks the items of `a` from 0 upwards and returns the
    largest number.
- `pushswap.sorting`: `sort` picks the strategy. `sort_three`,
  `sort_five`, `reverse_five` and `sort_radix` implement the strategies.

## What it does not do

The package only produces operations. It has no checker that reads
operations from input and verifies that they sort a given list.