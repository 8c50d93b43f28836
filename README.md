# pushswap

Sort a list of integers using two stacks, `a` and `b`, and print the
stack operations that do it.

The numbers start on stack `a`. The `push-swap` command writes one
operation per line to standard output (`pb`, `ra`, `pa`, `rb`, `sa`,
`sb` or `rra`); applied in order, they leave stack `a` sorted in
ascending order with `b` empty.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, as one quoted string separated
by spaces, or mixed:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
push-swap 5 "1 4" 2 3
```

Behaviour:

- With no arguments nothing is printed and the exit status is 0.
- If the input is already sorted nothing is printed.
- Two, three and five numbers get dedicated short sequences; every other
  count is sorted with a binary radix sort on the numbers' ranks, using
  only `pb`, `ra`, `pa` and `rb`.
- Any argument that is empty or all spaces, holds a character other than
  digits, `+`, `-` or space, is not a well-formed integer (an optional
  sign followed by digits), is outside the 32-bit signed range, or
  repeats another number makes the command print `Error` to standard
  error and exit with status 1.

## Library use

The sorter can be driven from Python:

```python
from pushswap.sorting import solve

solve([3, 2, 1])   # ['ra', 'sa']
```

- `pushswap.sorting` — `solve(values)` returns the instruction list for
  distinct values (raising `ValueError` on duplicates). The strategies
  it uses are available on their own: `rank`, `bit_count`,
  `radix_sort`, `push_back_sorted`, `little_sort` and `five_sort`.
- `pushswap.stacks` — `Stacks` holds the two stacks as deques (index 0
  is the top) with the operations `ra`, `rb`, `pa` and `pb`, and records
  every instruction in `moves`. `emit` records instructions without
  applying them; the short sequences for two, three and five elements
  finish with `sa`, `sb` and `rra` recorded this way.
- `pushswap.parsing` — `parse_arguments(args)` validates command-line
  style strings and returns the numbers they hold, raising `InputError`
  on bad input. The individual checks are `check_characters`,
  `check_blank`, `is_valid_number`, `within_limits` and `count_numbers`.
- `pushswap.cli` — `main(argv=None)` is the command's entry point and
  returns its exit status.

The package also carries the small helpers the program is built on:

- `pushswap.chars` — ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`).
- `pushswap.strutil` — string searching, comparison, copying, splitting
  and fixed-width number conversion (`strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`,
  `split`, `strmapi`, `striteri`, `itoa`, `atoi`, `atol`).
- `pushswap.memory` — byte-buffer fill, copy, move, search and compare
  (`memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`).
- `pushswap.output` — a small printf (`format_printf`, `printf`, with
  `%c %s %p %d %i %u %x %X %%`) and stream writers (`put_char`,
  `put_str`, `put_endl`, `put_nbr`).

## What it does not do

The package only produces instruction sequences. It has no checker that
reads instructions and verifies that they sort a given input, and
`Stacks` itself does not perform `sa`, `sb` or `rra`; those are only
recorded.

## Running the tests

```
pip install ".[test]"
pytest
```