# aocsolve

Solutions to a selection of Advent of Code puzzles. You can use them as a
library or from the command line.

Covered puzzles:

- 2015: day 1
- 2021: days 1–7 and 9–15
- 2022: days 1–6 and 8

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

The `aocsolve` command reads a puzzle input file and prints the answers:

```
aocsolve YEAR DAY [--part {1,2}] [--input FILE]
```

- `YEAR` and `DAY` choose the puzzle, for example `aocsolve 2021 14`.
- `--part` solves only part 1 or only part 2. Without it, both parts are
  solved and printed as `part1: ...` and `part2: ...`.
- `--input` names the input file. The default is `input.txt` in the current
  directory.

The command exits with status 1 in two cases: the input file cannot be read,
or the input is rejected as malformed. It reports an error if there is no
solver for the year and day you ask for.

```
aocsolve --help
```

## Library

Each puzzle lives in its own module, named `year<YYYY>_day<DD>`, for example
`aocsolve.year2021_day04`. Every module has `part1(text)` and `part2(text)`
functions. They take the whole puzzle input as a string and return the
answer:

```python
from aocsolve import year2022_day06

print(year2022_day06.part1("mjqjpqmgbljsphdztnvjfqwrcgsmlb"))  # 7
```

Malformed input raises `ValueError`.

Some parts take extra arguments with defaults:

- `year2021_day03.part1(text, num_bits=12)` and `part2(text, num_bits=12)`
  set the width of the binary readings.
- `year2021_day11.part1(text, steps=100)` sets the number of steps.
- `year2021_day14.part1(text, steps=10)` sets the number of steps.
- `year2021_day15.part2(text, multiplier=5)` sets how many times the cave is
  tiled in each direction.

`year2021_day13.part2` returns the folded sheet drawn as text, with `#` for a
dot and `.` for an empty spot.

The modules also expose the building blocks they use. For example:

- `year2021_day15.a_star` is a generic A* search.
- `year2021_day04.BingoBoard` models a bingo board.
- `year2021_day13.fold_paper` and `year2021_day13.render` fold and draw the
  sheet of dots.

To get the answer for any covered puzzle by year, day and part, call
`aocsolve.cli.solve(year, day, part, text)`.

Shared input helpers live in `aocsolve.parsing`:

- `split(text, delim=" ")` splits on a delimiter and drops empty pieces.
- `split_pair(text, delim=" ")` expects exactly two pieces and returns them
  as a tuple.
- `digits(line)` turns a line of decimal digits into a list of integers.

## Limitations

The package only solves puzzles from input you already have. It does not
download puzzle inputs or submit answers. It also does not set up
directories for new puzzle days.