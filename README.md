# adventbox

Solvers for a selection of Advent of Code puzzles from the 2015, 2016, 2017
and 2018 events. The package is a plain Python library that uses only the
standard library.

## Puzzles covered

Each puzzle has its own module, named `y<year>_day<NN>`:

- 2015: `y2015_day04`, `y2015_day06`, `y2015_day08`, `y2015_day09`,
  `y2015_day13`, `y2015_day15`, `y2015_day17`, `y2015_day19`,
  `y2015_day20`, `y2015_day24`
- 2016: `y2016_day03`, `y2016_day05`, `y2016_day07`, `y2016_day09`,
  `y2016_day14`, `y2016_day16`, `y2016_day18`, `y2016_day19`,
  `y2016_day20`, `y2016_day24`
- 2017: `y2017_day04`, `y2017_day05`, `y2017_day07`, `y2017_day11`,
  `y2017_day13`, `y2017_day15`, `y2017_day16`, `y2017_day18`,
  `y2017_day21`, `y2017_day22`, `y2017_day24`
- 2018: `y2018_day01`, `y2018_day02`, `y2018_day12`, `y2018_day14`,
  `y2018_day18`, `y2018_day21`

## Usage

Most modules expose `part1(text)` and `part2(text)`. Each takes the full
puzzle input as a string and returns that part's answer, usually an `int`
and in a few cases a `str` (for example `y2016_day05` passwords,
`y2017_day07.part1` and `y2018_day02.part2`). The modules also expose the
building blocks the solvers use, such as `parse_routes`, `supports_tls`,
`supports_ssl`, `dragon_fill`, `checksum`, `next_row`, `is_triangle` or
`decompressed_length_v1` and `decompressed_length_v2`.

Some puzzles depend on a number that the puzzle text fixes. These functions
take it as a parameter:

- `y2016_day16.solve(text, disk_size)`
- `y2016_day18.count_safe(text, rows)`
- `y2017_day16.dance(text, width=16, rounds=1)`
- `y2017_day21.solve(text, iterations)`
- `y2017_day22.part1(text, bursts=10000)` and `part2(text, bursts=10000000)`
- `y2018_day12.solve(text, generations)`
- `y2018_day18.solve(text, minutes)`
- `y2015_day17.part1(text, liters=150)` and `part2(text, liters=150)`
- `y2017_day13.part1(text, delay=0)`

`y2018_day14.part1(count)` and `part2(value)` take the puzzle number itself
rather than input text, and `y2018_day14.recipes()` yields the recipe scores
forever. `y2018_day21.solve(text)` returns both answers as a tuple, and
`y2018_day21.halting_values(text)` yields the distinct candidate values in
order.

## Example

```python
from pathlib import Path

from adventbox import y2016_day09, y2017_day04

print(y2016_day09.decompressed_length_v1("A(2x2)BCD(2x2)EFG"))  # 11
print(y2017_day04.is_valid("aa bb cc dd aa"))                    # False

text = Path("input.txt").read_text()
print(y2016_day09.part1(text))
print(y2016_day09.part2(text))
```

## What it does not do

- There is no command-line program. Read your puzzle input yourself and pass
  the text to the functions.
- It does not draw or animate anything. The solvers only compute answers.

## Notes

Some solvers search large spaces (MD5 mining, long simulations, generator
pairs run forty million times) and can take a while in pure Python on real
inputs. Where the parser can tell that input is malformed, the solver raises
`ValueError` instead of returning a wrong answer.

## Tests

Install the `test` extra and run `pytest`.