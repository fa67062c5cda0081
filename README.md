# contestkit

A collection of solved programming-contest problems covering counting, greedy,
graph, string and design tasks. Each problem is a plain Python function, or a
small class where the problem needs one. The package uses only the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.biweekly56_57`: `count_triples`, `are_occurrences_equal`,
  `smallest_chair`, `split_painting`, `can_see_persons_count`
- `contestkit.biweekly72_75`: `count_pairs`, `sum_of_three`,
  `maximum_even_split`, `min_bit_flips`, `triangular_sum`, `number_of_ways`
- `contestkit.biweekly79_88`: `digit_count`, `largest_word_count`,
  `maximum_importance`, `count_asterisks`, `count_unreachable_pairs`,
  `maximum_xor`, `best_hand`, `minimum_recolors`, `equal_frequency`
- `contestkit.weekly299_303`: `check_x_matrix`, `count_house_placements`,
  `can_change`, `number_of_pairs`, `maximum_sum`, `smallest_trimmed_numbers`,
  `min_operations`, `repeated_character`, `equal_pairs`, and the
  `FoodRatings` class (`change_rating`, `highest_rated`)
- `contestkit.weekly306_314`: `largest_local`, `edge_score`,
  `smallest_number`, `most_frequent_even`, `partition_string`, `min_groups`,
  `length_of_lis` (built on the `MaxSegmentTree` class with `query` and
  `update`), `hardest_worker`, `find_array`, `robot_with_string`

## Examples

```python
from contestkit.biweekly56_57 import count_triples, can_see_persons_count
from contestkit.weekly299_303 import FoodRatings
from contestkit.weekly306_314 import smallest_number

count_triples(5)                             # 2: (3, 4, 5) and (4, 3, 5)
can_see_persons_count([10, 6, 8, 5, 11, 9])  # [3, 1, 2, 1, 1, 0]
smallest_number("IIIDIDDD")                  # "123549876"

ratings = FoodRatings(["kimchi", "ramen"], ["korean", "japanese"], [9, 14])
ratings.highest_rated("korean")              # "kimchi"
ratings.change_rating("kimchi", 16)
```

Functions take ordinary Python lists and strings and return new values. They
do not change the arguments they are given.

## Errors

Inputs that have no sensible answer raise an exception:

- `ValueError` from `triangular_sum` and `find_array` on an empty list, from
  `hardest_worker` on empty logs, from `check_x_matrix` on an empty grid,
  from `minimum_recolors` when `k` is longer than `blocks`, from `can_change`
  when the two strings differ in length, from `smallest_trimmed_numbers` when
  a trim is longer than a number, from `smallest_number` when no digit string
  fits the pattern, and from `MaxSegmentTree` when its size is not positive.
- `KeyError` from `FoodRatings.change_rating` for an unknown food and from
  `FoodRatings.highest_rated` for an unknown cuisine.
- `IndexError` from `MaxSegmentTree.query` and `MaxSegmentTree.update` for a
  position outside the tree.

## What it does not do

The package is a library only. It has no command-line tool and does not read
problem input from files or standard input; call the functions from Python.